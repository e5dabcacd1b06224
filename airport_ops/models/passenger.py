from sqlalchemy import Column, Integer, String, Text, Boolean
from airport_ops.database import Base


class Passenger(Base):
    __tablename__ = "passengers"
    __table_args__ = {"sqlite_autoincrement": True}

    id          = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first_name  = Column(Text, nullable=False)
    last_name   = Column(Text, nullable=False)
    email       = Column(String(255), nullable=False)
    flight_id   = Column(Integer, nullable=True, index=True)  # flights.id, no cascade
    seat_number = Column(String(10), nullable=True)
    checked_in  = Column(Boolean, nullable=False, default=False)
