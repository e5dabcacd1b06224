from sqlalchemy import Column, Integer, String, Text, Date, Time
from airport_ops.database import Base


class Flight(Base):
    __tablename__ = "flights"
    __table_args__ = {"sqlite_autoincrement": True}

    id             = Column(Integer, primary_key=True, index=True, autoincrement=True)
    flight_number  = Column(String(10), unique=True, nullable=False)
    airline        = Column(Text, nullable=False)
    origin         = Column(Text, nullable=False)
    destination    = Column(Text, nullable=False)
    departure_date = Column(Date, nullable=False, index=True)
    departure_time = Column(Time, nullable=False)
    gate_id        = Column(Integer, nullable=True)  # gates.id, not enforced
    status         = Column(String(20), nullable=False, index=True)
