from sqlalchemy import Column, Integer, String, Text
from airport_ops.database import Base


class Gate(Base):
    __tablename__ = "gates"
    __table_args__ = {"sqlite_autoincrement": True}

    id                = Column(Integer, primary_key=True, index=True, autoincrement=True)
    gate_number       = Column(String(10), unique=True, nullable=False)
    terminal          = Column(Text, nullable=False)
    status            = Column(String(20), nullable=False, index=True)
    current_flight_id = Column(Integer, nullable=True)  # flights.id, not enforced
