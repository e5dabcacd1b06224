from sqlalchemy import Column, Integer, String, Text
from airport_ops.database import Base


class Employee(Base):
    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id                 = Column(Integer, primary_key=True, index=True, autoincrement=True)
    first_name         = Column(Text, nullable=False)
    last_name          = Column(Text, nullable=False)
    email              = Column(String(255), unique=True, nullable=False)
    phone              = Column(Text, nullable=True)
    role               = Column(String(30), nullable=False, index=True)
    # loose references, deleting the flight or gate leaves these untouched
    assigned_flight_id = Column(Integer, nullable=True)
    assigned_gate_id   = Column(Integer, nullable=True)
