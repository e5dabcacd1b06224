from enum import Enum


class FlightStatus(str, Enum):
    scheduled = "scheduled"
    delayed = "delayed"
    departed = "departed"
    arrived = "arrived"
    cancelled = "cancelled"


class GateStatus(str, Enum):
    available = "available"
    occupied = "occupied"
    maintenance = "maintenance"
    closed = "closed"


class EmployeeRole(str, Enum):
    pilot = "pilot"
    flight_attendant = "flight_attendant"
    gate_agent = "gate_agent"
    ground_staff = "ground_staff"
    security = "security"
    administration = "administration"
