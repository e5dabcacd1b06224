from pydantic import constr
from typing import Optional

from airport_ops.schemas.base import CamelModel
from airport_ops.schemas.enums import EmployeeRole

Email = constr(strip_whitespace=True, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class EmployeeCreate(CamelModel):
    first_name: constr(min_length=1)
    last_name: constr(min_length=1)
    email: Email
    phone: Optional[str] = None
    role: EmployeeRole
    assigned_flight_id: Optional[int] = None
    assigned_gate_id: Optional[int] = None


class EmployeeUpdate(CamelModel):
    first_name: constr(min_length=1) = None
    last_name: constr(min_length=1) = None
    email: Email = None
    phone: Optional[str] = None
    role: EmployeeRole = None
    assigned_flight_id: Optional[int] = None
    assigned_gate_id: Optional[int] = None


class Employee(EmployeeCreate):
    id: int
