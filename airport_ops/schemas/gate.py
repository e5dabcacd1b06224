from pydantic import constr
from typing import Optional

from airport_ops.schemas.base import CamelModel
from airport_ops.schemas.enums import GateStatus


class GateCreate(CamelModel):
    gate_number: constr(strip_whitespace=True, min_length=1, max_length=10)
    terminal: constr(min_length=1)
    status: GateStatus
    current_flight_id: Optional[int] = None


class GateUpdate(CamelModel):
    gate_number: constr(strip_whitespace=True, min_length=1, max_length=10) = None
    terminal: constr(min_length=1) = None
    status: GateStatus = None
    current_flight_id: Optional[int] = None


class Gate(GateCreate):
    id: int
