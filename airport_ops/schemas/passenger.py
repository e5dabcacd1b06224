from pydantic import constr
from typing import Optional

from airport_ops.schemas.base import CamelModel
from airport_ops.schemas.employee import Email


class PassengerCreate(CamelModel):
    first_name: constr(min_length=1)
    last_name: constr(min_length=1)
    email: Email
    flight_id: Optional[int] = None
    seat_number: Optional[constr(max_length=10)] = None
    checked_in: bool = False


class PassengerUpdate(CamelModel):
    first_name: constr(min_length=1) = None
    last_name: constr(min_length=1) = None
    email: Email = None
    flight_id: Optional[int] = None
    seat_number: Optional[constr(max_length=10)] = None
    checked_in: bool = None


class Passenger(PassengerCreate):
    id: int
