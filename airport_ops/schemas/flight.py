from pydantic import constr
from typing import Optional
from datetime import date, time

from airport_ops.schemas.base import CamelModel
from airport_ops.schemas.enums import FlightStatus


class FlightCreate(CamelModel):
    flight_number: constr(strip_whitespace=True, min_length=1, max_length=10)
    airline: constr(min_length=1)
    origin: constr(min_length=1)
    destination: constr(min_length=1)
    departure_date: date
    departure_time: time
    gate_id: Optional[int] = None
    status: FlightStatus

    class Config:
        json_schema_extra = {
            "example": {
                "flightNumber": "AA1234",
                "airline": "American Airlines",
                "origin": "New York (JFK)",
                "destination": "Los Angeles (LAX)",
                "departureDate": "2025-05-17",
                "departureTime": "10:30:00",
                "gateId": 1,
                "status": "scheduled"
            }
        }


# Omitted fields stay unset; null is only accepted where the column is nullable
class FlightUpdate(CamelModel):
    flight_number: constr(strip_whitespace=True, min_length=1, max_length=10) = None
    airline: constr(min_length=1) = None
    origin: constr(min_length=1) = None
    destination: constr(min_length=1) = None
    departure_date: date = None
    departure_time: time = None
    gate_id: Optional[int] = None
    status: FlightStatus = None


class Flight(FlightCreate):
    id: int
