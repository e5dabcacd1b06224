from pydantic import BaseModel
from typing import Generic, List, TypeVar

from airport_ops.schemas.base import CamelModel

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    data: List[T]
    total: int


class MessageResponse(BaseModel):
    message: str


class CountResponse(BaseModel):
    count: int


class PassengersPerFlight(CamelModel):
    flight_number: str
    passenger_count: int


class DailyTraffic(BaseModel):
    date: str
    arrivals: int
    departures: int


class OverviewStats(CamelModel):
    flights_today: int
    total_passengers: int
    on_time_percentage: int
    active_gates: str
