from typing import Dict, List

from fastapi import APIRouter, Depends, Query

from airport_ops.auth.dependencies import require_auth
from airport_ops.dependencies import get_storage
from airport_ops.schemas.stats import CountResponse, DailyTraffic, OverviewStats, PassengersPerFlight
from airport_ops.storage import stats
from airport_ops.storage.base import Storage

router = APIRouter(prefix="/stats", tags=["stats"], dependencies=[Depends(require_auth)])


@router.get("/flights-today", response_model=CountResponse)
def flights_today(storage: Storage = Depends(get_storage)):
    return {"count": storage.flights_departing_today()}


@router.get("/flights-status", response_model=Dict[str, int])
def flights_status(storage: Storage = Depends(get_storage)):
    return storage.flight_status_distribution()


@router.get("/gates-status", response_model=Dict[str, int])
def gates_status(storage: Storage = Depends(get_storage)):
    return storage.gate_status_distribution()


@router.get("/passengers-per-flight", response_model=List[PassengersPerFlight])
def passengers_per_flight(storage: Storage = Depends(get_storage)):
    return storage.passengers_per_flight()


@router.get("/daily-traffic", response_model=List[DailyTraffic])
def daily_traffic(days: int = Query(7, ge=1, le=366), storage: Storage = Depends(get_storage)):
    return storage.daily_flight_traffic(days)


@router.get("/employees-role-count", response_model=Dict[str, int])
def employees_role_count(storage: Storage = Depends(get_storage)):
    return storage.employee_role_distribution()


@router.get("/overview", response_model=OverviewStats)
def overview(storage: Storage = Depends(get_storage)):
    flight_distribution = storage.flight_status_distribution()
    return OverviewStats(
        flights_today=storage.flights_departing_today(),
        total_passengers=storage.count_passengers(),
        on_time_percentage=stats.on_time_percentage(flight_distribution),
        active_gates=stats.active_gates(storage.gate_status_distribution()),
    )
