import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from airport_ops.auth.dependencies import require_auth
from airport_ops.dependencies import get_storage
from airport_ops.schemas.enums import FlightStatus
from airport_ops.schemas.flight import Flight, FlightCreate, FlightUpdate
from airport_ops.schemas.stats import Page
from airport_ops.storage.base import Storage, FlightFilter, Sort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flights", tags=["flights"], dependencies=[Depends(require_auth)])


@router.get("", response_model=Page[Flight])
def list_flights(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=500),
    search: Optional[str] = Query(None, description="flight number, origin or destination"),
    status: Optional[FlightStatus] = None,
    sort: str = "id",
    order: str = "asc",
    storage: Storage = Depends(get_storage),
):
    filters = FlightFilter(search=search, status=status.value if status else None)
    flights = storage.list_flights(offset, limit, filters, Sort(sort, order))
    return {"data": flights, "total": storage.count_flights(filters)}


@router.get("/{flight_id}", response_model=Flight)
def get_flight(flight_id: int, storage: Storage = Depends(get_storage)):
    flight = storage.get_flight(flight_id)
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    return flight


@router.post("", response_model=Flight, status_code=201)
def create_flight(payload: FlightCreate, storage: Storage = Depends(get_storage)):
    flight = storage.create_flight(payload)
    logger.info(f"Flight {flight.flight_number} created (ID: {flight.id})")
    return flight


@router.put("/{flight_id}", response_model=Flight)
def update_flight(flight_id: int, payload: FlightUpdate, storage: Storage = Depends(get_storage)):
    flight = storage.update_flight(flight_id, payload.model_dump(exclude_unset=True))
    if not flight:
        raise HTTPException(status_code=404, detail="Flight not found")
    logger.info(f"Flight {flight.id} updated")
    return flight


@router.delete("/{flight_id}", status_code=204, response_class=Response)
def delete_flight(flight_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_flight(flight_id):
        raise HTTPException(status_code=404, detail="Flight not found")
    logger.info(f"Flight {flight_id} deleted")
    return Response(status_code=204)
