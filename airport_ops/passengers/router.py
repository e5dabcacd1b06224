import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from airport_ops.auth.dependencies import require_auth
from airport_ops.dependencies import get_storage
from airport_ops.schemas.passenger import Passenger, PassengerCreate, PassengerUpdate
from airport_ops.schemas.stats import Page
from airport_ops.storage.base import Storage, PassengerFilter, Sort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/passengers", tags=["passengers"], dependencies=[Depends(require_auth)])


@router.get("", response_model=Page[Passenger])
def list_passengers(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=500),
    flight_id: Optional[int] = Query(None, alias="flightId"),
    sort: str = "id",
    order: str = "asc",
    storage: Storage = Depends(get_storage),
):
    filters = PassengerFilter(flight_id=flight_id)
    passengers = storage.list_passengers(offset, limit, filters, Sort(sort, order))
    return {"data": passengers, "total": storage.count_passengers(filters)}


@router.get("/{passenger_id}", response_model=Passenger)
def get_passenger(passenger_id: int, storage: Storage = Depends(get_storage)):
    passenger = storage.get_passenger(passenger_id)
    if not passenger:
        raise HTTPException(status_code=404, detail="Passenger not found")
    return passenger


@router.post("", response_model=Passenger, status_code=201)
def create_passenger(payload: PassengerCreate, storage: Storage = Depends(get_storage)):
    passenger = storage.create_passenger(payload)
    logger.info(f"Passenger {passenger.id} created")
    return passenger


@router.put("/{passenger_id}", response_model=Passenger)
def update_passenger(passenger_id: int, payload: PassengerUpdate, storage: Storage = Depends(get_storage)):
    passenger = storage.update_passenger(passenger_id, payload.model_dump(exclude_unset=True))
    if not passenger:
        raise HTTPException(status_code=404, detail="Passenger not found")
    logger.info(f"Passenger {passenger.id} updated")
    return passenger


@router.delete("/{passenger_id}", status_code=204, response_class=Response)
def delete_passenger(passenger_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_passenger(passenger_id):
        raise HTTPException(status_code=404, detail="Passenger not found")
    logger.info(f"Passenger {passenger_id} deleted")
    return Response(status_code=204)
