import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from airport_ops.auth.dependencies import require_auth
from airport_ops.dependencies import get_storage
from airport_ops.schemas.enums import GateStatus
from airport_ops.schemas.gate import Gate, GateCreate, GateUpdate
from airport_ops.schemas.stats import Page
from airport_ops.storage.base import Storage, GateFilter, Sort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gates", tags=["gates"], dependencies=[Depends(require_auth)])


@router.get("", response_model=Page[Gate])
def list_gates(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=500),
    status: Optional[GateStatus] = None,
    terminal: Optional[str] = None,
    sort: str = "id",
    order: str = "asc",
    storage: Storage = Depends(get_storage),
):
    filters = GateFilter(status=status.value if status else None, terminal=terminal)
    gates = storage.list_gates(offset, limit, filters, Sort(sort, order))
    return {"data": gates, "total": storage.count_gates(filters)}


# declared before /{gate_id} so "available" is not parsed as an id
@router.get("/available", response_model=List[Gate])
def list_available_gates(storage: Storage = Depends(get_storage)):
    return storage.list_available_gates()


@router.get("/{gate_id}", response_model=Gate)
def get_gate(gate_id: int, storage: Storage = Depends(get_storage)):
    gate = storage.get_gate(gate_id)
    if not gate:
        raise HTTPException(status_code=404, detail="Gate not found")
    return gate


@router.post("", response_model=Gate, status_code=201)
def create_gate(payload: GateCreate, storage: Storage = Depends(get_storage)):
    gate = storage.create_gate(payload)
    logger.info(f"Gate {gate.gate_number} created (ID: {gate.id})")
    return gate


@router.put("/{gate_id}", response_model=Gate)
def update_gate(gate_id: int, payload: GateUpdate, storage: Storage = Depends(get_storage)):
    gate = storage.update_gate(gate_id, payload.model_dump(exclude_unset=True))
    if not gate:
        raise HTTPException(status_code=404, detail="Gate not found")
    logger.info(f"Gate {gate.id} updated")
    return gate


@router.delete("/{gate_id}", status_code=204, response_class=Response)
def delete_gate(gate_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_gate(gate_id):
        raise HTTPException(status_code=404, detail="Gate not found")
    logger.info(f"Gate {gate_id} deleted")
    return Response(status_code=204)
