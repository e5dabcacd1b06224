import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from airport_ops.auth.dependencies import require_auth
from airport_ops.dependencies import get_storage
from airport_ops.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from airport_ops.schemas.enums import EmployeeRole
from airport_ops.schemas.stats import Page
from airport_ops.storage.base import Storage, EmployeeFilter, Sort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"], dependencies=[Depends(require_auth)])


@router.get("", response_model=Page[Employee])
def list_employees(
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=500),
    role: Optional[EmployeeRole] = None,
    sort: str = "id",
    order: str = "asc",
    storage: Storage = Depends(get_storage),
):
    filters = EmployeeFilter(role=role.value if role else None)
    employees = storage.list_employees(offset, limit, filters, Sort(sort, order))
    return {"data": employees, "total": storage.count_employees(filters)}


@router.get("/{employee_id}", response_model=Employee)
def get_employee(employee_id: int, storage: Storage = Depends(get_storage)):
    employee = storage.get_employee(employee_id)
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.post("", response_model=Employee, status_code=201)
def create_employee(payload: EmployeeCreate, storage: Storage = Depends(get_storage)):
    employee = storage.create_employee(payload)
    logger.info(f"Employee {employee.email} created (ID: {employee.id})")
    return employee


@router.put("/{employee_id}", response_model=Employee)
def update_employee(employee_id: int, payload: EmployeeUpdate, storage: Storage = Depends(get_storage)):
    employee = storage.update_employee(employee_id, payload.model_dump(exclude_unset=True))
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    logger.info(f"Employee {employee.id} updated")
    return employee


@router.delete("/{employee_id}", status_code=204, response_class=Response)
def delete_employee(employee_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_employee(employee_id):
        raise HTTPException(status_code=404, detail="Employee not found")
    logger.info(f"Employee {employee_id} deleted")
    return Response(status_code=204)
