"""
Employees API Endpoints

Includes the active/inactive partition and the activate/deactivate
transitions.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from kiosk.api.dependencies import get_employee_service
from kiosk.domain.employee import Employee
from kiosk.services import EmployeeService

router = APIRouter()


# Request models
class EmployeeCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    hire_date: datetime
    hourly_rate: Decimal
    is_active: bool = True


class EmployeeUpdate(EmployeeCreate):
    pass


def _listing(employees):
    return {
        "status": "success",
        "count": len(employees),
        "data": [employee.to_dict() for employee in employees]
    }


@router.get("/")
def get_employees(service: EmployeeService = Depends(get_employee_service)):
    return _listing(service.get_all_employees())


@router.get("/search")
def search_employees(
    q: str = Query("", description="Matches first name, last name or email (case-insensitive)"),
    service: EmployeeService = Depends(get_employee_service)
):
    return _listing(service.search_employees(q))


@router.get("/active")
def get_active_employees(service: EmployeeService = Depends(get_employee_service)):
    return _listing(service.get_active_employees())


@router.get("/inactive")
def get_inactive_employees(service: EmployeeService = Depends(get_employee_service)):
    return _listing(service.get_inactive_employees())


@router.get("/count")
def get_employee_count(service: EmployeeService = Depends(get_employee_service)):
    return {
        "status": "success",
        "data": {
            "total": service.get_employee_count(),
            "active": service.get_active_employee_count(),
        }
    }


@router.get("/{employee_id}")
def get_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    employee = service.get_employee_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail=f"Employee '{employee_id}' not found")
    return {"status": "success", "data": employee.to_dict()}


@router.post("/", status_code=201)
def create_employee(payload: EmployeeCreate, service: EmployeeService = Depends(get_employee_service)):
    employee = service.create_employee(**payload.model_dump())
    return {"status": "success", "data": employee.to_dict()}


@router.put("/{employee_id}")
def update_employee(
    employee_id: UUID,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service)
):
    employee = Employee(id=employee_id, **payload.model_dump())
    service.update_employee(employee)
    return {"status": "success", "data": employee.to_dict()}


@router.delete("/{employee_id}", status_code=204)
def delete_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    service.delete_employee(employee_id)


@router.post("/{employee_id}/activate")
def activate_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    """Inactive -> Active; already-active employees are left untouched"""
    service.activate_employee(employee_id)
    return {"status": "success", "data": service.get_employee_by_id(employee_id).to_dict()}


@router.post("/{employee_id}/deactivate")
def deactivate_employee(employee_id: UUID, service: EmployeeService = Depends(get_employee_service)):
    """Active -> Inactive; already-inactive employees are left untouched"""
    service.deactivate_employee(employee_id)
    return {"status": "success", "data": service.get_employee_by_id(employee_id).to_dict()}
