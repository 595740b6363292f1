"""
Customers API Endpoints

Thin layer over CustomerService; error translation lives in kiosk.main.
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from kiosk.api.dependencies import get_customer_service
from kiosk.domain.customer import Customer
from kiosk.services import CustomerService

router = APIRouter()


# Request models
class CustomerCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None


class CustomerUpdate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None


@router.get("/")
def get_customers(service: CustomerService = Depends(get_customer_service)):
    """Get all customers ordered by last name, first name"""
    customers = service.get_all_customers()
    return {
        "status": "success",
        "count": len(customers),
        "data": [customer.to_dict() for customer in customers]
    }


@router.get("/search")
def search_customers(
    q: str = Query("", description="Matches first name, last name or email (case-insensitive)"),
    service: CustomerService = Depends(get_customer_service)
):
    customers = service.search_customers(q)
    return {
        "status": "success",
        "count": len(customers),
        "data": [customer.to_dict() for customer in customers]
    }


@router.get("/count")
def get_customer_count(service: CustomerService = Depends(get_customer_service)):
    return {"status": "success", "data": {"total": service.get_customer_count()}}


@router.get("/{customer_id}")
def get_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    customer = service.get_customer_by_id(customer_id)
    if customer is None:
        raise HTTPException(status_code=404, detail=f"Customer '{customer_id}' not found")
    return {"status": "success", "data": customer.to_dict()}


@router.post("/", status_code=201)
def create_customer(payload: CustomerCreate, service: CustomerService = Depends(get_customer_service)):
    customer = service.create_customer(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        phone=payload.phone,
    )
    return {"status": "success", "data": customer.to_dict()}


@router.put("/{customer_id}")
def update_customer(
    customer_id: UUID,
    payload: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service)
):
    """Replace a customer's fields; created_at is kept"""
    existing = service.get_customer_by_id(customer_id)
    customer = Customer(
        id=customer_id,
        created_at=existing.created_at if existing else None,
        **payload.model_dump()
    )
    service.update_customer(customer)
    return {"status": "success", "data": customer.to_dict()}


@router.delete("/{customer_id}", status_code=204)
def delete_customer(customer_id: UUID, service: CustomerService = Depends(get_customer_service)):
    service.delete_customer(customer_id)
