"""
Products API Endpoints

Handles product catalog management, low-stock and price-range queries.
"""
from decimal import Decimal
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from kiosk.api.dependencies import get_product_service
from kiosk.domain.product import Product
from kiosk.services import ProductService

router = APIRouter()


# Request models
class ProductCreate(BaseModel):
    name: str
    description: Optional[str] = None
    price: Decimal
    stock_quantity: int = 0
    sku: Optional[str] = None


class ProductUpdate(ProductCreate):
    pass


def _listing(products):
    return {
        "status": "success",
        "count": len(products),
        "data": [product.to_dict() for product in products]
    }


@router.get("/")
def get_products(service: ProductService = Depends(get_product_service)):
    """Get all products ordered by name"""
    return _listing(service.get_all_products())


@router.get("/search")
def search_products(
    q: str = Query("", description="Matches name, description or SKU (case-insensitive)"),
    service: ProductService = Depends(get_product_service)
):
    return _listing(service.search_products(q))


@router.get("/low-stock")
def get_low_stock_products(
    threshold: int = Query(10, ge=0, description="Products with stock below this value"),
    service: ProductService = Depends(get_product_service)
):
    return _listing(service.get_low_stock_products(threshold))


@router.get("/price-range")
def get_products_by_price_range(
    min_price: Decimal = Query(..., description="Lowest price (inclusive)"),
    max_price: Decimal = Query(..., description="Highest price (inclusive)"),
    service: ProductService = Depends(get_product_service)
):
    return _listing(service.get_products_by_price_range(min_price, max_price))


@router.get("/count")
def get_product_count(service: ProductService = Depends(get_product_service)):
    return {"status": "success", "data": {"total": service.get_product_count()}}


@router.get("/{product_id}")
def get_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    product = service.get_product_by_id(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail=f"Product '{product_id}' not found")
    return {"status": "success", "data": product.to_dict()}


@router.post("/", status_code=201)
def create_product(payload: ProductCreate, service: ProductService = Depends(get_product_service)):
    product = service.create_product(
        name=payload.name,
        description=payload.description,
        price=payload.price,
        stock_quantity=payload.stock_quantity,
        sku=payload.sku,
    )
    return {"status": "success", "data": product.to_dict()}


@router.put("/{product_id}")
def update_product(
    product_id: UUID,
    payload: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    existing = service.get_product_by_id(product_id)
    product = Product(
        id=product_id,
        created_at=existing.created_at if existing else None,
        **payload.model_dump()
    )
    service.update_product(product)
    return {"status": "success", "data": product.to_dict()}


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: UUID, service: ProductService = Depends(get_product_service)):
    service.delete_product(product_id)
