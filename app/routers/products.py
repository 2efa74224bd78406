from typing import Any, List, Optional
from fastapi import APIRouter, Depends, status
from pydantic.alias_generators import to_snake
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.base import BaseSchema
from app.schemas.catalog import ProductRead
from app.services.product import ProductService

router = APIRouter()

class ProductCreate(BaseSchema):
    name: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    price: Any = None
    stock_count: Any = 0
    brand: Optional[str] = None
    image_url: Optional[str] = None
    is_available: bool = True
    category_id: Any = None

class ProductChange(BaseSchema):
    attr: Optional[str] = None
    value: Any = None

def get_product_service(session: Session = Depends(get_session)) -> ProductService:
    return ProductService(session)

@router.get("/", response_model=List[ProductRead])
def read_products(
    available: Optional[bool] = None,
    category_id: Optional[str] = None,
    sort: Optional[str] = None,
    service: ProductService = Depends(get_product_service)
):
    return service.list_products(available=available, category_id=category_id, sort=sort)

@router.get("/{product_id}", response_model=ProductRead)
def read_product(product_id: str, service: ProductService = Depends(get_product_service)):
    return service.get_product(product_id)

@router.post("/", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(product_in: ProductCreate, service: ProductService = Depends(get_product_service)):
    return service.create_product(product_in.model_dump())

@router.patch("/{product_id}", response_model=ProductRead)
def change_product(
    product_id: str,
    change: ProductChange,
    service: ProductService = Depends(get_product_service)
):
    """Change one attribute of a product; attr may be camelCase (stockCount)"""
    attr = to_snake(change.attr) if change.attr else change.attr
    return service.change_product(product_id, attr, change.value)

@router.delete("/{product_id}")
def delete_product(product_id: str, service: ProductService = Depends(get_product_service)):
    service.remove_product(product_id)
    return {"message": "Product removed"}
