from typing import List, Optional
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlmodel import Session
from app.db.session import get_session
from app.models.category import Category
from app.services.category import CategoryService

router = APIRouter()

class CategoryCreate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None

def get_category_service(session: Session = Depends(get_session)) -> CategoryService:
    return CategoryService(session)

@router.get("/", response_model=List[Category])
def read_categories(service: CategoryService = Depends(get_category_service)):
    return service.get_categories()

@router.get("/product/{product_id}", response_model=Category)
def read_product_category(product_id: str, service: CategoryService = Depends(get_category_service)):
    """Category a product belongs to"""
    return service.get_product_category(product_id)

@router.post("/", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(category_in: CategoryCreate, service: CategoryService = Depends(get_category_service)):
    return service.add_category(category_in.name, category_in.description)
