from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.base import BaseSchema
from app.schemas.catalog import ReviewRead
from app.services.review import ReviewService

router = APIRouter()

class ReviewCreate(BaseSchema):
    product_id: Any = None
    user_id: Any = None
    rating: Any = None
    comment: Optional[str] = None

def get_review_service(session: Session = Depends(get_session)) -> ReviewService:
    return ReviewService(session)

@router.get("/", response_model=List[ReviewRead])
def read_reviews(service: ReviewService = Depends(get_review_service)):
    """All reviews, newest first"""
    return service.get_reviews()

@router.get("/product/{product_id}", response_model=List[ReviewRead])
def read_product_reviews(product_id: str, service: ReviewService = Depends(get_review_service)):
    return service.get_product_reviews(product_id)

@router.get("/{review_id}", response_model=ReviewRead)
def read_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    return service.get_review(review_id)

@router.post("/", response_model=ReviewRead, status_code=status.HTTP_201_CREATED)
def create_review(review_in: ReviewCreate, service: ReviewService = Depends(get_review_service)):
    if review_in.product_id is None or review_in.user_id is None or review_in.rating is None:
        raise HTTPException(status_code=400, detail="Product ID, user ID and rating are required")
    return service.add_review(review_in.product_id, review_in.user_id, review_in.rating, review_in.comment)

@router.delete("/{review_id}")
def delete_review(review_id: str, service: ReviewService = Depends(get_review_service)):
    service.remove_review(review_id)
    return {"message": "Review removed successfully"}
