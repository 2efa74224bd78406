from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.base import BaseSchema
from app.schemas.cart import Cart
from app.services.cart import CartService

router = APIRouter()

# Raw JSON values; the service validators do the parsing
class CartItemCreate(BaseSchema):
    product_id: Any = None
    quantity: Any = 1

class CartItemUpdate(BaseSchema):
    quantity: Any = None

def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)

@router.get("/{user_id}", response_model=Cart)
def get_cart(user_id: str, service: CartService = Depends(get_cart_service)):
    """Get user's cart with totals"""
    return service.get_cart(user_id)

@router.post("/{user_id}/items", status_code=status.HTTP_201_CREATED)
def add_to_cart(
    user_id: str,
    cart_item: CartItemCreate,
    service: CartService = Depends(get_cart_service)
):
    """Add item to cart"""
    if cart_item.product_id is None or cart_item.product_id == "":
        raise HTTPException(status_code=400, detail="Product ID is required")
    item = service.add_item(user_id, cart_item.product_id, cart_item.quantity)
    return {"message": "Item added to cart", "item": item}

@router.patch("/{user_id}/items/{product_id}")
def update_cart_item(
    user_id: str,
    product_id: str,
    cart_update: CartItemUpdate,
    service: CartService = Depends(get_cart_service)
):
    """Set the quantity of a cart item; 0 removes it"""
    if cart_update.quantity is None:
        raise HTTPException(status_code=400, detail="Quantity is required")

    item = service.update_quantity(user_id, product_id, cart_update.quantity)
    if item is None:
        return {"message": "Item removed from cart", "productId": int(product_id)}
    return {"message": "Cart item updated", "item": item}

@router.delete("/{user_id}/items/{product_id}")
def remove_from_cart(
    user_id: str,
    product_id: str,
    service: CartService = Depends(get_cart_service)
):
    """Remove item from cart"""
    service.remove_item(user_id, product_id)
    return {"message": "Item removed from cart"}

@router.delete("/{user_id}")
def clear_cart(user_id: str, service: CartService = Depends(get_cart_service)):
    """Clear entire cart"""
    service.clear_cart(user_id)
    return {"message": "Cart cleared"}
