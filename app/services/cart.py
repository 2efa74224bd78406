from decimal import Decimal, ROUND_HALF_UP
from typing import Any, List, Optional
from sqlmodel import Session

from app.core.exceptions import InsufficientStock, InvalidInput, NotFound, Unavailable
from app.core.logging import get_logger
from app.core.validation import validate_id, validate_quantity
from app.db.cart_store import CartStore
from app.schemas.cart import Cart, CartLine

logger = get_logger(__name__)

def cart_total(items: List[CartLine]) -> float:
    """Sum of price * quantity, rounded half-up to cents"""
    total = sum(
        (Decimal(str(line.product.price)) * line.quantity for line in items),
        Decimal("0"),
    )
    return float(total.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))

class CartService:
    """
    Cart use cases on top of CartStore.
    Holds no state between calls; everything is read from the store each time.
    """

    def __init__(self, session: Session, store: Optional[CartStore] = None):
        self.store = store or CartStore(session)

    def get_cart(self, user_id: Any) -> Cart:
        """Get all cart lines for a user with product details and totals"""
        user_id = validate_id(user_id)
        self._require_user(user_id)

        items = self.store.fetch_items(user_id)
        return Cart(
            user_id=user_id,
            items=items,
            total_items=len(items),
            total_price=cart_total(items),
        )

    def add_item(self, user_id: Any, product_id: Any, quantity: Any = 1) -> CartLine:
        """Add item to cart or increase its quantity if already there"""
        user_id = validate_id(user_id)
        product_id = validate_id(product_id)
        quantity = validate_quantity(quantity)
        if quantity == 0:
            raise InvalidInput("Quantity must be at least 1")

        # Existence first, then availability and stock
        self._require_user(user_id)
        product = self.store.fetch_product(product_id)
        if not product:
            raise NotFound(f"Product with id {product_id} not found")
        if not product.is_available:
            raise Unavailable(product_id)

        existing = self.store.fetch_item(user_id, product_id)
        new_quantity = quantity + (existing.quantity if existing else 0)
        if new_quantity > product.stock_count:
            raise InsufficientStock(product_id, product.stock_count, new_quantity)

        self.store.upsert_item(user_id, product_id, new_quantity)
        logger.info(
            "User %s cart: product %s quantity %s -> %s",
            user_id, product_id, existing.quantity if existing else 0, new_quantity
        )
        return self.store.fetch_item(user_id, product_id)

    def update_quantity(self, user_id: Any, product_id: Any, quantity: Any) -> Optional[CartLine]:
        """
        Overwrite the quantity of a line already in the cart.
        A quantity of 0 removes the line and returns None.
        """
        user_id = validate_id(user_id)
        product_id = validate_id(product_id)
        quantity = validate_quantity(quantity)

        existing = self.store.fetch_item(user_id, product_id)
        if not existing:
            raise NotFound(f"Cart item not found for user {user_id} and product {product_id}")

        if quantity == 0:
            self.store.delete_item(user_id, product_id)
            logger.info("User %s cart: product %s removed by zero quantity", user_id, product_id)
            return None

        product = self.store.fetch_product(product_id)
        if not product:
            raise NotFound(f"Product with id {product_id} not found")
        if quantity > product.stock_count:
            raise InsufficientStock(product_id, product.stock_count, quantity)

        self.store.upsert_item(user_id, product_id, quantity)
        logger.info(
            "User %s cart: product %s quantity %s -> %s",
            user_id, product_id, existing.quantity, quantity
        )
        return self.store.fetch_item(user_id, product_id)

    def remove_item(self, user_id: Any, product_id: Any) -> None:
        user_id = validate_id(user_id)
        product_id = validate_id(product_id)

        if not self.store.delete_item(user_id, product_id):
            raise NotFound(f"Cart item not found for user {user_id} and product {product_id}")
        logger.info("User %s cart: product %s removed", user_id, product_id)

    def clear_cart(self, user_id: Any) -> None:
        """Clear all items from user's cart. Succeeds on an empty cart too."""
        user_id = validate_id(user_id)
        removed = self.store.delete_all_items(user_id)
        logger.info("User %s cart cleared (%s lines)", user_id, removed)

    def _require_user(self, user_id: int) -> None:
        if not self.store.fetch_user(user_id):
            raise NotFound(f"User with id {user_id} not found")
