from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, select, delete

from app.models.cart import CartItem
from app.models.product import Product
from app.models.user import User
from app.schemas.cart import CartLine, ProductSnapshot, UserRecord

_UPSERT_DIALECTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}

class CartStore:
    """
    Thin pass-through to the relational store for the cart.
    No business rules live here; every write commits on its own.
    """

    def __init__(self, session: Session):
        self.session = session

    def fetch_items(self, user_id: int) -> List[CartLine]:
        rows = self.session.exec(
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id)
            .where(CartItem.user_id == user_id)
            .order_by(CartItem.created_at, CartItem.product_id)
        ).all()
        return [self._to_line(item, product) for item, product in rows]

    def fetch_item(self, user_id: int, product_id: int) -> Optional[CartLine]:
        row = self.session.exec(
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id)
            .where(
                CartItem.user_id == user_id,
                CartItem.product_id == product_id
            )
        ).first()
        if not row:
            return None
        item, product = row
        return self._to_line(item, product)

    def upsert_item(self, user_id: int, product_id: int, quantity: int) -> None:
        """Insert the row, or overwrite its quantity if the pair already exists"""
        now = datetime.now(timezone.utc)
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_DIALECTS.get(dialect)

        if insert is None:
            # No native ON CONFLICT here; get-then-write inside one transaction
            existing = self.session.get(CartItem, (user_id, product_id))
            if existing:
                existing.quantity = quantity
                existing.updated_at = now
                self.session.add(existing)
            else:
                self.session.add(CartItem(
                    user_id=user_id,
                    product_id=product_id,
                    quantity=quantity,
                    created_at=now,
                    updated_at=now
                ))
            self.session.commit()
            return

        stmt = insert(CartItem).values(
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "product_id"],
            set_={
                "quantity": stmt.excluded.quantity,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        self.session.exec(stmt)
        self.session.commit()

    def delete_item(self, user_id: int, product_id: int) -> bool:
        result = self.session.exec(
            delete(CartItem).where(
                CartItem.user_id == user_id,
                CartItem.product_id == product_id
            )
        )
        self.session.commit()
        return result.rowcount > 0

    def delete_all_items(self, user_id: int) -> int:
        result = self.session.exec(delete(CartItem).where(CartItem.user_id == user_id))
        self.session.commit()
        return result.rowcount

    def fetch_product(self, product_id: int) -> Optional[ProductSnapshot]:
        product = self.session.get(Product, product_id)
        if not product:
            return None
        return ProductSnapshot.model_validate(product)

    def fetch_user(self, user_id: int) -> Optional[UserRecord]:
        user = self.session.get(User, user_id)
        if not user:
            return None
        return UserRecord.model_validate(user)

    @staticmethod
    def _to_line(item: CartItem, product: Product) -> CartLine:
        return CartLine(
            user_id=item.user_id,
            product_id=item.product_id,
            quantity=item.quantity,
            product=ProductSnapshot.model_validate(product),
        )
