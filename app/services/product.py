from typing import Any, List, Optional
from sqlmodel import Session, select, delete

from app.core.exceptions import InvalidInput, NotFound
from app.core.logging import get_logger
from app.core.validation import validate_id, validate_non_negative, validate_url
from app.models.cart import CartItem
from app.models.category import Category
from app.models.product import Product
from app.models.review import Review

logger = get_logger(__name__)

# Attributes PATCH /products/{id} may change
EDITABLE_FIELDS = {
    "name", "category", "description", "price", "stock_count",
    "brand", "image_url", "is_available", "category_id",
}

SORT_ORDERS = {
    "price": Product.price.asc(),
    "price_desc": Product.price.desc(),
}

class ProductService:
    def __init__(self, session: Session):
        self.session = session

    def list_products(
        self,
        available: Optional[bool] = None,
        category_id: Any = None,
        sort: Optional[str] = None
    ) -> List[Product]:
        query = select(Product)
        if available is not None:
            query = query.where(Product.is_available == available)
        if category_id is not None:
            query = query.where(Product.category_id == validate_id(category_id))
        if sort in SORT_ORDERS:
            query = query.order_by(SORT_ORDERS[sort])
        else:
            query = query.order_by(Product.id)
        return self.session.exec(query).all()

    def get_product(self, product_id: Any) -> Product:
        product_id = validate_id(product_id)
        product = self.session.get(Product, product_id)
        if not product:
            raise NotFound(f"Not found product with id {product_id}")
        return product

    def create_product(self, data: dict) -> Product:
        name = (data.get("name") or "").strip()
        category = (data.get("category") or "").strip()
        if not name:
            raise InvalidInput("Name is required")
        if not category:
            raise InvalidInput("Category is required")
        if data.get("price") is None:
            raise InvalidInput("Price is required")

        price = validate_non_negative(data["price"], "price")
        stock_count = self._stock_count(data.get("stock_count", 0))
        image_url = data.get("image_url")
        if image_url:
            validate_url(image_url)

        category_id = data.get("category_id")
        if category_id is not None:
            category_id = self._require_category(category_id)

        product = Product(
            name=name,
            category=category,
            description=data.get("description"),
            price=price,
            stock_count=stock_count,
            brand=data.get("brand"),
            image_url=image_url,
            is_available=bool(data.get("is_available", True)),
            category_id=category_id
        )
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        logger.info("Product %s created: %s", product.id, product.name)
        return product

    def change_product(self, product_id: Any, attr: str, value: Any) -> Product:
        """Change a single attribute of a product"""
        if not attr:
            raise InvalidInput("Attribute name is required")
        if value is None:
            raise InvalidInput("Value is required")
        if attr == "id":
            raise InvalidInput("Cannot change product ID")
        if attr not in EDITABLE_FIELDS:
            raise InvalidInput(f"Unknown product attribute: {attr}")

        product = self.get_product(product_id)

        if attr == "price":
            value = validate_non_negative(value, attr)
        elif attr == "stock_count":
            value = self._stock_count(value)
        elif attr == "is_available":
            if isinstance(value, str):
                value = value.strip().lower() in ("true", "1", "yes")
            else:
                value = bool(value)
        elif attr == "category_id":
            value = self._require_category(value)
        elif attr == "image_url":
            value = validate_url(value)
        elif attr in ("name", "category") and not str(value).strip():
            raise InvalidInput(f"{attr} can not be empty")

        setattr(product, attr, value)
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        logger.info("Product %s updated: %s=%r", product.id, attr, value)
        return product

    def remove_product(self, product_id: Any) -> None:
        product = self.session.get(Product, validate_id(product_id))
        if not product:
            raise NotFound(f"Could not delete product because it doesn't exist, id {product_id}")

        # Dependent rows go first so foreign keys stay satisfied
        self.session.exec(delete(CartItem).where(CartItem.product_id == product.id))
        self.session.exec(delete(Review).where(Review.product_id == product.id))
        self.session.delete(product)
        self.session.commit()
        logger.info("Product %s deleted", product_id)

    @staticmethod
    def _stock_count(raw: Any) -> int:
        value = validate_non_negative(raw, "stock_count")
        if not value.is_integer():
            raise InvalidInput("stock_count must be a whole number")
        return int(value)

    def _require_category(self, raw: Any) -> int:
        category_id = validate_id(raw)
        if not self.session.get(Category, category_id):
            raise NotFound(f"Category with id {category_id} not found")
        return category_id
