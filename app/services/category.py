from typing import Any, List, Optional
from sqlmodel import Session, select

from app.core.exceptions import InvalidInput, NotFound
from app.core.logging import get_logger
from app.core.validation import validate_id
from app.models.category import Category
from app.models.product import Product

logger = get_logger(__name__)

class CategoryService:
    def __init__(self, session: Session):
        self.session = session

    def get_categories(self) -> List[Category]:
        return self.session.exec(select(Category).order_by(Category.id)).all()

    def get_product_category(self, product_id: Any) -> Category:
        product_id = validate_id(product_id)
        product = self.session.get(Product, product_id)
        category = self.session.get(Category, product.category_id) if product and product.category_id else None
        if not category:
            raise NotFound(f"Category for product with id {product_id} not found")
        return category

    def add_category(self, name: Optional[str], description: Optional[str] = None) -> Category:
        name = (name or "").strip()
        if not name:
            raise InvalidInput("Category name is required")

        existing = self.session.exec(select(Category).where(Category.name == name)).first()
        if existing:
            raise InvalidInput(f"Category '{name}' already exists")

        category = Category(name=name, description=description or None)
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        logger.info("Category %s created: %s", category.id, category.name)
        return category
