from typing import Any, List, Optional
from sqlmodel import Session, select

from app.core.exceptions import NotFound
from app.core.logging import get_logger
from app.core.validation import validate_id, validate_rating
from app.models.product import Product
from app.models.review import Review
from app.models.user import User
from app.schemas.catalog import ReviewRead

logger = get_logger(__name__)

class ReviewService:
    def __init__(self, session: Session):
        self.session = session

    def _base_query(self):
        return (
            select(Review, User.username, Product.name)
            .join(User, Review.user_id == User.id)
            .join(Product, Review.product_id == Product.id)
        )

    @staticmethod
    def _to_read(row) -> ReviewRead:
        review, username, product_name = row
        return ReviewRead(
            id=review.id,
            product_id=review.product_id,
            user_id=review.user_id,
            rating=review.rating,
            comment=review.comment,
            created_at=review.created_at,
            username=username,
            product_name=product_name
        )

    def get_reviews(self) -> List[ReviewRead]:
        rows = self.session.exec(
            self._base_query().order_by(Review.created_at.desc(), Review.id.desc())
        ).all()
        return [self._to_read(row) for row in rows]

    def get_review(self, review_id: Any) -> ReviewRead:
        review_id = validate_id(review_id)
        row = self.session.exec(self._base_query().where(Review.id == review_id)).first()
        if not row:
            raise NotFound(f"Review with id {review_id} not found")
        return self._to_read(row)

    def get_product_reviews(self, product_id: Any) -> List[ReviewRead]:
        product_id = validate_id(product_id)
        if not self.session.get(Product, product_id):
            raise NotFound(f"Product with id {product_id} not found")

        rows = self.session.exec(
            self._base_query()
            .where(Review.product_id == product_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        ).all()
        return [self._to_read(row) for row in rows]

    def add_review(self, product_id: Any, user_id: Any, rating: Any, comment: Optional[str] = None) -> ReviewRead:
        """Add a review; product and user must exist"""
        product_id = validate_id(product_id)
        user_id = validate_id(user_id)
        rating = validate_rating(rating)

        if not self.session.get(Product, product_id):
            raise NotFound(f"Cannot add review: Product with id {product_id} not found")
        if not self.session.get(User, user_id):
            raise NotFound(f"Cannot add review: User with id {user_id} not found")

        review = Review(product_id=product_id, user_id=user_id, rating=rating, comment=comment)
        self.session.add(review)
        self.session.commit()
        self.session.refresh(review)
        logger.info("Review %s added for product %s by user %s", review.id, product_id, user_id)
        return self.get_review(review.id)

    def remove_review(self, review_id: Any) -> None:
        review_id = validate_id(review_id)
        review = self.session.get(Review, review_id)
        if not review:
            raise NotFound(f"Review with id {review_id} not found")

        self.session.delete(review)
        self.session.commit()
        logger.info("Review %s deleted", review_id)
