from typing import Any, List, Optional
from sqlmodel import Session, select, delete, or_

from app.core.config import settings
from app.core.exceptions import InvalidInput, NotFound
from app.core.logging import get_logger
from app.core.security import get_password_hash, verify_password
from app.core.validation import validate_email, validate_id
from app.models.cart import CartItem
from app.models.review import Review
from app.models.user import User

logger = get_logger(__name__)

class UserService:
    def __init__(self, session: Session):
        self.session = session

    def get_all_users(self) -> List[User]:
        return self.session.exec(select(User).order_by(User.id)).all()

    def get_user_by_id(self, user_id: Any) -> User:
        user_id = validate_id(user_id)
        user = self.session.get(User, user_id)
        if not user:
            raise NotFound(f"User with id {user_id} not found")
        return user

    def get_user_by_login(self, login: str) -> Optional[User]:
        # Login accepts either the username or the email
        return self.session.exec(
            select(User).where(or_(User.username == login, User.email == login))
        ).first()

    def create_user(
        self,
        username: Optional[str],
        email: Optional[str],
        password: Optional[str],
        first_name: Optional[str] = None,
        last_name: Optional[str] = None
    ) -> User:
        username = (username or "").strip()
        email = (email or "").strip()
        if not username:
            raise InvalidInput("Username is required")
        if not email:
            raise InvalidInput("Email is required")
        if not password or len(password) < settings.MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters")
        validate_email(email)

        taken = self.session.exec(
            select(User).where(or_(User.username == username, User.email == email))
        ).first()
        if taken:
            field = "Username" if taken.username == username else "Email"
            raise InvalidInput(f"{field} already registered")

        user = User(
            username=username,
            email=email,
            password_hash=get_password_hash(password),
            first_name=first_name or None,
            last_name=last_name or None
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("User %s created: %s", user.id, user.username)
        return user

    def remove_user(self, user_id: Any) -> None:
        user_id = validate_id(user_id)
        user = self.session.get(User, user_id)
        if not user:
            raise NotFound(f"Could not delete user because it doesn't exist, id {user_id}")

        # Cart lines and reviews belong to the user
        self.session.exec(delete(CartItem).where(CartItem.user_id == user_id))
        self.session.exec(delete(Review).where(Review.user_id == user_id))
        self.session.delete(user)
        self.session.commit()
        logger.info("User %s deleted", user_id)

    def authenticate(self, login: Optional[str], password: Optional[str]) -> bool:
        if not login or not login.strip():
            raise InvalidInput("Username or email is required")
        if not password or not password.strip():
            raise InvalidInput("Password is required")

        user = self.get_user_by_login(login.strip())
        if not user:
            return False
        return verify_password(password, user.password_hash)
