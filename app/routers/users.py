from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from app.db.session import get_session
from app.schemas.base import BaseSchema
from app.schemas.catalog import UserRead
from app.services.user import UserService

router = APIRouter()

class UserCreate(BaseSchema):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

class LoginRequest(BaseSchema):
    username: Optional[str] = None
    password: Optional[str] = None

def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)

@router.get("/", response_model=List[UserRead])
def read_users(
    skip: int = 0,
    limit: int = 100,
    service: UserService = Depends(get_user_service)
):
    """
    Retrieve users.
    """
    users = service.get_all_users()
    return users[skip : skip + limit]

@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: str, service: UserService = Depends(get_user_service)):
    return service.get_user_by_id(user_id)

@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)):
    return service.create_user(
        user_in.username,
        user_in.email,
        user_in.password,
        first_name=user_in.first_name,
        last_name=user_in.last_name
    )

@router.delete("/{user_id}")
def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    service.remove_user(user_id)
    return {"message": "User removed successfully"}

@router.post("/login")
def login(credentials: LoginRequest, service: UserService = Depends(get_user_service)):
    """
    Check a username (or email) and password. No token is issued.
    """
    if not credentials.username or not credentials.password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    if not service.authenticate(credentials.username, credentials.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return {"message": "Login successful"}
