"""
Users router - account registration
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from forohub.database import get_db
from forohub.schemas.user import UserRegister, UserResponse
from forohub.services.user_service import user_service

router = APIRouter(
    prefix="/usuarios",
    tags=["Users"]
)


@router.post("/registro", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    db: Session = Depends(get_db)
):
    """
    Register a new account

    400 when a field is missing or malformed, or the email is taken.
    """
    return user_service.register(db, user_data.name, user_data.email, user_data.password)
