"""
Authentication router - exchange credentials for a bearer token

Flow:
1. Client sends {email, password} to POST /login
2. Pydantic validates the body
3. The user service looks the user up and verifies the password
4. A signed JWT is issued (sub = user id, email, exp)
5. The client sends it back as "Authorization: Bearer <token>"
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from forohub.database import get_db
from forohub.schemas.user import UserLogin, TokenResponse
from forohub.core.security import create_access_token
from forohub.services.user_service import user_service
from forohub.config import settings

router = APIRouter(
    prefix="/login",
    tags=["Authentication"]
)


@router.post("", response_model=TokenResponse)
def login(
    credentials: UserLogin,
    db: Session = Depends(get_db)
):
    """
    Log in

    Returns a bearer token on success. A wrong email and a wrong password
    both answer 401 with the same message.
    """
    user = user_service.authenticate(db, credentials.email, credentials.password)

    access_token = create_access_token({"sub": str(user.id), "email": user.email})

    return TokenResponse(
        access_token=access_token,
        token_type="bearer",
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    )
