"""
User Service - registration and credential checks
"""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from forohub.database import transaction
from forohub.models import User
from forohub.core.security import hash_password, verify_password
from forohub.core.exceptions import AuthenticationError, DuplicateResourceError

logger = logging.getLogger(__name__)


class UserService:
    """Service for forum members"""

    def get_by_email(self, db: Session, email: str) -> Optional[User]:
        return db.query(User).filter(User.email == email.lower()).first()

    def register(self, db: Session, name: str, email: str, password: str) -> User:
        """
        Create a user with a hashed password.

        Raises:
            DuplicateResourceError: the email is already registered
        """
        if self.get_by_email(db, email) is not None:
            logger.warning(f"Registration refused, email already in use: {email}")
            raise DuplicateResourceError("Email already registered")

        user = User(
            name=name,
            email=email.lower(),
            password_hash=hash_password(password),
        )
        try:
            with transaction(db):
                db.add(user)
        except IntegrityError:
            # Lost a race against a concurrent registration of the same email
            raise DuplicateResourceError("Email already registered")

        db.refresh(user)
        logger.info(f"User {user.id} registered")
        return user

    def authenticate(self, db: Session, email: str, password: str) -> User:
        """
        Return the user owning these credentials.

        Raises:
            AuthenticationError: unknown email or wrong password (same message for both)
        """
        user = self.get_by_email(db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login for {email}")
            raise AuthenticationError()
        return user


# Singleton instance
user_service = UserService()
