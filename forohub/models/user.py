"""
User model - the users table (credential store)
"""
from sqlalchemy import Column, String, DateTime, BigInteger, Integer
from sqlalchemy.sql import func
from forohub.database import Base

# SQLite only auto-increments INTEGER PRIMARY KEY columns
IdType = BigInteger().with_variant(Integer, "sqlite")


class User(Base):
    """
    Model User - a registered forum member

    Columns:
    - id: auto-increment primary key
    - name: display name
    - email: login key, unique
    - password_hash: argon2 hash (the plain password is never stored)
    - created_at: registration time
    """

    __tablename__ = "users"

    id = Column(IdType, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email})>"
