"""
Schemas package initialization - Export all Pydantic schemas
"""
# User schemas
from forohub.schemas.user import UserRegister, UserLogin, UserResponse, TokenResponse

# Topic schemas
from forohub.schemas.topic import (
    TopicCreate, TopicUpdate, MessageCreate,
    MessageResponse, TopicListItem, TopicDetailResponse,
    TopicPage, ConfirmationResponse
)

__all__ = [
    # User
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "TokenResponse",

    # Topic
    "TopicCreate",
    "TopicUpdate",
    "MessageCreate",
    "MessageResponse",
    "TopicListItem",
    "TopicDetailResponse",
    "TopicPage",
    "ConfirmationResponse",
]
