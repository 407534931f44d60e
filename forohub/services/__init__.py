"""
Services - Business Logic Layer

- topic_service: topic lifecycle and message collections
- user_service: registration and credential checks
"""
from forohub.services.topic_service import TopicService, topic_service
from forohub.services.user_service import UserService, user_service

__all__ = [
    "TopicService",
    "UserService",
    "topic_service",
    "user_service",
]
