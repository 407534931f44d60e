"""
Database models - Export all models
"""
from forohub.models.user import User
from forohub.models.topic import Topic, Message, TopicStatus, Course

__all__ = [
    "User",
    "Topic",
    "Message",

    # Enums
    "TopicStatus",
    "Course",
]
