"""
Topic models - forum topics and the messages they own
"""
import enum
from typing import Optional

from sqlalchemy import Column, String, DateTime, Text, Enum, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from forohub.database import Base
from forohub.models.user import IdType


class TopicStatus(str, enum.Enum):
    """Lifecycle of a topic"""
    OPEN = "OPEN"
    UPDATED = "UPDATED"
    CLOSED = "CLOSED"


class Course(str, enum.Enum):
    """Courses a topic can be filed under"""
    JAVA = "JAVA"
    PYTHON = "PYTHON"
    JAVASCRIPT = "JAVASCRIPT"
    SPRING_BOOT = "SPRING_BOOT"
    SQL = "SQL"
    DEVOPS = "DEVOPS"
    FRONTEND = "FRONTEND"
    DATA_SCIENCE = "DATA_SCIENCE"

    @classmethod
    def from_name(cls, name: str) -> Optional["Course"]:
        """Case-insensitive lookup, None when nothing matches"""
        if name is None:
            return None
        return cls.__members__.get(name.strip().upper())


class Topic(Base):
    """Model Topic - a discussion thread"""

    __tablename__ = "topics"

    id = Column(IdType, primary_key=True, autoincrement=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    status = Column(
        Enum(TopicStatus, values_callable=lambda x: [e.value for e in x], native_enum=False),
        nullable=False,
        default=TopicStatus.OPEN,
        index=True,
    )
    author = Column(String(100), nullable=False)
    course = Column(
        Enum(Course, values_callable=lambda x: [e.value for e in x], native_enum=False),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
    # Starts at creation time, refreshed by every update; default listing order
    updated_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)

    # Insertion order; the last element is the most recently added message
    messages = relationship(
        "Message",
        back_populates="topic",
        cascade="all, delete-orphan",
        order_by="Message.id",
        passive_deletes=True,
    )

    def add_message(self, message: "Message") -> "Message":
        self.messages.append(message)
        return message

    @property
    def last_message(self) -> Optional["Message"]:
        return self.messages[-1] if self.messages else None

    @property
    def is_closed(self) -> bool:
        return self.status == TopicStatus.CLOSED

    def __repr__(self):
        return f"<Topic(id={self.id}, title={self.title}, status={self.status})>"


class Message(Base):
    """Model Message - one post inside a topic"""

    __tablename__ = "messages"

    id = Column(IdType, primary_key=True, autoincrement=True, index=True)
    topic_id = Column(IdType, ForeignKey("topics.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    author = Column(String(100), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    topic = relationship("Topic", back_populates="messages")

    def __repr__(self):
        return f"<Message(id={self.id}, topic_id={self.topic_id})>"
