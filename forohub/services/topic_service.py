"""
Topic Service - lifecycle rules for topics and their messages

=== LIFECYCLE ===
    register ──► OPEN ──update──► UPDATED ──close──► CLOSED
                   │                                   ▲
                   └───────────────close───────────────┘

- register: rejects a (title, message) pair that any topic already has,
  closed topics included
- update: appends a message (when given) and marks the topic UPDATED
- append_message: appends a message, status unchanged
- close: logical delete; the topic stays readable by id but drops out of
  listings. Closing twice is fine.
- remove_message: hard delete of a single message

CLOSED topics accept no new content (update / append_message raise
TopicClosedError); messages can still be removed from them.

Every mutation runs inside transaction(db): commit on success, rollback on
any error.
"""
import logging
from typing import Optional

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session, Query, selectinload
from sqlalchemy.sql import func

from forohub.database import transaction
from forohub.models import Topic, Message, TopicStatus, Course
from forohub.core.exceptions import (
    DuplicateResourceError, InvalidArgumentError, NotFoundError, TopicClosedError
)
from forohub.utils.pagination import Page, PageRequest, SORT_DIRECTIONS

logger = logging.getLogger(__name__)


class TopicService:
    """Service for topics and messages"""

    SORTABLE_FIELDS = {
        "created_at": Topic.created_at,
        "updated_at": Topic.updated_at,
        "title": Topic.title,
        "id": Topic.id,
    }

    # ============================================================
    # QUERIES
    # ============================================================

    def exists_with_title_and_message(self, db: Session, title: str, content: str) -> bool:
        """True if some topic has this title and a message with this content"""
        query = (
            db.query(Topic.id)
            .join(Topic.messages)
            .filter(Topic.title == title, Message.content == content)
        )
        return db.query(query.exists()).scalar()

    def get_by_id(self, db: Session, topic_id: int) -> Topic:
        """Any topic, CLOSED included"""
        topic = db.get(Topic, topic_id)
        if topic is None:
            raise NotFoundError("Topic not found")
        return topic

    def list_topics(self, db: Session, page_request: PageRequest) -> Page[Topic]:
        """Page of topics that are not CLOSED"""
        query = db.query(Topic).filter(Topic.status != TopicStatus.CLOSED)
        return self._paginate(query, page_request)

    def search_by_course(self, db: Session, course_name: str, page_request: PageRequest) -> Page[Topic]:
        """Page of non-CLOSED topics of one course, course name in any case"""
        course = Course.from_name(course_name)
        if course is None:
            raise InvalidArgumentError(f"Invalid course '{course_name}'")

        query = db.query(Topic).filter(
            Topic.course == course,
            Topic.status != TopicStatus.CLOSED,
        )
        return self._paginate(query, page_request)

    def _paginate(self, query: Query, page_request: PageRequest) -> Page[Topic]:
        column = self.SORTABLE_FIELDS.get(page_request.sort)
        if column is None:
            raise InvalidArgumentError(
                f"Cannot sort by '{page_request.sort}'; use one of {', '.join(self.SORTABLE_FIELDS)}"
            )
        if page_request.direction not in SORT_DIRECTIONS:
            raise InvalidArgumentError("Sort direction must be 'asc' or 'desc'")

        order = asc if page_request.direction == "asc" else desc
        total = query.count()
        topics = (
            query.options(selectinload(Topic.messages))
            .order_by(order(column), order(Topic.id))
            .offset(page_request.offset)
            .limit(page_request.page_size)
            .all()
        )
        return Page(items=topics, total=total, page=page_request.page, page_size=page_request.page_size)

    # ============================================================
    # MUTATIONS
    # ============================================================

    def register(self, db: Session, title: str, message: str, author: str, course: Course) -> Topic:
        """
        Create an OPEN topic with its seed message.

        Raises:
            DuplicateResourceError: title + message already used by any topic
        """
        with transaction(db):
            if self.exists_with_title_and_message(db, title, message):
                logger.warning(f"Rejected duplicate topic title={title!r}")
                raise DuplicateResourceError("Topic already exists")

            topic = Topic(
                title=title,
                author=author,
                course=course,
                status=TopicStatus.OPEN,
            )
            topic.add_message(Message(content=message, author=author))
            db.add(topic)

        db.refresh(topic)
        logger.info(f"Topic {topic.id} registered by {author} in {course.value}")
        return topic

    def update(self, db: Session, topic_id: int, content: Optional[str], author: Optional[str]) -> Message:
        """
        Append a message (when content is given), mark UPDATED, return the last message.

        "Last" is the last element of the collection in insertion order.
        """
        with transaction(db):
            topic = self.get_by_id(db, topic_id)
            self._ensure_open(topic)

            if content is not None:
                topic.add_message(Message(content=content, author=author))
            topic.status = TopicStatus.UPDATED
            topic.updated_at = func.now()

        last = topic.last_message
        if last is None:
            raise NotFoundError("Topic has no messages")
        logger.info(f"Topic {topic_id} updated")
        return last

    def append_message(self, db: Session, topic_id: int, content: str, author: Optional[str]) -> Message:
        """Add a reply without touching the topic status"""
        with transaction(db):
            topic = self.get_by_id(db, topic_id)
            self._ensure_open(topic)
            message = topic.add_message(Message(content=content, author=author))

        db.refresh(message)
        logger.info(f"Message {message.id} appended to topic {topic_id}")
        return message

    def close(self, db: Session, topic_id: int) -> Topic:
        """Mark CLOSED; repeated calls succeed"""
        with transaction(db):
            topic = self.get_by_id(db, topic_id)
            topic.status = TopicStatus.CLOSED

        logger.info(f"Topic {topic_id} closed")
        return topic

    def remove_message(self, db: Session, topic_id: int, message_id: int) -> None:
        """
        Permanently delete one message of a topic.

        Raises:
            NotFoundError: unknown topic, or no such message under this topic
        """
        with transaction(db):
            topic = self.get_by_id(db, topic_id)
            message = next((m for m in topic.messages if m.id == message_id), None)
            if message is None:
                raise NotFoundError("Message not found")

            # delete-orphan cascade removes the row on flush
            topic.messages.remove(message)

        logger.info(f"Message {message_id} removed from topic {topic_id}")

    @staticmethod
    def _ensure_open(topic: Topic) -> None:
        if topic.is_closed:
            raise TopicClosedError(f"Topic {topic.id} is closed")


# Singleton instance
topic_service = TopicService()
