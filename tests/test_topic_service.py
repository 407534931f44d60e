"""
Tests for the topic lifecycle rules (service layer, no HTTP)
"""
from datetime import datetime

import pytest

from forohub.database import transaction
from forohub.models import Topic, Message, TopicStatus, Course
from forohub.core.exceptions import (
    DuplicateResourceError, InvalidArgumentError, NotFoundError, TopicClosedError
)
from forohub.services.topic_service import topic_service
from forohub.utils.pagination import PageRequest


def _register(db, title="Intro", message="Hello world", author="Ana", course=Course.PYTHON):
    return topic_service.register(db, title, message, author, course)


class TestRegister:

    def test_new_topic_is_open_with_seed_message(self, db_session):
        topic = _register(db_session)

        stored = topic_service.get_by_id(db_session, topic.id)
        assert stored.status == TopicStatus.OPEN
        assert [m.content for m in stored.messages] == ["Hello world"]
        assert stored.messages[0].author == "Ana"
        assert stored.course == Course.PYTHON

    def test_duplicate_title_and_message_is_rejected(self, db_session):
        _register(db_session)

        with pytest.raises(DuplicateResourceError):
            _register(db_session, author="Bruno", course=Course.JAVA)

        assert db_session.query(Topic).count() == 1

    def test_duplicate_of_closed_topic_is_rejected(self, db_session):
        topic = _register(db_session)
        topic_service.close(db_session, topic.id)

        with pytest.raises(DuplicateResourceError):
            _register(db_session)

    def test_duplicate_check_covers_later_messages(self, db_session):
        topic = _register(db_session)
        topic_service.append_message(db_session, topic.id, "Second message", "Bruno")

        with pytest.raises(DuplicateResourceError):
            _register(db_session, message="Second message")

    def test_same_title_with_other_message_is_allowed(self, db_session):
        _register(db_session)
        _register(db_session, message="Something else")
        _register(db_session, title="Other title")

        assert db_session.query(Topic).count() == 3


class TestListing:

    def test_list_excludes_closed_topics(self, db_session):
        kept = _register(db_session, title="Kept")
        closed = _register(db_session, title="Closed")
        topic_service.close(db_session, closed.id)

        page = topic_service.list_topics(db_session, PageRequest())

        assert [t.id for t in page.items] == [kept.id]
        assert page.total == 1

    def test_list_is_paginated(self, db_session):
        for i in range(3):
            _register(db_session, title=f"Topic {i}")

        first = topic_service.list_topics(db_session, PageRequest(page=1, page_size=2))
        second = topic_service.list_topics(db_session, PageRequest(page=2, page_size=2))

        assert first.total == 3
        assert first.total_pages == 2
        assert [t.title for t in first.items] == ["Topic 0", "Topic 1"]
        assert [t.title for t in second.items] == ["Topic 2"]

    def test_update_moves_topic_to_end_of_default_listing(self, db_session):
        a = _register(db_session, title="A")
        b = _register(db_session, title="B")
        # Pin the timestamps; SQLite's clock only has second resolution
        for topic, day in ((a, 1), (b, 2)):
            db_session.query(Topic).filter(Topic.id == topic.id).update(
                {Topic.created_at: datetime(2020, 1, day), Topic.updated_at: datetime(2020, 1, day)}
            )
        db_session.commit()

        topic_service.update(db_session, a.id, "More details", "Ana")
        page = topic_service.list_topics(db_session, PageRequest())

        assert [t.title for t in page.items] == ["B", "A"]
        assert topic_service.get_by_id(db_session, a.id).created_at == datetime(2020, 1, 1)

    def test_list_can_sort_descending_by_title(self, db_session):
        for title in ("b", "a", "c"):
            _register(db_session, title=title)

        page = topic_service.list_topics(db_session, PageRequest(sort="title", direction="desc"))

        assert [t.title for t in page.items] == ["c", "b", "a"]

    def test_unknown_sort_field_is_rejected(self, db_session):
        with pytest.raises(InvalidArgumentError):
            topic_service.list_topics(db_session, PageRequest(sort="password"))

    def test_search_by_course_is_case_insensitive(self, db_session):
        python = _register(db_session, title="Py", course=Course.PYTHON)
        _register(db_session, title="Jv", course=Course.JAVA)
        closed = _register(db_session, title="Py closed", course=Course.PYTHON)
        topic_service.close(db_session, closed.id)

        page = topic_service.search_by_course(db_session, "pYtHoN", PageRequest())

        assert [t.id for t in page.items] == [python.id]

    def test_search_by_unknown_course_is_rejected(self, db_session):
        with pytest.raises(InvalidArgumentError):
            topic_service.search_by_course(db_session, "COBOL", PageRequest())


class TestMessages:

    def test_append_adds_one_message_and_keeps_status(self, db_session):
        topic = _register(db_session)

        message = topic_service.append_message(db_session, topic.id, "A reply", "Bruno")

        assert message.id is not None
        assert message.topic_id == topic.id
        assert len(topic.messages) == 2
        assert topic.status == TopicStatus.OPEN

    def test_append_to_unknown_topic(self, db_session):
        with pytest.raises(NotFoundError):
            topic_service.append_message(db_session, 999, "A reply", "Bruno")

    def test_update_appends_and_marks_updated(self, db_session):
        topic = _register(db_session)

        last = topic_service.update(db_session, topic.id, "Edited question", "Ana")

        assert last.content == "Edited question"
        assert [m.content for m in topic.messages] == ["Hello world", "Edited question"]
        assert topic.status == TopicStatus.UPDATED

    def test_update_without_content_returns_current_last_message(self, db_session):
        topic = _register(db_session)

        last = topic_service.update(db_session, topic.id, None, None)

        assert last.content == "Hello world"
        assert len(topic.messages) == 1
        assert topic.status == TopicStatus.UPDATED

    def test_update_unknown_topic(self, db_session):
        with pytest.raises(NotFoundError):
            topic_service.update(db_session, 999, "x", "Ana")

    def test_remove_message_is_permanent(self, db_session):
        topic = _register(db_session)
        reply = topic_service.append_message(db_session, topic.id, "A reply", "Bruno")
        reply_id = reply.id

        topic_service.remove_message(db_session, topic.id, reply_id)

        assert db_session.get(Message, reply_id) is None
        assert [m.content for m in topic_service.get_by_id(db_session, topic.id).messages] == ["Hello world"]

        with pytest.raises(NotFoundError):
            topic_service.remove_message(db_session, topic.id, reply_id)

    def test_remove_message_of_another_topic(self, db_session):
        first = _register(db_session, title="First")
        second = _register(db_session, title="Second")

        with pytest.raises(NotFoundError):
            topic_service.remove_message(db_session, first.id, second.messages[0].id)

        assert len(second.messages) == 1


class TestClose:

    def test_close_is_idempotent(self, db_session):
        topic = _register(db_session)

        topic_service.close(db_session, topic.id)
        topic_service.close(db_session, topic.id)

        assert topic_service.get_by_id(db_session, topic.id).status == TopicStatus.CLOSED

    def test_close_unknown_topic(self, db_session):
        with pytest.raises(NotFoundError):
            topic_service.close(db_session, 999)

    def test_closed_topic_rejects_new_content(self, db_session):
        topic = _register(db_session)
        topic_service.close(db_session, topic.id)

        with pytest.raises(TopicClosedError):
            topic_service.update(db_session, topic.id, "More", "Ana")
        with pytest.raises(TopicClosedError):
            topic_service.append_message(db_session, topic.id, "More", "Ana")

        assert len(topic.messages) == 1
        assert topic.status == TopicStatus.CLOSED

    def test_messages_can_still_be_removed_from_closed_topic(self, db_session):
        topic = _register(db_session)
        reply = topic_service.append_message(db_session, topic.id, "Spam", "Bot")
        topic_service.close(db_session, topic.id)

        topic_service.remove_message(db_session, topic.id, reply.id)

        assert len(topic_service.get_by_id(db_session, topic.id).messages) == 1


class TestTransaction:

    def test_failure_rolls_back_the_whole_unit(self, db_session):
        with pytest.raises(RuntimeError):
            with transaction(db_session):
                topic = Topic(title="Half", author="Ana", course=Course.SQL, status=TopicStatus.OPEN)
                topic.add_message(Message(content="never stored", author="Ana"))
                db_session.add(topic)
                db_session.flush()
                raise RuntimeError("boom")

        assert db_session.query(Topic).count() == 0
        assert db_session.query(Message).count() == 0
