"""
Seed Data - demo account and a few topics for local development
Run: python -m forohub.seeding.seed_data

Safe to run more than once: the user and topics that already exist are skipped.
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from forohub.database import SessionLocal, init_db
from forohub.models import Course, Topic, User
from forohub.core.exceptions import DuplicateResourceError
from forohub.services.topic_service import topic_service
from forohub.services.user_service import user_service

logger = logging.getLogger(__name__)

DEMO_USER = {
    "name": "Demo",
    "email": "demo@forohub.com",
    "password": "demo123",
}

DEMO_TOPICS = [
    ("Error compiling with Maven", "The build fails with 'release version 17 not supported'.", Course.JAVA),
    ("Virtualenv vs venv", "Which one should I use for a new project?", Course.PYTHON),
    ("Promise never resolves", "My fetch call hangs forever inside an async function.", Course.JAVASCRIPT),
    ("JPA cascade on delete", "Child rows are not removed when I delete the parent.", Course.SPRING_BOOT),
]


def seed_demo_user(db: Session) -> User:
    """Create the demo user unless the email is already registered"""
    existing = user_service.get_by_email(db, DEMO_USER["email"])
    if existing is not None:
        logger.info(f"Demo user already exists: {existing.email}")
        return existing
    return user_service.register(db, **DEMO_USER)


def seed_demo_topics(db: Session, author: str) -> List[Topic]:
    """Register the demo topics, skipping the ones that already exist"""
    created = []
    for title, message, course in DEMO_TOPICS:
        try:
            created.append(topic_service.register(db, title, message, author, course))
        except DuplicateResourceError:
            logger.info(f"Topic already seeded: {title}")
    return created


def seed_all(db: Optional[Session] = None) -> List[Topic]:
    """Seed everything; opens (and closes) its own session when none is given"""
    own_session = db is None
    if own_session:
        init_db()
        db = SessionLocal()

    try:
        user = seed_demo_user(db)
        topics = seed_demo_topics(db, user.name)
        logger.info(f"Seeded {len(topics)} new topic(s)")
        return topics
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    seed_all()
