"""create users, topics and messages tables

Revision ID: 0001_create_forum_tables
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_create_forum_tables'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TOPIC_STATUSES = ('OPEN', 'UPDATED', 'CLOSED')
COURSES = ('JAVA', 'PYTHON', 'JAVASCRIPT', 'SPRING_BOOT', 'SQL', 'DEVOPS', 'FRONTEND', 'DATA_SCIENCE')


def upgrade() -> None:
    """Create the forum tables"""
    op.create_table(
        'users',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'topics',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('status', sa.Enum(*TOPIC_STATUSES, name='topicstatus', native_enum=False), nullable=False),
        sa.Column('author', sa.String(100), nullable=False),
        sa.Column('course', sa.Enum(*COURSES, name='course', native_enum=False), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_topics_id', 'topics', ['id'])
    op.create_index('ix_topics_title', 'topics', ['title'])
    op.create_index('ix_topics_status', 'topics', ['status'])
    op.create_index('ix_topics_course', 'topics', ['course'])
    op.create_index('ix_topics_created_at', 'topics', ['created_at'])
    op.create_index('ix_topics_updated_at', 'topics', ['updated_at'])

    op.create_table(
        'messages',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('topic_id', sa.BigInteger(), sa.ForeignKey('topics.id', ondelete='CASCADE'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('author', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_messages_id', 'messages', ['id'])
    op.create_index('ix_messages_topic_id', 'messages', ['topic_id'])


def downgrade() -> None:
    """Drop the forum tables (messages first, they reference topics)"""
    op.drop_table('messages')
    op.drop_table('topics')
    op.drop_table('users')
