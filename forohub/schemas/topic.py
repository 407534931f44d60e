"""
Topic schemas - request/response shapes for topics and their messages

TOPICS IN A NUTSHELL:
=====================
A topic is a question filed under a course. It is created with a first
("seed") message and collects replies over time:

- OPEN     - freshly created
- UPDATED  - content was updated via PUT /topicos/{id}
- CLOSED   - logically deleted via DELETE /topicos/{id}; still readable by id,
             hidden from listings

Listings are paginated and carry navigation links (self/first/prev/next/last).
"""
from pydantic import BaseModel, Field, validator
from typing import Optional, List, Dict
from datetime import datetime

from forohub.models.topic import Course, TopicStatus


def _not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("Must not be blank")
    return value


def _check_course_name(value: str) -> str:
    """Accept course names in any letter case, keep the spelling as sent"""
    if Course.from_name(value) is None:
        raise ValueError(f"Unknown course '{value}'")
    return value


# ============= REQUEST SCHEMAS =============

class TopicCreate(BaseModel):
    """Body of POST /topicos (echoed back on success)"""
    title: str = Field(..., min_length=1, max_length=255, description="Topic title", examples=["Intro"])
    message: str = Field(..., min_length=1, description="Content of the first message", examples=["Hello world"])
    author: str = Field(..., min_length=1, max_length=100, description="Author name", examples=["Ana"])
    course: str = Field(..., min_length=1, description="Course name, case-insensitive", examples=["PYTHON"])

    @validator("title", "message", "author")
    def check_not_blank(cls, v):
        return _not_blank(v)

    @validator("course")
    def check_course(cls, v):
        return _check_course_name(v)

    @property
    def course_tag(self) -> Course:
        """Canonical course for storage; the body keeps the submitted spelling"""
        return Course.from_name(self.course)


class TopicUpdate(BaseModel):
    """Body of PUT /topicos/{id} - a new message is appended when given"""
    message: Optional[str] = Field(None, min_length=1, description="New message content")
    author: Optional[str] = Field(None, max_length=100, description="Author of the new message")

    @validator("message")
    def check_not_blank(cls, v):
        return _not_blank(v)


class MessageCreate(BaseModel):
    """Body of POST /topicos/{id}/mensajes"""
    content: str = Field(..., min_length=1, description="Message content")
    author: Optional[str] = Field(None, max_length=100, description="Defaults to the caller's name")

    @validator("content")
    def check_not_blank(cls, v):
        return _not_blank(v)


# ============= RESPONSE SCHEMAS =============

class MessageResponse(BaseModel):
    id: int
    content: str
    created_at: datetime
    author: Optional[str] = None

    class Config:
        from_attributes = True


class TopicListItem(BaseModel):
    """Projection used in listings"""
    id: int
    title: str
    messages: List[MessageResponse]
    status: TopicStatus
    course: Course

    class Config:
        from_attributes = True


class TopicDetailResponse(BaseModel):
    """Full topic, CLOSED ones included"""
    id: int
    title: str
    created_at: datetime
    updated_at: datetime
    status: TopicStatus
    author: str
    course: Course
    messages: List[MessageResponse]

    class Config:
        from_attributes = True


class TopicPage(BaseModel):
    """One page of topics plus navigation links"""
    items: List[TopicListItem]
    total: int
    page: int
    page_size: int
    total_pages: int
    links: Dict[str, str]


class ConfirmationResponse(BaseModel):
    message: str
