"""
Topics Router - forum topics and their messages

=== ENDPOINTS ===
POST   /topicos                                  create a topic (+ seed message)
GET    /topicos                                  page of non-closed topics
GET    /topicos/buscar?curso=NAME                same, filtered by course
GET    /topicos/{id}                             one topic with its messages (closed ones too)
PUT    /topicos/{id}                             append a message and mark UPDATED
POST   /topicos/{id}/mensajes                    append a message, status unchanged
DELETE /topicos/{id}                             close the topic (logical delete)
DELETE /topicos/{id_topic}/mensajes/{id_message} delete a message for good

All routes require a bearer token. The caller's name is used as the message
author when the body does not name one.
"""
from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from forohub.config import settings
from forohub.database import get_db
from forohub.models.user import User
from forohub.schemas.topic import (
    TopicCreate, TopicUpdate, MessageCreate,
    MessageResponse, TopicListItem, TopicDetailResponse,
    TopicPage, ConfirmationResponse
)
from forohub.core.dependencies import get_current_user
from forohub.services.topic_service import topic_service
from forohub.utils.pagination import Page, PageRequest, build_page_links

router = APIRouter(
    prefix="/topicos",
    tags=["Topics"],
    dependencies=[Depends(get_current_user)],
)


def page_params(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Items per page"),
    sort: str = Query("updated_at", description="updated_at, created_at, title or id"),
    direction: str = Query("asc", description="asc or desc"),
) -> PageRequest:
    return PageRequest(page=page, page_size=page_size, sort=sort, direction=direction.lower())


def _to_page_response(request: Request, page: Page) -> TopicPage:
    return TopicPage(
        items=[TopicListItem.model_validate(t) for t in page.items],
        total=page.total,
        page=page.page,
        page_size=page.page_size,
        total_pages=page.total_pages,
        links=build_page_links(request, page),
    )


# ============================================================
# POST /topicos - create a topic
# ============================================================
@router.post("", response_model=TopicCreate, status_code=status.HTTP_201_CREATED)
def create_topic(
    topic_data: TopicCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Create a topic with its first message

    400 if a topic with the same title and message already exists (closed
    topics count). On success the Location header points at the new topic
    and the body echoes the submitted data.
    """
    topic = topic_service.register(
        db,
        title=topic_data.title,
        message=topic_data.message,
        author=topic_data.author,
        course=topic_data.course_tag,
    )
    response.headers["Location"] = str(request.url_for("get_topic", topic_id=topic.id))
    return topic_data


# ============================================================
# GET /topicos - paged listing
# ============================================================
@router.get("", response_model=TopicPage)
def list_topics(
    request: Request,
    page_request: PageRequest = Depends(page_params),
    db: Session = Depends(get_db),
):
    """Non-closed topics, least recently touched first unless sort/direction say otherwise"""
    page = topic_service.list_topics(db, page_request)
    return _to_page_response(request, page)


# ============================================================
# GET /topicos/buscar - paged listing filtered by course
# ============================================================
@router.get("/buscar", response_model=TopicPage)
def search_topics_by_course(
    request: Request,
    curso: str = Query(..., min_length=1, description="Course name, any letter case"),
    page_request: PageRequest = Depends(page_params),
    db: Session = Depends(get_db),
):
    """Non-closed topics of one course; 400 for an unknown course"""
    page = topic_service.search_by_course(db, curso, page_request)
    return _to_page_response(request, page)


# ============================================================
# GET /topicos/{id} - topic detail
# ============================================================
@router.get("/{topic_id}", response_model=TopicDetailResponse, name="get_topic")
def get_topic(
    topic_id: int,
    db: Session = Depends(get_db),
):
    """One topic with all of its messages, CLOSED topics included"""
    return topic_service.get_by_id(db, topic_id)


# ============================================================
# PUT /topicos/{id} - update (append + mark UPDATED)
# ============================================================
@router.put("/{topic_id}", response_model=MessageResponse)
def update_topic(
    topic_id: int,
    topic_data: TopicUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Update a topic

    Appends the given message (existing messages are kept), marks the topic
    UPDATED and returns the latest message. 409 if the topic is closed.
    """
    author = topic_data.author or current_user.name
    return topic_service.update(db, topic_id, topic_data.message, author)


# ============================================================
# POST /topicos/{id}/mensajes - reply
# ============================================================
@router.post("/{topic_id}/mensajes", response_model=MessageResponse)
def add_message(
    topic_id: int,
    message_data: MessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Append a message without changing the topic status"""
    author = message_data.author or current_user.name
    return topic_service.append_message(db, topic_id, message_data.content, author)


# ============================================================
# DELETE /topicos/{id} - close
# ============================================================
@router.delete("/{topic_id}", response_model=ConfirmationResponse)
def close_topic(
    topic_id: int,
    db: Session = Depends(get_db),
):
    """Logical delete: the topic is marked CLOSED and hidden from listings"""
    topic_service.close(db, topic_id)
    return ConfirmationResponse(message="Topic closed successfully")


# ============================================================
# DELETE /topicos/{id}/mensajes/{message_id} - remove a message
# ============================================================
@router.delete("/{topic_id}/mensajes/{message_id}", response_model=ConfirmationResponse)
def delete_message(
    topic_id: int,
    message_id: int,
    db: Session = Depends(get_db),
):
    """Permanently delete one message of a topic"""
    topic_service.remove_message(db, topic_id, message_id)
    return ConfirmationResponse(message="Message deleted successfully")
