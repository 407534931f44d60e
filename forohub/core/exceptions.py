"""
Domain exceptions - raised by the services, turned into HTTP responses by the
handler registered in forohub.main
"""
from fastapi import status


class ForoHubError(Exception):
    """Base class for errors that map onto an HTTP status code"""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_detail: str = "Bad request"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class DuplicateResourceError(ForoHubError):
    """A topic with the same title and message, or a user with the same email, already exists"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Resource already exists"


class InvalidArgumentError(ForoHubError):
    """A query argument could not be resolved (unknown course, bad sort field)"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid argument"


class AuthenticationError(ForoHubError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Invalid email or password"


class NotFoundError(ForoHubError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class TopicClosedError(ForoHubError):
    """Content changes on a CLOSED topic"""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Topic is closed"
