"""
Pagination helpers - page requests, result pages and navigation links

    GET /topicos?page=2&page_size=10&sort=updated_at&direction=asc

The service turns a PageRequest into LIMIT/OFFSET + ORDER BY and returns a
Page; the router adds self/first/prev/next/last links built from the request
URL.
"""
from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar

from starlette.requests import Request

T = TypeVar("T")

SORT_DIRECTIONS = ("asc", "desc")


@dataclass
class PageRequest:
    """Which slice of a listing to return (page is 1-based)"""
    page: int = 1
    page_size: int = 10
    sort: str = "updated_at"
    direction: str = "asc"

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        return (self.total + self.page_size - 1) // self.page_size


def build_page_links(request: Request, page: Page) -> Dict[str, str]:
    """Navigation links that keep every query parameter except `page`"""

    def url_for(number: int) -> str:
        return str(request.url.include_query_params(page=number))

    last = max(page.total_pages, 1)
    links = {
        "self": url_for(page.page),
        "first": url_for(1),
        "last": url_for(last),
    }
    if page.page > 1:
        links["prev"] = url_for(min(page.page - 1, last))
    if page.page < page.total_pages:
        links["next"] = url_for(page.page + 1)
    return links
