"""Filter and pagination inputs shared by the list use cases and repositories."""
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from uuid import UUID
from libs.result import Result, Error, Return

T = TypeVar("T")

DEFAULT_MAX_PAGE_SIZE = 500


@dataclass(frozen=True)
class DeadLetterFilter:
    message_type: Optional[str] = None
    exception_type: Optional[str] = None
    body_search: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class IncomingEnvelopeFilter:
    message_type: Optional[str] = None
    status: Optional[str] = None
    body_search: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None


@dataclass(frozen=True)
class NodeFilter:
    # Only nodes with a heartbeat strictly newer than this
    active_since: Optional[datetime] = None


@dataclass(frozen=True)
class NodeAssignmentFilter:
    node_id: Optional[UUID] = None


@dataclass(frozen=True)
class PageRequest:
    """1-indexed page window"""

    page: int = 1
    page_size: int = 10

    def __post_init__(self):
        if self.page < 1:
            raise ValueError("page must be 1 or greater")
        if self.page_size < 1:
            raise ValueError("page_size must be 1 or greater")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    total_count: int = 0
    page: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0


@dataclass
class Facets:
    """Known values per filterable column, taken from the whole table"""

    message_types: List[str] = field(default_factory=list)
    exception_types: List[str] = field(default_factory=list)
    statuses: List[str] = field(default_factory=list)


def build_page_request(
    page: int, page_size: int, max_page_size: int = DEFAULT_MAX_PAGE_SIZE
) -> Result[PageRequest]:
    """
    Validate caller supplied pagination.

    Out of range values are rejected rather than clamped.

    Returns:
        Result[PageRequest]: The page window or an INVALID_PAGINATION error
    """
    if page_size > max_page_size:
        return Return.err(
            Error(
                code="INVALID_PAGINATION",
                message=f"page_size cannot exceed {max_page_size}",
            )
        )
    try:
        return Return.ok(PageRequest(page=page, page_size=page_size))
    except ValueError as e:
        return Return.err(Error(code="INVALID_PAGINATION", message=str(e)))
