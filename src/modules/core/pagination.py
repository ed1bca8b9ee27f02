"""Zero-based page requests and the paged response envelope.

``PageRequest`` is parsed from query parameters (``page``, ``size``,
``sortBy``, ``sortDir``) and handed down to repositories, which page an
ordered queryset with ``paginate``.  ``Page`` wraps one slice together
with the navigation flags rendered to clients::

    {"content": [...], "page": 0, "size": 20, "totalElements": 42,
     "totalPages": 3, "first": true, "last": false, "empty": false}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, List, Mapping, Sequence, TypeVar

from django.conf import settings
from django.core.paginator import Paginator
from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")
U = TypeVar("U")

# Largest page index a client may ask for (signed 32-bit integer).
MAX_PAGE_INDEX = 2_147_483_647


def _default_page_size() -> int:
    return settings.DEFAULT_PAGE_SIZE


class PageRequest(BaseModel):
    """Immutable page + sort request.

    ``sort_dir`` is normalised: anything other than ``desc`` (any casing)
    sorts ascending.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    page: int = Field(default=0, ge=0, le=MAX_PAGE_INDEX)
    size: int = Field(default_factory=_default_page_size)
    sort_by: str = Field(default="name", alias="sortBy")
    sort_dir: str = Field(default="asc", alias="sortDir")

    @field_validator("size")
    @classmethod
    def size_within_bounds(cls, v: int) -> int:
        if v < 1 or v > settings.MAX_PAGE_SIZE:
            raise ValueError(
                f"Page size must be between 1 and {settings.MAX_PAGE_SIZE}."
            )
        return v

    @field_validator("sort_dir")
    @classmethod
    def normalise_direction(cls, v: str) -> str:
        return "desc" if v.strip().lower() == "desc" else "asc"

    @property
    def descending(self) -> bool:
        return self.sort_dir == "desc"

    def ordering(self, field_map: Mapping[str, str]) -> List[str]:
        """ORM ``order_by`` arguments, with ``id`` as the final tie-break."""
        column = field_map[self.sort_by]
        prefix = "-" if self.descending else ""
        ordering = [f"{prefix}{column}"]
        if column != "id":
            ordering.append(f"{prefix}id")
        return ordering


@dataclass(frozen=True)
class Page(Generic[T]):
    """One slice of an ordered result set."""

    content: List[T]
    page: int
    size: int
    total_elements: int
    total_pages: int

    @property
    def first(self) -> bool:
        return self.page == 0

    @property
    def last(self) -> bool:
        return self.page + 1 >= self.total_pages

    @property
    def empty(self) -> bool:
        return not self.content

    def map(self, fn: Callable[[T], U]) -> Page[U]:
        return Page(
            content=[fn(item) for item in self.content],
            page=self.page,
            size=self.size,
            total_elements=self.total_elements,
            total_pages=self.total_pages,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "page": self.page,
            "size": self.size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
            "first": self.first,
            "last": self.last,
            "empty": self.empty,
        }


def paginate(object_list: Sequence[T], request: PageRequest) -> Page[T]:
    """Cut the requested zero-based page out of an ordered queryset or list.

    A page past the last one is empty but still reports the real totals;
    no slice is taken for it.
    """
    paginator = Paginator(object_list, request.size, allow_empty_first_page=False)
    number = request.page + 1
    content = (
        list(paginator.page(number).object_list)
        if number <= paginator.num_pages
        else []
    )
    return Page(
        content=content,
        page=request.page,
        size=request.size,
        total_elements=paginator.count,
        total_pages=paginator.num_pages,
    )
