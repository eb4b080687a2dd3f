"""
Page/limit contract for listing transactions.

Records are ordered by ``date`` descending with ties broken by ``id``
descending. ``limit == 0`` means "fetch everything" and never reports
further pages.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Mapping, Sequence, Tuple, TypeVar, Union

from db.errors import ValidationFailure


T = TypeVar("T")

DEFAULT_PAGE = 1
FETCH_ALL = 0


@dataclass(frozen=True)
class PageRequest:
    page: int = DEFAULT_PAGE
    limit: int = FETCH_ALL

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationFailure(f"page must be >= 1, got {self.page}")
        if self.limit < 0:
            raise ValidationFailure(f"limit must be >= 0, got {self.limit}")

    @property
    def fetch_all(self) -> bool:
        return self.limit == FETCH_ALL

    @property
    def offset(self) -> int:
        return 0 if self.fetch_all else (self.page - 1) * self.limit


def has_more(request: PageRequest, total: int) -> bool:
    if request.fetch_all:
        return False
    return request.page * request.limit < total


def _field(record: Union[Mapping[str, Any], Any], name: str) -> Any:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def as_utc(value: Any) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def ordering_key(record: Union[Mapping[str, Any], Any]) -> Tuple[datetime, str]:
    """Sort key for the listing order; use with ``reverse=True``."""
    return as_utc(_field(record, "date")), str(_field(record, "id"))


def sort_newest_first(records: Sequence[T]) -> List[T]:
    return sorted(records, key=ordering_key, reverse=True)


def paginate(records: Sequence[T], request: PageRequest) -> Tuple[List[T], bool, int]:
    """Slice an in-memory collection the same way the transaction store does.

    Returns ``(page_records, has_more, total)``.
    """
    ordered = sort_newest_first(records)
    total = len(ordered)
    if request.fetch_all:
        return ordered, False, total
    window = ordered[request.offset:request.offset + request.limit]
    return window, has_more(request, total), total
