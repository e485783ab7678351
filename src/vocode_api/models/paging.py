"""
Paging: list request parameters and the paged response envelope.
"""

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from vocode_api.errors import DecodeError

T = TypeVar("T")

_PAGE_FIELDS = ("page", "size", "total", "has_more", "total_is_estimated")


class Sort(BaseModel):
    column: str
    descending: bool = False


class PageParams(BaseModel):
    page: Optional[int] = None
    size: Optional[int] = None
    sort: Optional[Sort] = None

    def encode(self) -> dict[str, str]:
        """Query parameters for the fields that are set."""
        params: dict[str, str] = {}
        if self.page is not None:
            params["page"] = str(self.page)
        if self.size is not None:
            params["size"] = str(self.size)
        if self.sort is not None:
            params["sort_column"] = self.sort.column
            params["sort_desc"] = "true" if self.sort.descending else "false"
        return params


class Page(BaseModel, Generic[T]):
    items: list[T] = []
    page: Optional[int] = None
    size: Optional[int] = None
    total: Optional[int] = None
    has_more: bool = False
    total_is_estimated: bool = False

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def decode_page(raw: Any, decode: Callable[[Any], T]) -> Page[T]:
    """Decode a ``{"items": [...], "page": ...}`` body, items through ``decode``."""
    if not isinstance(raw, dict):
        raise DecodeError(f"expected a paged object, got {type(raw).__name__}")
    items = [decode(item) for item in raw.get("items") or []]
    try:
        return Page(items=items, **{key: raw[key] for key in _PAGE_FIELDS if raw.get(key) is not None})
    except ValidationError as e:
        raise DecodeError(f"invalid page: {e}") from e
