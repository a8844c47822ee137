"""Page-indexed slicing of ordered collections."""

import copy
import math
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")

_MISSING = object()


@dataclass
class Page(Generic[T]):
    """One window of a collection plus its position within the whole."""

    items: List[T]
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    def to_dict(self, total_key: str = "total") -> Dict[str, Any]:
        """Render the metadata block (items excluded)."""
        return {
            "page": self.page,
            "pageSize": self.page_size,
            total_key: self.total,
            "totalPages": self.total_pages,
            "hasNextPage": self.has_next,
            "hasPreviousPage": self.has_previous,
        }


def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """
    Slice ``items`` into the requested 1-indexed page.

    Bounds on ``page`` are the caller's concern; a page past the end yields
    an empty window.

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    total = len(items)
    total_pages = math.ceil(total / page_size)
    start = (page - 1) * page_size
    end = min(start + page_size, total)
    window = list(items[start:end]) if 0 <= start < total else []

    return Page(
        items=window,
        page=page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1,
    )


def _step(value: Any, segment: str) -> Any:
    if isinstance(value, dict):
        return value.get(segment, _MISSING)
    if isinstance(value, list):
        try:
            index = int(segment)
        except ValueError:
            return _MISSING
        if -len(value) <= index < len(value):
            return value[index]
    return _MISSING


def resolve_path(value: Any, dotted_path: str) -> Optional[Any]:
    """
    Walk a nested JSON value along ``a.b.c``.

    Returns:
        The value found, or None if any segment is absent
    """
    current = value
    for segment in dotted_path.split("."):
        current = _step(current, segment)
        if current is _MISSING:
            return None
    return current


def paginate_at_path(
    result: Any,
    dotted_path: str,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> Tuple[Any, Optional[Page]]:
    """
    Paginate the array found at ``dotted_path`` inside ``result``.

    Args:
        result: Parsed JSON value
        dotted_path: Path such as ``data.viewer.zones``
        page: 1-indexed page, defaults to 1
        page_size: Items per page, defaults to the whole array

    Returns:
        (copy of result with the array replaced by its window, Page), or
        (result unchanged, None) when the path does not lead to an array
    """
    target = resolve_path(result, dotted_path)
    if not isinstance(target, list):
        return result, None

    window = paginate(target, page or 1, page_size or max(len(target), 1))

    sliced = copy.deepcopy(result)
    *parents, leaf = dotted_path.split(".")
    container = resolve_path(sliced, ".".join(parents)) if parents else sliced
    if isinstance(container, list):
        container[int(leaf)] = window.items
    else:
        container[leaf] = window.items
    return sliced, window
