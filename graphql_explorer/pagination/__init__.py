"""Pagination window and response size guard."""

from .paginator import Page, paginate, paginate_at_path, resolve_path
from .size_guard import (DEFAULT_RESPONSE_SIZE_LIMIT, OVERSIZED_RESULT_MESSAGE,
                         guard_response_size)

__all__ = [
    "DEFAULT_RESPONSE_SIZE_LIMIT",
    "OVERSIZED_RESULT_MESSAGE",
    "Page",
    "guard_response_size",
    "paginate",
    "paginate_at_path",
    "resolve_path",
]
