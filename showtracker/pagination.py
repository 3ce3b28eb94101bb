import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE = 30


def paginate(items: Sequence[T], page: int, size: int = PAGE_SIZE) -> list[T]:
    """Return the 1-based ``page`` of ``items``; out-of-range pages are empty."""
    if page < 1:
        return []
    start = (page - 1) * size
    return list(items[start:start + size])


def total_pages(items: Sequence, size: int = PAGE_SIZE) -> int:
    return math.ceil(len(items) / size)


def has_page_controls(items: Sequence, size: int = PAGE_SIZE) -> bool:
    return total_pages(items, size) > 1


@dataclass
class PageState:
    """Current page of the upcoming and past lists, paginated independently."""
    upcoming: int = 1
    past: int = 1

    def reset(self) -> None:
        self.upcoming = 1
        self.past = 1
