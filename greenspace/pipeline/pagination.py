"""Progressive disclosure over a filtered result."""

from __future__ import annotations

from typing import Sequence, TypeVar

from greenspace.common.constants import PAGE_SIZE

T = TypeVar("T")


class PaginationCursor:
    def __init__(self, page_size: int = PAGE_SIZE, total: int = 0) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.page_size = page_size
        self.total = 0
        self.visible_count = 0
        self.reset(total)

    def reset(self, total: int) -> int:
        self.total = max(0, total)
        self.visible_count = min(self.page_size, self.total)
        return self.visible_count

    def advance(self) -> int:
        self.visible_count = min(self.visible_count + self.page_size, self.total)
        return self.visible_count

    @property
    def has_more(self) -> bool:
        return self.visible_count < self.total

    def visible(self, items: Sequence[T]) -> list[T]:
        return list(items[: self.visible_count])
