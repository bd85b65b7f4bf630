"""Paging wrappers shared by every list-returning endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class Paging[T]:
    """One offset-addressed page of items plus its navigation metadata."""

    items: tuple[T, ...] = field(default_factory=tuple)
    limit: int = 0
    offset: int = 0
    total: int = 0
    href: str | None = None
    next: str | None = None
    previous: str | None = None

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"Paging offset must be non-negative, got {self.offset}")
        if self.limit and len(self.items) > self.limit:
            raise ValueError(
                f"Paging holds {len(self.items)} items but its limit is {self.limit}"
            )

    def map_items[U](self, func: Callable[[T], U]) -> Paging[U]:
        return Paging(
            items=tuple(func(item) for item in self.items),
            limit=self.limit,
            offset=self.offset,
            total=self.total,
            href=self.href,
            next=self.next,
            previous=self.previous,
        )

    @property
    def has_next(self) -> bool:
        return self.next is not None


@dataclass(frozen=True, slots=True)
class Cursor:
    after: str | None = None
    before: str | None = None


@dataclass(frozen=True)
class CursorPaging[T]:
    """A cursor-addressed page; used by the followed-artists endpoint."""

    items: tuple[T, ...] = field(default_factory=tuple)
    limit: int = 0
    cursors: Cursor = field(default_factory=Cursor)
    total: int | None = None
    href: str | None = None
    next: str | None = None

    def __post_init__(self) -> None:
        if self.limit and len(self.items) > self.limit:
            raise ValueError(
                f"Paging holds {len(self.items)} items but its limit is {self.limit}"
            )

    def map_items[U](self, func: Callable[[T], U]) -> CursorPaging[U]:
        return CursorPaging(
            items=tuple(func(item) for item in self.items),
            limit=self.limit,
            cursors=self.cursors,
            total=self.total,
            href=self.href,
            next=self.next,
        )

    @property
    def has_next(self) -> bool:
        return self.next is not None
