"""Recommendation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .catalog import Track
    from .enums import SeedType


@dataclass(frozen=True, slots=True)
class RecommendationSeed:
    id: str
    type: SeedType
    after_filtering_size: int
    after_relinking_size: int
    initial_pool_size: int
    href: str | None = None


@dataclass(frozen=True, slots=True)
class Recommendations:
    seeds: tuple[RecommendationSeed, ...]
    tracks: tuple[Track, ...]
