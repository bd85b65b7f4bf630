"""Catalog entities: artists, albums, tracks, shows, episodes and categories."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .enums import AlbumGroup, AlbumType, CopyrightType, ReleaseDatePrecision
    from .paging import Paging


def frozen_mapping(values: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Read-only copy of ``values``, used for ``external_urls`` and ``external_ids``."""

    return MappingProxyType(dict(values or {}))


@dataclass(frozen=True, slots=True)
class Image:
    url: str
    height: int | None = None
    width: int | None = None


@dataclass(frozen=True, slots=True)
class Followers:
    total: int
    href: str | None = None


@dataclass(frozen=True, slots=True)
class Restrictions:
    reason: str


@dataclass(frozen=True, slots=True)
class Copyright:
    text: str
    copyright_type: CopyrightType


@dataclass(frozen=True, slots=True)
class Artist:
    id: str
    name: str
    uri: str | None = None
    href: str | None = None
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    genres: tuple[str, ...] = ()
    images: tuple[Image, ...] = ()
    popularity: int | None = None
    followers: Followers | None = None


@dataclass(frozen=True, slots=True)
class Album:
    id: str
    name: str
    album_type: AlbumType | None = None
    album_group: AlbumGroup | None = None
    artists: tuple[Artist, ...] = ()
    available_markets: tuple[str, ...] = ()
    copyrights: tuple[Copyright, ...] = ()
    external_ids: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    genres: tuple[str, ...] = ()
    href: str | None = None
    images: tuple[Image, ...] = ()
    label: str | None = None
    popularity: int | None = None
    release_date: str | None = None
    release_date_precision: ReleaseDatePrecision | None = None
    restrictions: Restrictions | None = None
    total_tracks: int | None = None
    tracks: Paging[Track] | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class LinkedTrack:
    id: str
    uri: str | None = None
    href: str | None = None
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)


@dataclass(frozen=True, slots=True)
class Track:
    # Local files carry no catalog id.
    id: str | None
    name: str
    album: Album | None = None
    artists: tuple[Artist, ...] = ()
    available_markets: tuple[str, ...] = ()
    disc_number: int = 1
    duration_ms: int = 0
    explicit: bool = False
    external_ids: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    href: str | None = None
    is_local: bool = False
    is_playable: bool | None = None
    linked_from: LinkedTrack | None = None
    popularity: int | None = None
    preview_url: str | None = None
    restrictions: Restrictions | None = None
    track_number: int | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class ResumePoint:
    fully_played: bool
    resume_position_ms: int


@dataclass(frozen=True, slots=True)
class Show:
    id: str
    name: str
    available_markets: tuple[str, ...] = ()
    copyrights: tuple[Copyright, ...] = ()
    description: str | None = None
    html_description: str | None = None
    explicit: bool = False
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    href: str | None = None
    images: tuple[Image, ...] = ()
    is_externally_hosted: bool | None = None
    languages: tuple[str, ...] = ()
    media_type: str | None = None
    publisher: str | None = None
    total_episodes: int | None = None
    episodes: Paging[Episode] | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class Episode:
    id: str
    name: str
    audio_preview_url: str | None = None
    description: str | None = None
    html_description: str | None = None
    duration_ms: int = 0
    explicit: bool = False
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    href: str | None = None
    images: tuple[Image, ...] = ()
    is_externally_hosted: bool | None = None
    is_playable: bool | None = None
    languages: tuple[str, ...] = ()
    release_date: str | None = None
    release_date_precision: ReleaseDatePrecision | None = None
    resume_point: ResumePoint | None = None
    show: Show | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class Category:
    id: str
    name: str
    href: str | None = None
    icons: tuple[Image, ...] = ()
