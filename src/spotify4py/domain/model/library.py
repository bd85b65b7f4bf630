"""User-scoped entities: profiles, playlists and saved library items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .catalog import frozen_mapping

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from .catalog import Album, Followers, Image, Show, Track
    from .paging import Paging


@dataclass(frozen=True, slots=True)
class User:
    id: str
    display_name: str | None = None
    country: str | None = None
    email: str | None = None
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    followers: Followers | None = None
    href: str | None = None
    images: tuple[Image, ...] = ()
    product: str | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class PlaylistTracksRef:
    """Link to a playlist's tracks, as embedded in simplified playlists."""

    total: int
    href: str | None = None


@dataclass(frozen=True, slots=True)
class Playlist:
    id: str
    name: str
    owner: User
    collaborative: bool = False
    description: str | None = None
    external_urls: Mapping[str, str] = field(default_factory=frozen_mapping, hash=False)
    href: str | None = None
    images: tuple[Image, ...] = ()
    public: bool | None = None
    snapshot_id: str | None = None
    tracks: PlaylistTracksRef | None = None
    uri: str | None = None


@dataclass(frozen=True, slots=True)
class FeaturedPlaylists:
    message: str | None
    playlists: Paging[Playlist]


@dataclass(frozen=True, slots=True)
class SavedAlbum:
    added_at: datetime
    album: Album


@dataclass(frozen=True, slots=True)
class SavedShow:
    added_at: datetime
    show: Show


@dataclass(frozen=True, slots=True)
class SavedTrack:
    added_at: datetime
    track: Track
