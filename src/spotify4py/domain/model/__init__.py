"""Domain model package."""

from __future__ import annotations

from .audio import (
    AnalysisTrack,
    AudioAnalysis,
    AudioFeatures,
    Section,
    Segment,
    TimeInterval,
)
from .auth import AccessCredential
from .catalog import (
    Album,
    Artist,
    Category,
    Copyright,
    Episode,
    Followers,
    Image,
    LinkedTrack,
    Restrictions,
    ResumePoint,
    Show,
    Track,
    frozen_mapping,
)
from .enums import (
    AlbumGroup,
    AlbumType,
    CopyrightType,
    FollowType,
    IncludeGroup,
    Modality,
    ObjectType,
    ReleaseDatePrecision,
    SeedType,
)
from .library import (
    FeaturedPlaylists,
    Playlist,
    PlaylistTracksRef,
    SavedAlbum,
    SavedShow,
    SavedTrack,
    User,
)
from .paging import Cursor, CursorPaging, Paging
from .recommendations import RecommendationSeed, Recommendations

type Searchable = Album | Artist | Track | Show | Episode

__all__ = [
    "AccessCredential",
    "Album",
    "AlbumGroup",
    "AlbumType",
    "AnalysisTrack",
    "Artist",
    "AudioAnalysis",
    "AudioFeatures",
    "Category",
    "Copyright",
    "CopyrightType",
    "Cursor",
    "CursorPaging",
    "Episode",
    "FeaturedPlaylists",
    "FollowType",
    "Followers",
    "Image",
    "IncludeGroup",
    "LinkedTrack",
    "Modality",
    "ObjectType",
    "Paging",
    "Playlist",
    "PlaylistTracksRef",
    "RecommendationSeed",
    "Recommendations",
    "ReleaseDatePrecision",
    "Restrictions",
    "ResumePoint",
    "SavedAlbum",
    "SavedShow",
    "SavedTrack",
    "Searchable",
    "SeedType",
    "Section",
    "Segment",
    "Show",
    "TimeInterval",
    "Track",
    "User",
    "frozen_mapping",
]
