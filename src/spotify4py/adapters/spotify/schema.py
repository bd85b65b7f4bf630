"""Pydantic models mirroring the Spotify Web API and accounts payloads."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from spotify4py.domain.model.enums import (  # noqa: TC001
    AlbumGroup,
    AlbumType,
    Modality,
    ReleaseDatePrecision,
    SeedType,
)

ItemT = TypeVar("ItemT")


class SpotifyBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyImage(SpotifyBaseModel):
    url: str
    height: int | None = None
    width: int | None = None


class SpotifyFollowers(SpotifyBaseModel):
    href: str | None = None
    total: int = 0


class SpotifyRestrictions(SpotifyBaseModel):
    reason: str


class SpotifyCopyright(SpotifyBaseModel):
    text: str
    type: str


class SpotifyArtist(SpotifyBaseModel):
    id: str
    name: str
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    genres: list[str] = Field(default_factory=list)
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    popularity: int | None = None
    followers: SpotifyFollowers | None = None


class SpotifyPage(SpotifyBaseModel, Generic[ItemT]):
    href: str | None = None
    items: list[ItemT] = Field(default_factory=list)
    limit: int = 0
    next: str | None = None
    offset: int = 0
    previous: str | None = None
    total: int = 0


class SpotifyCursor(SpotifyBaseModel):
    after: str | None = None
    before: str | None = None


class SpotifyCursorPage(SpotifyBaseModel, Generic[ItemT]):
    href: str | None = None
    items: list[ItemT] = Field(default_factory=list)
    limit: int = 0
    next: str | None = None
    cursors: SpotifyCursor | None = None
    total: int | None = None


class SpotifyAlbum(SpotifyBaseModel):
    id: str
    name: str
    album_type: AlbumType | None = None
    album_group: AlbumGroup | None = None
    artists: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])
    available_markets: list[str] = Field(default_factory=list)
    copyrights: list[SpotifyCopyright] = Field(default_factory=list["SpotifyCopyright"])
    external_ids: dict[str, str] = Field(default_factory=dict)
    external_urls: dict[str, str] = Field(default_factory=dict)
    genres: list[str] = Field(default_factory=list)
    href: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    label: str | None = None
    popularity: int | None = None
    release_date: str | None = None
    release_date_precision: ReleaseDatePrecision | None = None
    restrictions: SpotifyRestrictions | None = None
    total_tracks: int | None = None
    tracks: SpotifyPage[SpotifyTrack] | None = None
    uri: str | None = None


class SpotifyLinkedTrack(SpotifyBaseModel):
    id: str
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyTrack(SpotifyBaseModel):
    id: str | None = None
    name: str
    album: SpotifyAlbum | None = None
    artists: list[SpotifyArtist] = Field(default_factory=list["SpotifyArtist"])
    available_markets: list[str] = Field(default_factory=list)
    disc_number: int = 1
    duration_ms: int = 0
    explicit: bool = False
    external_ids: dict[str, str] = Field(default_factory=dict)
    external_urls: dict[str, str] = Field(default_factory=dict)
    href: str | None = None
    is_local: bool = False
    is_playable: bool | None = None
    linked_from: SpotifyLinkedTrack | None = None
    popularity: int | None = None
    preview_url: str | None = None
    restrictions: SpotifyRestrictions | None = None
    track_number: int | None = None
    uri: str | None = None


class SpotifyResumePoint(SpotifyBaseModel):
    fully_played: bool = False
    resume_position_ms: int = 0


class SpotifyShow(SpotifyBaseModel):
    id: str
    name: str
    available_markets: list[str] = Field(default_factory=list)
    copyrights: list[SpotifyCopyright] = Field(default_factory=list["SpotifyCopyright"])
    description: str | None = None
    html_description: str | None = None
    explicit: bool = False
    external_urls: dict[str, str] = Field(default_factory=dict)
    href: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    is_externally_hosted: bool | None = None
    languages: list[str] = Field(default_factory=list)
    media_type: str | None = None
    publisher: str | None = None
    total_episodes: int | None = None
    episodes: SpotifyPage[SpotifyEpisode] | None = None
    uri: str | None = None


class SpotifyEpisode(SpotifyBaseModel):
    id: str
    name: str
    audio_preview_url: str | None = None
    description: str | None = None
    html_description: str | None = None
    duration_ms: int = 0
    explicit: bool = False
    external_urls: dict[str, str] = Field(default_factory=dict)
    href: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    is_externally_hosted: bool | None = None
    is_playable: bool | None = None
    languages: list[str] = Field(default_factory=list)
    release_date: str | None = None
    release_date_precision: ReleaseDatePrecision | None = None
    resume_point: SpotifyResumePoint | None = None
    show: SpotifyShow | None = None
    uri: str | None = None


class SpotifyCategory(SpotifyBaseModel):
    id: str
    name: str
    href: str | None = None
    icons: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])


class SpotifyUser(SpotifyBaseModel):
    id: str
    display_name: str | None = None
    country: str | None = None
    email: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    followers: SpotifyFollowers | None = None
    href: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    product: str | None = None
    uri: str | None = None


class SpotifyPlaylistTracksRef(SpotifyBaseModel):
    href: str | None = None
    total: int = 0


class SpotifyPlaylist(SpotifyBaseModel):
    id: str
    name: str
    owner: SpotifyUser
    collaborative: bool = False
    description: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)
    href: str | None = None
    images: list[SpotifyImage] = Field(default_factory=list["SpotifyImage"])
    public: bool | None = None
    snapshot_id: str | None = None
    tracks: SpotifyPlaylistTracksRef | None = None
    uri: str | None = None


class SavedAlbumItem(SpotifyBaseModel):
    added_at: datetime
    album: SpotifyAlbum


class SavedShowItem(SpotifyBaseModel):
    added_at: datetime
    show: SpotifyShow


class SavedTrackItem(SpotifyBaseModel):
    added_at: datetime
    track: SpotifyTrack


class SpotifyAudioFeatures(SpotifyBaseModel):
    id: str
    acousticness: float
    danceability: float
    duration_ms: int
    energy: float
    instrumentalness: float
    key: int
    liveness: float
    loudness: float
    mode: Modality
    speechiness: float
    tempo: float
    time_signature: int
    valence: float
    analysis_url: str | None = None
    track_href: str | None = None
    uri: str | None = None


class SpotifyTimeInterval(SpotifyBaseModel):
    start: float
    duration: float
    confidence: float


class SpotifySection(SpotifyBaseModel):
    start: float
    duration: float
    confidence: float
    loudness: float
    tempo: float
    tempo_confidence: float
    key: int
    key_confidence: float
    # -1 when no mode was detected.
    mode: int
    mode_confidence: float
    time_signature: int
    time_signature_confidence: float


class SpotifySegment(SpotifyBaseModel):
    start: float
    duration: float
    confidence: float
    loudness_start: float
    loudness_max: float
    loudness_max_time: float
    loudness_end: float | None = None
    pitches: list[float] = Field(default_factory=list)
    timbre: list[float] = Field(default_factory=list)


class SpotifyAnalysisTrack(SpotifyBaseModel):
    duration: float
    loudness: float
    tempo: float
    tempo_confidence: float
    time_signature: int
    time_signature_confidence: float
    key: int
    key_confidence: float
    mode: int
    mode_confidence: float
    num_samples: int | None = None
    end_of_fade_in: float | None = None
    start_of_fade_out: float | None = None


class SpotifyAudioAnalysis(SpotifyBaseModel):
    track: SpotifyAnalysisTrack
    bars: list[SpotifyTimeInterval] = Field(default_factory=list["SpotifyTimeInterval"])
    beats: list[SpotifyTimeInterval] = Field(default_factory=list["SpotifyTimeInterval"])
    sections: list[SpotifySection] = Field(default_factory=list["SpotifySection"])
    segments: list[SpotifySegment] = Field(default_factory=list["SpotifySegment"])
    tatums: list[SpotifyTimeInterval] = Field(default_factory=list["SpotifyTimeInterval"])


class SpotifyRecommendationSeed(SpotifyBaseModel):
    id: str
    type: SeedType
    after_filtering_size: int = Field(alias="afterFilteringSize")
    after_relinking_size: int = Field(alias="afterRelinkingSize")
    initial_pool_size: int = Field(alias="initialPoolSize")
    href: str | None = None


class SpotifyRecommendations(SpotifyBaseModel):
    seeds: list[SpotifyRecommendationSeed] = Field(
        default_factory=list["SpotifyRecommendationSeed"]
    )
    tracks: list[SpotifyTrack] = Field(default_factory=list["SpotifyTrack"])


# Envelopes wrapping the payload of a single endpoint.


class AlbumsEnvelope(SpotifyBaseModel):
    albums: list[SpotifyAlbum | None]


class ArtistsEnvelope(SpotifyBaseModel):
    artists: list[SpotifyArtist | None]


class TracksEnvelope(SpotifyBaseModel):
    tracks: list[SpotifyTrack | None]


class EpisodesEnvelope(SpotifyBaseModel):
    episodes: list[SpotifyEpisode | None]


class ShowsEnvelope(SpotifyBaseModel):
    shows: list[SpotifyShow | None]


class AudioFeaturesEnvelope(SpotifyBaseModel):
    audio_features: list[SpotifyAudioFeatures | None]


class GenreSeedsEnvelope(SpotifyBaseModel):
    genres: list[str]


class AlbumPageEnvelope(SpotifyBaseModel):
    albums: SpotifyPage[SpotifyAlbum]


class ArtistPageEnvelope(SpotifyBaseModel):
    artists: SpotifyPage[SpotifyArtist]


class TrackPageEnvelope(SpotifyBaseModel):
    tracks: SpotifyPage[SpotifyTrack]


class ShowPageEnvelope(SpotifyBaseModel):
    shows: SpotifyPage[SpotifyShow]


class EpisodePageEnvelope(SpotifyBaseModel):
    episodes: SpotifyPage[SpotifyEpisode]


class PlaylistPageEnvelope(SpotifyBaseModel):
    playlists: SpotifyPage[SpotifyPlaylist]


class CategoryPageEnvelope(SpotifyBaseModel):
    categories: SpotifyPage[SpotifyCategory]


class FeaturedPlaylistsEnvelope(SpotifyBaseModel):
    message: str | None = None
    playlists: SpotifyPage[SpotifyPlaylist]


class FollowedArtistsEnvelope(SpotifyBaseModel):
    artists: SpotifyCursorPage[SpotifyArtist]


# Error and token payloads.


class ErrorDetail(SpotifyBaseModel):
    status: int
    message: str = ""


class ErrorResponse(SpotifyBaseModel):
    error: ErrorDetail


class TokenResponse(SpotifyBaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 3600
    refresh_token: str | None = None
    scope: str | None = None


class TokenErrorResponse(SpotifyBaseModel):
    error: str
    error_description: str | None = None


SpotifyAlbum.model_rebuild()
SpotifyShow.model_rebuild()
SpotifyTrack.model_rebuild()
SpotifyEpisode.model_rebuild()
