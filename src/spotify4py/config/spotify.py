"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import optional_env_var, require_env_vars
from .http import HttpConfig

SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
SPOTIFY_ACCOUNTS_BASE_URL = "https://accounts.spotify.com"
SPOTIFY_TOKEN_PATH = "api/token"  # noqa: S105
SPOTIFY_AUTHORIZE_PATH = "authorize"
SPOTIFY_TIMEOUT_SECONDS = 30.0

SPOTIFY_LIBRARY_SCOPES = (
    "user-library-read",
    "user-library-modify",
)
SPOTIFY_FOLLOW_SCOPES = (
    "user-follow-read",
    "user-follow-modify",
)
SPOTIFY_PLAYLIST_SCOPES = (
    "playlist-modify-public",
    "playlist-modify-private",
)
SPOTIFY_PROFILE_SCOPES = (
    "user-read-private",
    "user-read-email",
)
SPOTIFY_PLAYBACK_POSITION_SCOPES = ("user-read-playback-position",)


def merge_spotify_scopes(*scopes: tuple[str, ...]) -> tuple[str, ...]:
    merged: list[str] = []
    for scope_list in scopes:
        for scope in scope_list:
            if scope not in merged:
                merged.append(scope)
    return tuple(merged)


def default_api_http_config() -> HttpConfig:
    return HttpConfig(
        name="spotify-api",
        base_url=SPOTIFY_API_BASE_URL,
        timeout_seconds=SPOTIFY_TIMEOUT_SECONDS,
    )


def default_accounts_http_config() -> HttpConfig:
    return HttpConfig(
        name="spotify-accounts",
        base_url=SPOTIFY_ACCOUNTS_BASE_URL,
        timeout_seconds=SPOTIFY_TIMEOUT_SECONDS,
    )


@dataclass(frozen=True)
class SpotifyConfig:
    client_id: str
    client_secret: str
    redirect_uri: str | None = None
    scope: tuple[str, ...] = field(default_factory=tuple)
    api: HttpConfig = field(default_factory=default_api_http_config)
    accounts: HttpConfig = field(default_factory=default_accounts_http_config)


def get_spotify_config(*, scope: tuple[str, ...] | None = None) -> SpotifyConfig:
    values = require_env_vars(("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"))
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        redirect_uri=optional_env_var("SPOTIFY_REDIRECT_URI"),
        scope=scope or (),
    )
