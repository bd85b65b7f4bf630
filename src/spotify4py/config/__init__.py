"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http import HttpConfig
from .logging import configure_logging
from .spotify import (
    SPOTIFY_ACCOUNTS_BASE_URL,
    SPOTIFY_API_BASE_URL,
    SPOTIFY_FOLLOW_SCOPES,
    SPOTIFY_LIBRARY_SCOPES,
    SPOTIFY_PLAYBACK_POSITION_SCOPES,
    SPOTIFY_PLAYLIST_SCOPES,
    SPOTIFY_PROFILE_SCOPES,
    SpotifyConfig,
    get_spotify_config,
    merge_spotify_scopes,
)

__all__ = [
    "SPOTIFY_ACCOUNTS_BASE_URL",
    "SPOTIFY_API_BASE_URL",
    "SPOTIFY_FOLLOW_SCOPES",
    "SPOTIFY_LIBRARY_SCOPES",
    "SPOTIFY_PLAYBACK_POSITION_SCOPES",
    "SPOTIFY_PLAYLIST_SCOPES",
    "SPOTIFY_PROFILE_SCOPES",
    "ConfigurationError",
    "HttpConfig",
    "MissingConfigurationError",
    "SpotifyConfig",
    "configure_logging",
    "get_spotify_config",
    "merge_spotify_scopes",
    "optional_env_var",
    "require_env_vars",
]
