from __future__ import annotations

from importlib import metadata

from spotify4py.adapters.spotify import (
    AuthorizationCode,
    AuthorizationCodePKCE,
    ClientCredentials,
    SpotifyClient,
)
from spotify4py.domain.errors import (
    ApiError,
    AuthError,
    SpotifyError,
    UnexpectedResponseError,
    UnrecognizedValueError,
    ValidationError,
)
from spotify4py.domain.result import Err, Ok, Result

try:
    __version__ = metadata.version("spotify4py")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "ApiError",
    "AuthError",
    "AuthorizationCode",
    "AuthorizationCodePKCE",
    "ClientCredentials",
    "Err",
    "Ok",
    "Result",
    "SpotifyClient",
    "SpotifyError",
    "UnexpectedResponseError",
    "UnrecognizedValueError",
    "ValidationError",
    "__version__",
]
