"""Error taxonomy shared by the auth flows and the API facade."""

from __future__ import annotations


class SpotifyError(Exception):
    """Base class for every error raised or returned by spotify4py."""


class ValidationError(SpotifyError):
    """A caller-supplied parameter violates a documented constraint.

    Raised before any request is built; endpoint methods return it wrapped in ``Err``.
    """


class ApiError(SpotifyError):
    """Decoded from a non-success response of the Web API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(f"{status}: {message}")
        self.status = status
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return (self.status, self.message) == (other.status, other.message)

    def __hash__(self) -> int:
        return hash((self.status, self.message))


class AuthError(SpotifyError):
    """Token acquisition or refresh failed."""

    def __init__(
        self,
        error: str,
        error_description: str | None = None,
        *,
        status: int | None = None,
    ) -> None:
        super().__init__(f"{error}: {error_description}" if error_description else error)
        self.error = error
        self.error_description = error_description
        self.status = status


class UnrecognizedValueError(SpotifyError, ValueError):
    """A wire value does not map onto any known enum member."""


class UnexpectedResponseError(SpotifyError):
    """A response body does not match the documented contract."""
