"""Access credentials issued by the accounts service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class AccessCredential:
    """A bearer token and its metadata.

    Held by the API facade for the lifetime of a session and replaced wholesale
    when the token is refreshed.
    """

    access_token: str
    token_type: str
    expires_in: int
    refresh_token: str | None = None
    scope: tuple[str, ...] = ()
    issued_at: datetime = field(default_factory=_utcnow)

    @property
    def expires_at(self) -> datetime:
        return self.issued_at + timedelta(seconds=self.expires_in)

    def is_expired(self, *, now: datetime | None = None, leeway_seconds: float = 0.0) -> bool:
        reference = now or _utcnow()
        return reference + timedelta(seconds=leeway_seconds) >= self.expires_at

    def __repr__(self) -> str:
        return (
            f"AccessCredential(token_type={self.token_type!r}, expires_in={self.expires_in}, "
            f"scope={self.scope!r}, has_refresh_token={self.refresh_token is not None})"
        )
