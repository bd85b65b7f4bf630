"""Errors raised while loading spotify4py settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when spotify4py settings are invalid."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required environment variables are absent or blank.

    ``names`` lists every missing variable in sorted order so a single run reports
    all of them at once.
    """

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(
            f"Missing configuration for: {', '.join(self.names)} "
            "(set them in the environment or in a .env file)"
        )
