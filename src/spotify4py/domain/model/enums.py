"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum

from spotify4py.domain.errors import UnrecognizedValueError


class _CaseInsensitiveStrEnum(StrEnum):
    @classmethod
    def _missing_(cls, value: object) -> _CaseInsensitiveStrEnum | None:
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class AlbumType(_CaseInsensitiveStrEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"


class AlbumGroup(_CaseInsensitiveStrEnum):
    ALBUM = "album"
    SINGLE = "single"
    COMPILATION = "compilation"
    APPEARS_ON = "appears_on"


IncludeGroup = AlbumGroup


class ReleaseDatePrecision(StrEnum):
    YEAR = "year"
    MONTH = "month"
    DAY = "day"


class CopyrightType(StrEnum):
    """Single-character copyright codes used by album and show payloads."""

    PERFORMANCE = "C"
    SOUND_RECORDING = "P"

    @classmethod
    def from_code(cls, code: str) -> CopyrightType:
        for member in cls:
            if member.value == code:
                return member
        raise UnrecognizedValueError(f"Unrecognized copyright type: {code!r}")


class Modality(IntEnum):
    MINOR = 0
    MAJOR = 1


class ObjectType(StrEnum):
    """Object types accepted by the search endpoint."""

    ALBUM = "album"
    ARTIST = "artist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"


class FollowType(StrEnum):
    ARTIST = "artist"
    USER = "user"


class SeedType(_CaseInsensitiveStrEnum):
    ARTIST = "artist"
    TRACK = "track"
    GENRE = "genre"
