"""Local parameter checks run before any request is built."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spotify4py.domain.errors import ValidationError

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Mapping, Sequence

MAX_RECOMMENDATION_SEEDS = 5
TUNABLE_ATTRIBUTE_PREFIXES = ("min_", "max_", "target_")


def require_range(name: str, value: int, *, minimum: int, maximum: int | None = None) -> None:
    if maximum is None:
        if value < minimum:
            if minimum == 0:
                raise ValidationError(f"The {name} parameter must be non-negative")
            raise ValidationError(f"The {name} parameter must be at least {minimum}")
        return
    if not minimum <= value <= maximum:
        raise ValidationError(f"The {name} parameter must be between {minimum} and {maximum}")


def require_paging(limit: int, offset: int, *, max_limit: int = 50) -> None:
    require_range("limit", limit, minimum=1, maximum=max_limit)
    require_range("offset", offset, minimum=0)


def require_ids(ids: Sequence[str], *, maximum: int) -> None:
    if not ids:
        raise ValidationError("At least one ID must be specified")
    if len(ids) > maximum:
        raise ValidationError(f"The maximum number of IDs is {maximum}")


def require_non_empty(name: str, value: str | Sequence[object]) -> None:
    if not value:
        raise ValidationError(f"The {name} parameter must be non-empty")


def require_member[T](name: str, value: str, allowed: Iterable[T]) -> T:
    """Resolve ``value`` against a restricted set (typically a ``StrEnum``)."""

    choices = list(allowed)
    for choice in choices:
        if value == choice:
            return choice
    listed = ", ".join(repr(str(choice)) for choice in choices)
    raise ValidationError(f"Invalid value {value!r} for {name}; expected one of {listed}")


def require_subset[T](name: str, values: Iterable[str], allowed: Collection[T]) -> list[T]:
    return [require_member(name, value, allowed) for value in values]


def require_seeds(
    *,
    seed_artists: Sequence[str],
    seed_genres: Sequence[str],
    seed_tracks: Sequence[str],
) -> None:
    total = len(seed_artists) + len(seed_genres) + len(seed_tracks)
    if total == 0:
        raise ValidationError("At least one seed must be provided")
    if total > MAX_RECOMMENDATION_SEEDS:
        raise ValidationError(
            f"At most {MAX_RECOMMENDATION_SEEDS} seeds may be provided across artists, "
            "genres and tracks"
        )


def require_tunable_attributes(attributes: Mapping[str, object]) -> None:
    for name in attributes:
        if not name.startswith(TUNABLE_ATTRIBUTE_PREFIXES):
            raise ValidationError(
                f"Invalid tunable attribute {name!r}; names must start with "
                "'min_', 'max_' or 'target_'"
            )
