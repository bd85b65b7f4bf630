"""Tagged success/failure values returned by the endpoint methods."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Never


@dataclass(frozen=True)
class Ok[T]:
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D) -> T:  # noqa: ARG002
        return self.value


@dataclass(frozen=True)
class Err[E]:
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Never:
        if isinstance(self.error, BaseException):
            raise self.error
        raise RuntimeError(f"Called unwrap on an Err value: {self.error!r}")

    def unwrap_or[D](self, default: D) -> D:
        return default


type Result[T, E] = Ok[T] | Err[E]
