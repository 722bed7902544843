from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, TypeVar

L = TypeVar("L")
R = TypeVar("R")
C = TypeVar("C")


class EitherType(Enum):
    LEFT = "left"
    RIGHT = "right"


class Either(Generic[L, R]):
    """Two-alternative value, consumed by ``from_either`` through ``is_left``
    and ``value`` only."""

    @property
    def tag(self) -> EitherType: raise NotImplementedError

    def is_left(self) -> bool: return self.tag is EitherType.LEFT
    def is_right(self) -> bool: return self.tag is EitherType.RIGHT

    def fold(self, if_left: Callable[[L], C], if_right: Callable[[R], C]) -> C:
        if self.is_left():
            return if_left(self.value)  # type: ignore[attr-defined]
        return if_right(self.value)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Left(Either[L, R]):
    value: L

    @property
    def tag(self) -> EitherType: return EitherType.LEFT


@dataclass(frozen=True)
class Right(Either[L, R]):
    value: R

    @property
    def tag(self) -> EitherType: return EitherType.RIGHT


def left(value: L) -> Either[L, R]:
    return Left(value)


def right(value: R) -> Either[L, R]:
    return Right(value)
