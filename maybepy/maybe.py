from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Optional, Tuple, TypeVar, Union

if TYPE_CHECKING:
    from .either import Either

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")
R = TypeVar("R")
T1 = TypeVar("T1")
T2 = TypeVar("T2")


class MaybeType(Enum):
    JUST = "just"
    NOTHING = "nothing"


class EmptyValueError(ValueError):
    def __init__(self, message: str = "Value empty."):
        super().__init__(message)


# immutable builtins whose zero-argument call is their zero value
_ZERO_VALUES: Dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
    tuple: (),
    frozenset: frozenset(),
    Decimal: Decimal(0),
    Fraction: Fraction(0),
}


def _default_of(t: Optional[type]) -> Any:
    # None stands in for every other type; no user constructor is ever called
    return _ZERO_VALUES.get(t) if t is not None else None


class Maybe(Generic[T]):
    """An optional value: either ``Just(value)`` or ``Nothing``.

    Every combinator below is written against ``match_just`` alone; only the
    variants know where the payload lives. ``map`` and ``bind`` hand a
    ``Nothing`` back as is, carried type included.
    """

    @property
    def tag(self) -> MaybeType: raise NotImplementedError

    def match_just(self) -> Tuple[bool, Optional[T]]: raise NotImplementedError

    def match_nothing(self) -> bool: return self.tag is MaybeType.NOTHING
    def is_nothing(self) -> bool: return self.tag is MaybeType.NOTHING
    def is_just(self) -> bool: return self.tag is MaybeType.JUST

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        ok, value = self.match_just()
        if ok:
            return Just(f(value))  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    def bind(self, f: Callable[[T], "Maybe[U]"]) -> "Maybe[U]":
        ok, value = self.match_just()
        if ok:
            return f(value)  # type: ignore[arg-type]
        return self  # type: ignore[return-value]

    flat_map = bind
    select = map

    def select_many(self, value_selector: Callable[[T], "Maybe[U]"], result_selector: Callable[[T, U], V]) -> "Maybe[V]":
        return self.bind(lambda a: value_selector(a).map(lambda b: result_selector(a, b)))

    def map_or_default(self, f: Callable[[T], U], fallback: U) -> U:
        ok, value = self.match_just()
        return f(value) if ok else fallback  # type: ignore[arg-type]

    def get_or_else(self, default: U) -> Union[T, U]:
        ok, value = self.match_just()
        return value if ok else default  # type: ignore[return-value]

    def or_else(self, f: Callable[[], "Maybe[T]"]) -> "Maybe[T]":
        return self if self.is_just() else f()

    def do(self, action: Callable[[T], Any]) -> None:
        ok, value = self.match_just()
        if ok:
            action(value)  # type: ignore[arg-type]

    def match(self, if_just: Callable[[T], R], if_nothing: Callable[[], R]) -> R:
        ok, value = self.match_just()
        if ok:
            return if_just(value)  # type: ignore[arg-type]
        return if_nothing()

    # Pair helpers for Maybe[Tuple[T1, T2]], e.g. the output of merge()
    def match_just_pair(self) -> Tuple[bool, Any, Any]:
        ok, value = self.match_just()
        if ok:
            first, second = value  # type: ignore[misc]
            return True, first, second
        return False, None, None

    def match_pair(self, if_just: Callable[[Any, Any], R], if_nothing: Callable[[], R]) -> R:
        ok, first, second = self.match_just_pair()
        if ok:
            return if_just(first, second)
        return if_nothing()

    def do_pair(self, action: Callable[[Any, Any], Any]) -> None:
        ok, first, second = self.match_just_pair()
        if ok:
            action(first, second)

    def from_just(self) -> Optional[T]:
        """Return the value, or the payload type's default when empty."""
        _, value = self.match_just()
        return value

    def from_just_or_fail(self, error: Union[BaseException, type, None] = None) -> T:
        ok, value = self.match_just()
        if ok:
            return value  # type: ignore[return-value]
        raise error if error is not None else EmptyValueError()


@dataclass(frozen=True)
class Just(Maybe[T]):
    value: T

    @property
    def tag(self) -> MaybeType: return MaybeType.JUST

    def match_just(self) -> Tuple[bool, Optional[T]]: return True, self.value

    def __repr__(self) -> str: return f"Just({self.value!r})"


@dataclass(frozen=True)
class Nothing(Maybe[T]):
    # payload type, used only to pick a default; ignored by ==
    type_: Optional[type] = field(default=None, compare=False)
    default: Any = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default", _default_of(self.type_))

    @property
    def tag(self) -> MaybeType: return MaybeType.NOTHING

    def match_just(self) -> Tuple[bool, Optional[T]]: return False, self.default

    def __repr__(self) -> str: return "Nothing"


def nothing(t: Optional[type] = None) -> Maybe[Any]:
    return Nothing(t)


def just(value: T) -> Maybe[T]:
    return Just(value)


def to_maybe(value: T) -> Maybe[T]:
    """Build ``Just(value)`` unless ``value`` is ``None`` or its type's default.

    ``to_maybe(0)``, ``to_maybe("")`` and ``to_maybe(None)`` are all
    ``Nothing``, so a value explicitly set to its default cannot be told
    apart from an unset one. Use ``just``/``nothing`` where that matters.
    Only immutable builtins (numbers, ``str``, ``bytes``, ``tuple``,
    ``frozenset``, ``Decimal``, ``Fraction``) have a default here; values of
    any other type are always ``Just``.
    """
    if value is None:
        return Nothing()
    t = type(value)
    if t in _ZERO_VALUES and value == _ZERO_VALUES[t]:
        return Nothing(t)
    return Just(value)


def merge(first: Maybe[T1], second: Maybe[T2]) -> Maybe[Tuple[T1, T2]]:
    ok1, value1 = first.match_just()
    ok2, value2 = second.match_just()
    if ok1 and ok2:
        return Just((value1, value2))  # type: ignore[arg-type]
    return Nothing()


def zip_with(first: Maybe[T1], second: Maybe[T2], f: Callable[[T1, T2], R]) -> Maybe[R]:
    return merge(first, second).map(lambda pair: f(pair[0], pair[1]))


def from_either(e: "Either[T, Any]") -> Maybe[T]:
    """Project the first (left) alternative of an Either into a Maybe.

    A right value becomes ``Nothing`` and its payload is dropped.
    """
    if e.is_left():
        return Just(e.value)  # type: ignore[attr-defined]
    return Nothing()
