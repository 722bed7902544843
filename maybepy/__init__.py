from .maybe import (
    Maybe,
    MaybeType,
    Just,
    Nothing,
    EmptyValueError,
    nothing,
    just,
    to_maybe,
    merge,
    zip_with,
    from_either,
)
from .either import Either, EitherType, Left, Right, left, right
