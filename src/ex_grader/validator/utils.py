from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence


def same_value(a: object, b: object) -> bool:
    """Scalar equality that keeps booleans apart from numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


def deep_equal(a: object, b: object) -> bool:
    """
    Structural equality over JSON-like values (mappings, sequences, scalars).

    Walks the values with an explicit stack, so nesting depth is not bounded
    by the interpreter's recursion limit.
    """
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if isinstance(x, Mapping) or isinstance(y, Mapping):
            if not (
                isinstance(x, Mapping)
                and isinstance(y, Mapping)
                and x.keys() == y.keys()
            ):
                return False
            pending.extend((x[key], y[key]) for key in x)
        elif isinstance(x, list | tuple) or isinstance(y, list | tuple):
            if not (
                isinstance(x, list | tuple)
                and isinstance(y, list | tuple)
                and len(x) == len(y)
            ):
                return False
            pending.extend(zip(x, y, strict=True))
        elif not same_value(x, y):
            return False
    return True


def contains(values: Iterable[object], item: object) -> bool:
    return any(same_value(value, item) for value in values)


def index_of(values: Sequence[object], item: object) -> int:
    """Index of the first occurrence of `item`, or -1."""
    for idx, value in enumerate(values):
        if same_value(value, item):
            return idx
    return -1


def unique[T](values: Iterable[T]) -> list[T]:
    """Drop repeated values, keeping first occurrences in order."""
    seen: list[T] = []
    for value in values:
        if not contains(seen, value):
            seen.append(value)
    return seen
