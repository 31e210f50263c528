from __future__ import annotations
from typing import Callable, Iterable, List, Tuple, TypeVar

from .option import NONE, Option, Some

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


def map2(a: Option[A], b: Option[B], f: Callable[[A, B], C]) -> Option[C]:
    """Combine two independent options with ``f``.

    Absent if either side is absent; ``f`` is only called when both are
    present.

    Example:
        ```python
        map2(Some(5), Some(7), operator.add)  # Some(12)
        map2(Some(5), NONE, operator.add)     # NONE
        ```
    """
    return a.flat_map(lambda x: b.map(lambda y: f(x, y)))


def zip(a: Option[A], b: Option[B]) -> Option[Tuple[A, B]]:
    return map2(a, b, lambda x, y: (x, y))


def sequence(options: Iterable[Option[A]]) -> Option[List[A]]:
    # Iterative so long inputs do not nest flat_map calls.
    out: List[A] = []
    for o in options:
        if o.is_absent():
            return NONE  # type: ignore[return-value]
        out.append(o.get())
    return Some(out)


def first_present(*candidates: Callable[[], Option[A]]) -> Option[A]:
    """Call each thunk in order and return the first present result."""
    for c in candidates:
        o = c()
        if o.is_present():
            return o
    return NONE  # type: ignore[return-value]
