from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import EmptyAccess

T = TypeVar("T")
U = TypeVar("U")


class Option(Generic[T]):
    """A value that is either present (``Some``) or absent (``NONE``).

    Combinators never mutate the receiver and never invoke their function
    on an absent option, so a chain only needs to be inspected once, at
    the end.

    Example:
        ```python
        def safe_sqrt(x: float) -> Option[float]:
            return NONE if x < 0 else Some(math.sqrt(x))

        res = Some(1).map(lambda v: v + 3).map(lambda v: -v).flat_map(safe_sqrt)
        res.value_or(0.0)  # 0.0
        ```
    """
    def is_present(self) -> bool: raise NotImplementedError
    def is_absent(self) -> bool: return not self.is_present()

    def get(self) -> T:
        """Return the contained value.

        Raises:
            EmptyAccess: If the option is absent
        """
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        raise EmptyAccess("get() called on an absent option")

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_present():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_present():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def filter(self, p: Callable[[T], bool]) -> "Option[T]":
        if self.is_present() and p(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def value_or(self, default: U) -> T | U:
        return self.value if self.is_present() else default  # type: ignore[attr-defined]

    def value_or_eval(self, g: Callable[[], U]) -> T | U:
        # g runs only on the absent path
        if self.is_present():
            return self.value  # type: ignore[attr-defined]
        return g()

    def or_else(self, g: Callable[[], "Option[T]"]) -> "Option[T]":
        """Return self if present, otherwise the option produced by ``g``.

        Like ``value_or_eval`` but the fallback may itself be absent.
        """
        if self.is_present():
            return self
        return g()


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_present(self) -> bool: return True


class _Empty(Option[None]):
    __slots__ = ()
    def __repr__(self) -> str: return "NONE"
    def __eq__(self, other: object) -> bool: return isinstance(other, _Empty)
    def __hash__(self) -> int: return hash(_Empty)
    def is_present(self) -> bool: return False


NONE: Option[None] = _Empty()


def of(value: T) -> Option[T]:
    return Some(value)


def empty() -> Option[T]:
    return NONE  # type: ignore[return-value]


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]
