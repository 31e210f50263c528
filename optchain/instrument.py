from __future__ import annotations
import functools
from typing import Callable, Optional, TypeVar

from .logger import ConsoleLogger

A = TypeVar('A'); B = TypeVar('B')


def traced(name: str, f: Callable[[A], B], logger: Optional[ConsoleLogger] = None) -> Callable[[A], B]:
    """Wrap a chain stage so each invocation is counted and logged.

    The wrapper keeps ``f``'s calling convention, so it can be passed to
    ``map``, ``flat_map`` or ``filter`` unchanged. Every call increments
    ``wrapper.calls``; a stage skipped by a short-circuited chain leaves
    the counter untouched and logs nothing.

    Args:
        name: Stage name used in log lines
        f: The stage function
        logger: Optional logger; without one the wrapper only counts

    Example:
        ```python
        log = ConsoleLogger(level="DEBUG")
        double = traced("double", lambda v: v * 2, log)
        NONE.map(double)
        double.calls  # 0
        ```
    """
    @functools.wraps(f)
    def wrapper(arg: A) -> B:
        wrapper.calls += 1  # type: ignore[attr-defined]
        if logger: logger.debug(f"call {name}", arg=arg)
        try:
            res = f(arg)
        except Exception as ex:
            if logger: logger.error(f"error {name}: {ex}")
            raise
        if logger: logger.debug(f"result {name}", value=res)
        return res

    wrapper.calls = 0  # type: ignore[attr-defined]
    return wrapper
