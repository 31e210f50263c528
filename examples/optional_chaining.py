"""
Optional chaining: nested presence checks versus combinators.

Run: python examples/optional_chaining.py
"""
import math
from dataclasses import dataclass

from optchain import (
    Option,
    Some,
    NONE,
    ConsoleLogger,
    traced,
    map2,
)


def safe_square_root(x: float) -> Option[float]:
    # no real root for negative input
    if x < 0:
        return NONE
    return Some(math.sqrt(x))


def get_default() -> float:
    return 0.0


@dataclass(frozen=True)
class Person:
    first_name: str
    middle_name: Option[str]
    last_name: str


def maybe_load_person() -> Option[Person]:
    return Some(Person("John", NONE, "Doe"))


def main():
    log = ConsoleLogger(name="example", level="DEBUG")

    invalid = safe_square_root(-1)
    valid = safe_square_root(1)
    assert invalid.is_absent()
    assert valid.is_present()

    # Sad path: every step checks presence by hand
    result = 0.0
    has_error = False
    if valid.is_present():
        negated = -valid.get()
        root = safe_square_root(negated)
        if root.is_present():
            result = root.get() * 2
        else:
            has_error = True
    else:
        has_error = True
    if has_error:
        log.info("sad value is invalid")
    else:
        log.info("sad value", value=result)

    # Combinators: one inspection at the end of the chain
    chain = (
        valid
        .map(lambda v: v + 3)
        .map(lambda v: -v)
        .flat_map(traced("sqrt", safe_square_root, log))
        .map(traced("double", lambda v: v * 2, log))
    )
    if chain.is_present():
        log.info("value", value=chain.get())
    else:
        log.info("value is invalid")
    log.info("got value", value=chain.value_or(math.nan))
    log.info("got value", value=chain.value_or_eval(get_default))

    # Traditional upper-casing of an optional middle name
    person = maybe_load_person()
    upper_loop = None
    if person.is_present():
        middle = person.get().middle_name
        if middle.is_present():
            temp = ""
            for ch in middle.get():
                temp += ch.upper()
            upper_loop = temp

    # Same thing with flat_map/map
    upper_chain = (
        maybe_load_person()
        .flat_map(lambda p: p.middle_name)
        .map(lambda name: "".join(ch.upper() for ch in name))
    )
    assert upper_loop is None
    assert upper_chain == NONE

    # Adding two optionals
    a: Option[int] = Some(5)
    b: Option[int] = NONE
    if a.is_present() and b.is_present():
        total: Option[int] = Some(a.get() + b.get())
    else:
        total = NONE
    assert total == NONE
    assert a.flat_map(lambda x: b.map(lambda y: x + y)) == NONE
    assert map2(a, Some(7), lambda x, y: x + y) == Some(12)
    log.info("done")


if __name__ == "__main__":
    main()
