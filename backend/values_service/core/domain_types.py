"""Domain Types: the Index value, its bound, and the backing-service names it travels under.

Invariants:
    - An Index is a plain int; parse_index is the only way raw input becomes one
    - Only the upper bound is enforced (index > MAX_INDEX rejected); negatives pass
    - parse_index is pure: no IO, no logging
"""

from typing import NewType

from values_service.core.errors import IndexTooHighError, InvalidIndexError

Index = NewType("Index", int)

MAX_INDEX = 40
PLACEHOLDER = "Nothing yet!"
VALUES_KEY = "values"
INSERT_TOPIC = "insert"


def parse_index(raw: object) -> Index:
    """Parse a client-submitted index, enforcing the upper bound.

    Accepts ints, integral floats (5.0) and integer strings (surrounding
    whitespace tolerated). Booleans, fractional floats and anything else
    are rejected as non-integers.
    """
    if isinstance(raw, bool):
        raise InvalidIndexError(raw)
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidIndexError(raw)
        value = int(raw)
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            raise InvalidIndexError(raw) from None
    else:
        raise InvalidIndexError(raw)
    if value > MAX_INDEX:
        raise IndexTooHighError(value, MAX_INDEX)
    return Index(value)
