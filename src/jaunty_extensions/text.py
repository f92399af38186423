"""String helpers for collections."""

from typing import Any, Iterable


def to_one_line_string(items: Iterable[Any], separator: str = ", ", encapsulate: str = '"') -> str:
    """Join the str() of every item onto one line.

    Args:
        items: Items to join
        separator: Placed between entries
        encapsulate: Placed directly before and after every entry; empty
            to disable

    Returns:
        e.g. '"a", "b", "c"' with the defaults
    """
    return separator.join(f"{encapsulate}{item}{encapsulate}" for item in items)
