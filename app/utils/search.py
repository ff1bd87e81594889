"""Helpers for free-text filters."""

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Return a LIKE pattern matching ``term`` literally anywhere in a column.

    Use it together with ``escape=LIKE_ESCAPE``.
    """

    escaped = (
        term.strip()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"
