from typing import List


def split_ingredients(s: str) -> List[str]:
    """Split a comma-separated ingredients string into a list.

    Each token is trimmed and order is kept. Empty tokens are dropped, so a
    blank string gives an empty list rather than ``[""]``.
    """
    if not s:
        return []
    tokens = [item.strip() for item in s.split(",")]
    return [t for t in tokens if t]
