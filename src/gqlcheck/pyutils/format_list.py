"""List formatting"""

from typing import Sequence

__all__ = ["or_list", "quoted_or_list"]

MAX_LENGTH = 5


def or_list(items: Sequence[str]) -> str:
    """Given [A, B, C] return 'A, B, or C'.

    Only the first few items are shown, the rest is silently dropped.
    """
    if not items:
        raise ValueError("Missing list items to be formatted.")

    selected = list(items[:MAX_LENGTH])
    n = len(selected)
    if n == 1:
        return selected[0]
    if n == 2:
        return f"{selected[0]} or {selected[1]}"

    *all_but_last, last_item = selected
    return f"{', '.join(all_but_last)}, or {last_item}"


def quoted_or_list(items: Sequence[str]) -> str:
    """Given [A, B, C] return '"A", "B", or "C"'."""
    return or_list([f'"{item}"' for item in items])
