"""Exhaustive fuzzy search that measures every choice."""

from typing import Callable, Iterable, List

EditDistance = Callable[[str, str], int]


def fuzzy_search(
    query: str,
    choices: Iterable[str],
    max_edits: int,
    edit_distance: EditDistance,
) -> List[str]:
    """Return the choices within ``max_edits`` of ``query``, in their original order."""
    return [choice for choice in choices if edit_distance(query, choice) <= max_edits]