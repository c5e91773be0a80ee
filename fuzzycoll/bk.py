"""Burkhard-Keller tree for fuzzy lookups under a metric edit distance."""

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, Optional

EditDistance = Callable[[str, str], int]


@dataclass
class _Node:
    term: str
    children: Dict[int, "_Node"] = field(default_factory=dict)


class BkTree:
    """A BK-tree of distinct terms keyed by their distance to each parent."""

    def __init__(self, edit_distance: EditDistance) -> None:
        self._edit_distance = edit_distance
        self._root: Optional[_Node] = None

    def insert(self, choice: str) -> None:
        """Add a term; terms already present are ignored."""
        if self._root is None:
            self._root = _Node(choice)
            return
        cursor = self._root
        while cursor.term != choice:
            distance = self._edit_distance(cursor.term, choice)
            child = cursor.children.get(distance)
            if child is None:
                cursor.children[distance] = _Node(choice)
                return
            cursor = child

    def fuzzy_search(self, query: str, max_edits: int) -> Iterator[str]:
        """Lazily yield every term within ``max_edits`` of ``query``, breadth first."""
        pending = deque() if self._root is None else deque([self._root])
        while pending:
            node = pending.popleft()
            edits = self._edit_distance(node.term, query)
            lower, upper = max(edits - max_edits, 0), edits + max_edits
            pending.extend(
                child
                for distance, child in node.children.items()
                if lower <= distance <= upper
            )
            if edits <= max_edits:
                yield node.term