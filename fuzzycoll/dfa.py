"""Deterministic automaton that can find the next accepted string in order."""

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Tuple


@dataclass
class Dfa:
    """A DFA with per-character transitions and an optional catch-all per state."""

    start_id: int
    final_ids: FrozenSet[int]
    transitions: Dict[int, Dict[str, int]]
    any_transitions: Dict[int, int]
    sorted_chars: Dict[int, List[str]] = field(init=False)

    def __post_init__(self) -> None:
        self.final_ids = frozenset(self.final_ids)
        self.transitions = {state: dict(edges) for state, edges in self.transitions.items()}
        self.any_transitions = dict(self.any_transitions)
        self.sorted_chars = {state: sorted(edges) for state, edges in self.transitions.items()}

    def _is_final(self, state: int) -> bool:
        return state in self.final_ids

    def _next_state(self, state: int, ch: str) -> Optional[int]:
        target = self.transitions.get(state, {}).get(ch)
        if target is None:
            target = self.any_transitions.get(state)
        return target

    def _find_next_edge(self, state: int, ch: Optional[str]) -> Optional[str]:
        following = "\0" if ch is None else chr(ord(ch) + 1)
        chars = self.sorted_chars.get(state)
        if chars is None:
            return None
        if following in chars or state in self.any_transitions:
            return following
        pos = bisect_left(chars, following)
        return chars[pos] if pos < len(chars) else None

    def next_valid_string(self, string: str) -> Optional[str]:
        """Return the smallest accepted string not less than ``string``, if any."""
        state = self.start_id
        stack: List[Tuple[str, int, Optional[str]]] = []

        for i, ch in enumerate(string):
            stack.append((string[:i], state, ch))
            target = self._next_state(state, ch)
            if target is None:
                break
            state = target
        else:
            stack.append((string, state, None))
            if self._is_final(state):
                return string

        while stack:
            path, state, ch = stack.pop()
            edge = self._find_next_edge(state, ch)
            if edge is None:
                continue
            path += edge
            target = self._next_state(state, edge)
            if target is not None:
                state = target
                if self._is_final(state):
                    return path
            stack.append((path, state, None))
        return None