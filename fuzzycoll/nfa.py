"""Nondeterministic Levenshtein automaton and its subset construction."""

import heapq
from enum import IntEnum
from typing import Dict, Iterable, List, Set, Tuple

from .dfa import Dfa

Position = Tuple[int, int]
State = Tuple[Position, ...]


class _Kind(IntEnum):
    EPSILON = 0
    ANY = 1
    INPUT = 2


Label = Tuple[_Kind, str]

_EPSILON: Label = (_Kind.EPSILON, "")
_ANY: Label = (_Kind.ANY, "")


class Nfa:
    """Automaton accepting strings within ``max_edits`` edits of ``query``."""

    def __init__(self, query: str, max_edits: int) -> None:
        if max_edits < 0:
            raise ValueError("max_edits must not be negative")
        self.query = query
        self.max_edits = max_edits
        self._transitions: Dict[Position, Dict[Label, Set[Position]]] = {}

        length = len(query)
        for idx, ch in enumerate(query):
            for e in range(max_edits + 1):
                self._add((idx, e), (idx + 1, e), (_Kind.INPUT, ch))
                if e < max_edits:
                    self._add((idx, e), (idx, e + 1), _ANY)  # extra character
                    self._add((idx, e), (idx + 1, e + 1), _EPSILON)  # missing character
                    self._add((idx, e), (idx + 1, e + 1), _ANY)  # substitution
        if query:
            for e in range(max_edits):
                self._add((length, e), (length, e + 1), _ANY)

    def _add(self, src: Position, dst: Position, label: Label) -> None:
        self._transitions.setdefault(src, {}).setdefault(label, set()).add(dst)

    def _closure(self, positions: Iterable[Position]) -> State:
        reached = set(positions)
        pending = list(reached)
        while pending:
            current = pending.pop()
            for target in self._transitions.get(current, {}).get(_EPSILON, ()):
                if target not in reached:
                    reached.add(target)
                    pending.append(target)
        return tuple(sorted(reached))

    def _reachable(self, state: State, label: Label) -> Set[Position]:
        reached: Set[Position] = set()
        for position in state:
            edges = self._transitions.get(position)
            if edges is None:
                continue
            if label != _ANY:
                reached.update(edges.get(label, ()))
            reached.update(edges.get(_ANY, ()))
        return reached

    def to_dfa(self) -> Dfa:
        """Build the equivalent deterministic automaton by subset construction."""
        ids: Dict[State, int] = {}

        def intern(state: State) -> Tuple[int, bool]:
            if state in ids:
                return ids[state], False
            ids[state] = len(ids)
            return ids[state], True

        start = self._closure([(0, 0)])
        start_id, _ = intern(start)
        frontier: List[State] = [start]
        any_transitions: Dict[int, int] = {}
        transitions: Dict[int, Dict[str, int]] = {}

        while frontier:
            current = heapq.heappop(frontier)
            current_id = ids[current]
            labels = sorted(
                {label for position in current for label in self._transitions.get(position, ())}
            )
            for label in labels:
                following = self._closure(self._reachable(current, label))
                following_id, is_new = intern(following)
                if following and is_new:
                    heapq.heappush(frontier, following)
                kind, ch = label
                if kind is _Kind.ANY:
                    any_transitions[current_id] = following_id
                elif kind is _Kind.INPUT:
                    transitions.setdefault(current_id, {}).setdefault(ch, following_id)

        length = len(self.query)
        final_ids = {
            state_id
            for state, state_id in ids.items()
            if any(idx == length for idx, _ in state)
        }
        return Dfa(start_id, frozenset(final_ids), transitions, any_transitions)