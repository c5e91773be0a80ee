"""Levenshtein automaton for fuzzy search over a sorted list of strings."""

from bisect import bisect_left
from typing import List, Sequence

from .dfa import Dfa
from .nfa import Nfa


class LevenshteinAutomata:
    """Deterministic automaton accepting strings within ``max_edits`` of a query."""

    def __init__(self, query: str, max_edits: int) -> None:
        self._dfa: Dfa = Nfa(query, max_edits).to_dfa()

    def fuzzy_search(self, choices: Sequence[str]) -> List[str]:
        """Return the choices the automaton accepts.

        ``choices`` must be sorted; the matches come back in the same order.
        """
        found: List[str] = []
        candidate = self._dfa.next_valid_string("\0")
        while candidate is not None:
            pos = bisect_left(choices, candidate)
            if pos >= len(choices):
                break
            following = choices[pos]
            if following == candidate:
                found.append(candidate)
                following += "\0"
            candidate = self._dfa.next_valid_string(following)
        return found