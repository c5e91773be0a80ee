"""Index of deletion variants used by the SymSpell search."""

from typing import Dict, List, Set


class Dictionary:
    """Maps strings with up to ``max_edits`` deleted characters to the terms they came from."""

    def __init__(self, max_edits: int, prefix_length: int) -> None:
        self.max_edits = max_edits
        self.prefix_length = prefix_length
        self._terms: Set[str] = set()
        self._suggestions: Dict[str, List[str]] = {}

    def contains_term(self, term: str) -> bool:
        """Tell whether ``term`` itself was inserted."""
        return term in self._terms

    def get_suggestions(self, candidate: str) -> List[str]:
        """Return the terms that ``candidate`` was derived from, in insertion order."""
        return list(self._suggestions.get(candidate, ()))

    def insert(self, term: str) -> None:
        """Index ``term`` under its prefix and every deletion variant of it."""
        if term in self._terms:
            return
        self._terms.add(term)

        variants: Set[str] = set()
        if len(term) <= self.max_edits:
            variants.add("")
        prefix = term[: self.prefix_length]
        variants.add(prefix)
        self._expand(prefix, 0, variants)

        for variant in variants:
            self._suggestions.setdefault(variant, []).append(term)

    def _expand(self, term: str, edits: int, variants: Set[str]) -> None:
        edits += 1
        if len(term) <= 1:
            return
        for i in range(len(term)):
            lacked = term[:i] + term[i + 1 :]
            if lacked not in variants:
                variants.add(lacked)
                if edits < self.max_edits:
                    self._expand(lacked, edits, variants)