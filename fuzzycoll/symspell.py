"""SymSpell fuzzy search built on symmetric deletions."""

from typing import Callable, List, Optional, Set

from .dictionary import Dictionary

EditDistance = Callable[[str, str], int]


class SymSpell:
    """Fuzzy lookup that indexes deletion variants of each term's prefix."""

    def __init__(
        self,
        edit_distance: EditDistance,
        max_edits: int,
        prefix_length: Optional[int] = None,
    ) -> None:
        if prefix_length is None:
            prefix_length = max_edits + 1
        if max_edits >= prefix_length:
            raise ValueError("prefix_length must be greater than max_edits")
        self._edit_distance = edit_distance
        self.max_edits = max_edits
        self.prefix_length = prefix_length
        self._dictionary = Dictionary(max_edits, prefix_length)

    def insert(self, choice: str) -> None:
        """Add a term to the index."""
        self._dictionary.insert(choice)

    def fuzzy_search(self, query: str) -> List[str]:
        """Return the indexed terms within ``max_edits`` of ``query``.

        An exact match, if present, comes first.
        """
        found: List[str] = []
        seen_deletes: Set[str] = set()
        seen_suggestions: Set[str] = {query}

        if self._dictionary.contains_term(query):
            found.append(query)

        query_prefix = query[: self.prefix_length]
        candidates = [query_prefix]

        while candidates:
            candidate = candidates.pop()
            # The prefix alone already differs by too much; longer strings only differ more.
            if abs(len(query_prefix) - len(candidate)) > self.max_edits:
                continue

            for suggestion in self._dictionary.get_suggestions(candidate):
                if suggestion == query:
                    continue
                if abs(len(suggestion) - len(query)) > self.max_edits:
                    continue

                if not candidate:
                    # No characters in common with the query.
                    distance = max(len(query), len(suggestion))
                    if distance > self.max_edits or suggestion in seen_suggestions:
                        continue
                    seen_suggestions.add(suggestion)
                elif len(suggestion) == 1:
                    distance = len(query) if suggestion in query else len(query) - 1
                    if distance > self.max_edits or suggestion in seen_suggestions:
                        continue
                    seen_suggestions.add(suggestion)
                elif self._pruned(query, suggestion, candidate):
                    continue
                else:
                    if suggestion in seen_suggestions:
                        continue
                    seen_suggestions.add(suggestion)
                    distance = self._edit_distance(query, suggestion)

                if distance <= self.max_edits:
                    found.append(suggestion)

            if (
                len(query_prefix) - len(candidate) < self.max_edits
                and len(candidate) <= self.prefix_length
            ):
                for i in range(len(candidate)):
                    lacked = candidate[:i] + candidate[i + 1 :]
                    if lacked not in seen_deletes:
                        seen_deletes.add(lacked)
                        candidates.append(lacked)

        return found

    def _pruned(self, query: str, suggestion: str, candidate: str) -> bool:
        at_limit = self.prefix_length - self.max_edits == len(candidate)
        tail = (
            max(min(len(query), len(suggestion)) - self.prefix_length, 0)
            if at_limit
            else 0
        )
        q_len, s_len = len(query), len(suggestion)

        if (
            at_limit
            and max(tail - self.prefix_length, 0) > 1
            and query[q_len + 1 - tail :] != suggestion[s_len + 1 - tail :]
        ):
            return True
        return (
            tail > 0
            and query[q_len - tail] != suggestion[s_len - tail]
            and (
                query[q_len - tail - 1] != suggestion[s_len - tail]
                or query[q_len - tail] != suggestion[s_len - tail - 1]
            )
        )