"""Edit distances between strings."""


def levenshtein(lhs: str, rhs: str) -> int:
    """Return the Levenshtein distance between two strings, counted in characters."""
    if not lhs:
        return len(rhs)
    if not rhs:
        return len(lhs)

    previous = list(range(len(rhs) + 1))
    for i, left in enumerate(lhs, start=1):
        current = [i]
        for j, right in enumerate(rhs, start=1):
            current.append(
                min(
                    previous[j] + 1,  # deletion
                    current[j - 1] + 1,  # insertion
                    previous[j - 1] + (left != right),  # substitution
                )
            )
        previous = current
    return previous[-1]