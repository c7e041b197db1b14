"""Levenshtein-based string similarity.

Used to pick the dictionary sense closest to a user-supplied translation.
"""


def levenshtein_distance(a: str, b: str) -> int:
    """Case-insensitive edit distance (insert/delete/substitute cost 1)."""
    a = a.lower()
    b = b.lower()
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + cost,
            ))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Similarity score in [0, 1]; 1.0 for identical (or both empty) strings."""
    # Lowercasing can change length ("İ" becomes two code points).
    a = a.lower()
    b = b.lower()
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return (max_len - levenshtein_distance(a, b)) / max_len
