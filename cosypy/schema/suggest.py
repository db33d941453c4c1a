"""Typo suggestions for unknown names."""

from collections.abc import Iterable

DEFAULT_MAX_DISTANCE = 2


def levenshtein(a: str, b: str) -> int:
    """Number of single-character insertions, deletions and substitutions turning `a` into `b`."""
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def find_best_match(
    target: str,
    candidates: Iterable[str],
    max_distance: int = DEFAULT_MAX_DISTANCE,
) -> str | None:
    """Closest candidate within `max_distance` edits; ties go to the smallest name."""
    best: tuple[int, str] | None = None
    for candidate in candidates:
        distance = levenshtein(target, candidate)
        if distance > max_distance:
            continue
        if best is None or (distance, candidate) < best:
            best = (distance, candidate)
    return best[1] if best is not None else None
