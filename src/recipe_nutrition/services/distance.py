"""String distance helpers used for fuzzy food lookups."""

from rapidfuzz.distance import Levenshtein


def levenshtein_distance(
    source: str, target: str, max_distance: int | None = None
) -> int:
    """Return the minimum number of single-character edits between two strings.

    Insertions, deletions and substitutions each cost one. Comparison is
    exact; callers lower-case both sides for case-insensitive matching.
    With ``max_distance`` set, any distance above it is reported as
    ``max_distance + 1``.
    """
    return Levenshtein.distance(source, target, score_cutoff=max_distance)
