"""String similarity scoring for ingredient tag matching."""

import logging
from typing import Optional, Sequence

from .normalization import normalize

logger = logging.getLogger(__name__)

EXACT_SCORE = 1.0
# Flat score for any substring relation, regardless of the length difference
SUBSTRING_SCORE = 0.8
DEFAULT_THRESHOLD = 0.7


def levenshtein_distance(a: str, b: str) -> int:
    """Compute the edit distance between two strings.

    Every insertion, deletion and substitution costs one.
    """
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Score how similar two strings are, between 0.0 and 1.0.

    Exact matches score 1.0 and substring matches (in either direction)
    score a flat 0.8. Anything else is scored as normalized Levenshtein
    similarity: ``(max_len - distance) / max_len``.

    Args:
        a: First string. Normalized before comparison.
        b: Second string. Normalized before comparison.

    Returns:
        The similarity score. Two empty strings score 1.0.

    Examples:
        >>> similarity("ui", "ui")
        1.0
        >>> similarity("paprika", "paprikapoeder")
        0.8
        >>> similarity("kaas", "kaaz")
        0.75
    """
    s1 = normalize(a)
    s2 = normalize(b)

    if s1 == s2:
        return EXACT_SCORE
    if s1 in s2 or s2 in s1:
        return SUBSTRING_SCORE

    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return EXACT_SCORE
    return (max_len - levenshtein_distance(s1, s2)) / max_len


def find_best_match(
    candidates: Sequence[str],
    vocabulary: Sequence[str],
    threshold: float = DEFAULT_THRESHOLD,
) -> Optional[str]:
    """Find the vocabulary tag that best matches any of the candidates.

    Candidates are tried in order. For each one an exact match returns
    immediately. Otherwise the first substring match scores 0.8, and edit
    distance is only computed while nothing has reached 0.8 yet. As soon as
    a candidate leaves the best score at 0.8 or higher the search stops.

    Args:
        candidates: Candidate ingredient names, most likely first.
        vocabulary: Canonical tags to match against.
        threshold: Minimum edit-distance similarity for a fuzzy match.

    Returns:
        The matching tag exactly as it appears in the vocabulary, or None.
    """
    best_match = None
    best_score = 0.0

    normalized_vocabulary = [(tag, normalize(tag)) for tag in vocabulary]

    for candidate in (normalize(c) for c in candidates):
        for tag, normalized_tag in normalized_vocabulary:
            if candidate == normalized_tag:
                logger.debug(f"Exact match '{candidate}' -> '{tag}'")
                return tag

        for tag, normalized_tag in normalized_vocabulary:
            if candidate in normalized_tag or normalized_tag in candidate:
                if best_score < SUBSTRING_SCORE:
                    best_score = SUBSTRING_SCORE
                    best_match = tag
                continue

            if best_score < SUBSTRING_SCORE:
                score = similarity(candidate, normalized_tag)
                if score > best_score and score >= threshold:
                    best_score = score
                    best_match = tag

        if best_score >= SUBSTRING_SCORE:
            logger.debug(f"Matched '{candidate}' -> '{best_match}' ({best_score:.2f})")
            return best_match

    if best_match is not None:
        logger.debug(f"Fuzzy match -> '{best_match}' ({best_score:.2f})")
    return best_match
