"""Text normalization utilities for product names and ingredient tags."""

import re
import unicodedata
from typing import Iterable, List

# Combining diacritical marks left behind by NFD decomposition
COMBINING_MARKS = re.compile("[\u0300-\u036f]")

# Tokens this short are never food nouns ("ah", "de", "xl", ...)
MIN_TOKEN_LENGTH = 3


def normalize(text: str) -> str:
    """Normalize text for comparison.

    Lower-cases, decomposes accented characters and drops the combining
    marks, then trims surrounding whitespace.

    Args:
        text: Arbitrary text. ``None`` is treated as an empty string.

    Returns:
        The normalized text.

    Examples:
        >>> normalize("  Maïs ")
        "mais"
        >>> normalize("Crème Fraîche")
        "creme fraiche"
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFD", text.lower())
    return COMBINING_MARKS.sub("", text).strip()


def strip_brands(text: str, brands: Iterable[str]) -> str:
    """Remove known brand names from a product name.

    Brands are removed as whole words only, so ``bio`` is stripped from
    "bio paprika" but not from "biologisch".

    Args:
        text: The product name. It is normalized before brands are removed.
        brands: Brand tokens to remove.

    Returns:
        The normalized product name without brand tokens.

    Examples:
        >>> strip_brands("Jumbo Rode Paprika", ["jumbo"])
        "rode paprika"
    """
    cleaned = normalize(text)
    for brand in brands:
        pattern = r"\b" + re.escape(normalize(brand)) + r"\b"
        cleaned = re.sub(pattern, "", cleaned, flags=re.IGNORECASE)
    return cleaned.strip()


def extract_candidates(text: str) -> List[str]:
    """Extract candidate ingredient names from a cleaned product name.

    Product names usually read ``[brand] [descriptor...] [food noun]``, so
    candidates are built from the tail of the name: the last word, then the
    last two words, then the last three.

    Args:
        text: A normalized product name with brands already removed.

    Returns:
        Candidate strings, most specific to the food noun first. Empty if
        no word is long enough to be an ingredient.

    Examples:
        >>> extract_candidates("rode punt paprika")
        ["paprika", "punt paprika"]
        >>> extract_candidates("verse rode punt paprika")
        ["paprika", "punt paprika", "rode punt paprika"]
    """
    words = [word for word in text.split() if len(word) >= MIN_TOKEN_LENGTH]

    if len(words) == 1:
        return [words[0]]

    candidates = []
    if len(words) > 1:
        candidates.append(words[-1])
    if len(words) > 2:
        candidates.append(" ".join(words[-2:]))
    if len(words) > 3:
        candidates.append(" ".join(words[-3:]))
    return candidates
