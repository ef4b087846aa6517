"""Suggest canonical ingredient tags for catalog products."""

import logging
from typing import List, Optional, Sequence

from .categories import map_categories
from .models import ProductRecord
from .normalization import extract_candidates, normalize, strip_brands
from .similarity import DEFAULT_THRESHOLD, find_best_match
from .vocabulary import Vocabulary, default_vocabulary

logger = logging.getLogger(__name__)


class TagSuggester:
    """Assigns canonical ingredient tags to products.

    Catalog categories are consulted first since they are more reliable
    than free-text names. When they do not resolve a tag, brand names are
    stripped from the product name and the trailing words are fuzzy-matched
    against the vocabulary.

    Attributes:
        vocabulary (Vocabulary): Tag groups, brands and category mappings.
        threshold (float): Minimum similarity for a fuzzy name match.
    """

    def __init__(
        self,
        vocabulary: Optional[Vocabulary] = None,
        threshold: float = DEFAULT_THRESHOLD,
    ):
        """Initialize the suggester.

        Args:
            vocabulary (Vocabulary, optional): Vocabulary to match against.
                Defaults to the bundled vocabulary.
            threshold (float): Minimum similarity for fuzzy name matches.
                Defaults to 0.7.
        """
        self.vocabulary = vocabulary or default_vocabulary()
        self.threshold = threshold
        self._tags = self.vocabulary.tags

    def candidates(self, name: str) -> List[str]:
        """Return the tag candidates extracted from a product name."""
        return extract_candidates(strip_brands(name, self.vocabulary.brands))

    def suggest_tag(
        self, name: str, categories: Optional[Sequence[str]] = None
    ) -> Optional[str]:
        """Suggest a canonical tag for a product.

        Args:
            name (str): The product's display name.
            categories (Sequence[str], optional): Catalog category labels.

        Returns:
            Optional[str]: A tag from the vocabulary, or None when no
                confident match exists. Callers should then ask the user.
        """
        if not name:
            return None

        if categories:
            category_match = map_categories(categories, self.vocabulary)
            if category_match:
                return category_match

        candidates = self.candidates(name)
        match = find_best_match(candidates, self._tags, self.threshold)
        if match is None:
            logger.debug(f"No tag for '{name}' (candidates: {candidates})")
        return match

    def suggest_for_product(self, product: ProductRecord) -> Optional[str]:
        """Suggest a tag for a catalog product record."""
        return self.suggest_tag(product.name, product.categories)

    def search_tags(self, query: str) -> List[str]:
        """Return the vocabulary tags containing the query text.

        Used when a user corrects a tag by hand. An empty query returns
        every tag.
        """
        return search_tags(query, self.vocabulary)


def search_tags(query: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    vocabulary = vocabulary or default_vocabulary()
    needle = normalize(query)
    return [tag for tag in vocabulary.tags if needle in normalize(tag)]


def suggest_tag(
    name: str,
    categories: Optional[Sequence[str]] = None,
    vocabulary: Optional[Vocabulary] = None,
) -> Optional[str]:
    """Suggest a canonical tag for a product name and its categories.

    Convenience wrapper around :class:`TagSuggester`.

    Examples:
        >>> suggest_tag("Jumbo Rode Paprika")
        "paprika"
        >>> suggest_tag("")
        None
    """
    return TagSuggester(vocabulary).suggest_tag(name, categories)
