"""Catalog category handling: tag resolution and product filtering."""

import logging
from typing import List, Optional, Sequence

from .models import ProductRecord
from .normalization import normalize
from .vocabulary import Vocabulary

logger = logging.getLogger(__name__)

CATEGORY_PREFIX = "en:"
DEFAULT_PRODUCT_LIMIT = 15


def _is_substring_match(a: str, b: str) -> bool:
    return a in b or b in a


def map_categories(
    categories: Optional[Sequence[str]], vocabulary: Vocabulary
) -> Optional[str]:
    """Resolve a canonical tag from a product's catalog categories.

    For every category, each configured mapping key (without its ``en:``
    prefix) is looked up in the normalized category text. On a hit, the
    comma-separated segments of the category are matched against the tags
    of that mapping, falling back to the mapping's first tag.

    Args:
        categories: Category labels from the product catalog.
        vocabulary: Vocabulary holding the category mappings.

    Returns:
        The resolved tag, or None if no mapping key occurs in any category.

    Examples:
        >>> map_categories(["en:vegetables,en:paprika"], vocabulary)
        "paprika"
        >>> map_categories(["en:dairy"], vocabulary)
        "melk"
    """
    if not categories:
        return None

    for category in categories:
        normalized_category = normalize(category)

        for key, tags in vocabulary.category_mappings.items():
            if key.replace(CATEGORY_PREFIX, "") not in normalized_category:
                continue

            for part in normalized_category.split(","):
                segment = part.strip()
                for tag in tags:
                    if _is_substring_match(segment, normalize(tag)):
                        logger.debug(f"Category '{category}' -> '{tag}'")
                        return tag

            if tags:
                logger.debug(f"Category '{category}' -> default '{tags[0]}'")
                return tags[0]

    return None


def _category_string(product: ProductRecord) -> str:
    return ",".join(product.categories or []).lower()


def should_exclude_product(product: ProductRecord, vocabulary: Vocabulary) -> bool:
    """Check whether a product is a non-ingredient (snacks, sodas, sauces...).

    A product is excluded when its normalized name contains an exclusion
    keyword or its categories contain an exclusion category.
    """
    name = normalize(product.name)
    if any(keyword in name for keyword in vocabulary.exclusion_keywords):
        return True

    categories = _category_string(product)
    return any(category in categories for category in vocabulary.exclusion_categories)


def has_inclusion_category(product: ProductRecord, vocabulary: Vocabulary) -> bool:
    """Check whether a product carries one of the preferred categories."""
    categories = _category_string(product)
    return any(category in categories for category in vocabulary.inclusion_categories)


def filter_products(
    products: Sequence[ProductRecord],
    vocabulary: Vocabulary,
    limit: int = DEFAULT_PRODUCT_LIMIT,
) -> List[ProductRecord]:
    """Filter catalog search results down to likely ingredients.

    Nameless and excluded products are dropped. Products with an inclusion
    category are moved to the front, keeping the catalog order otherwise.

    Args:
        products: Search results from the product catalog.
        vocabulary: Vocabulary holding the exclusion and inclusion lists.
        limit: Maximum number of products to return.

    Returns:
        At most ``limit`` products.
    """
    kept = [
        product
        for product in products
        if product.name and not should_exclude_product(product, vocabulary)
    ]
    kept.sort(key=lambda product: not has_inclusion_category(product, vocabulary))
    logger.debug(f"Kept {len(kept)} of {len(products)} products")
    return kept[:limit]
