"""Ingredient tagging: normalization, similarity and tag suggestion."""

from .categories import (
    filter_products,
    has_inclusion_category,
    map_categories,
    should_exclude_product,
)
from .models import ProductRecord
from .normalization import extract_candidates, normalize, strip_brands
from .similarity import find_best_match, levenshtein_distance, similarity
from .suggester import TagSuggester, search_tags, suggest_tag
from .vocabulary import Vocabulary, default_vocabulary

__all__ = [
    "normalize",
    "strip_brands",
    "extract_candidates",
    "levenshtein_distance",
    "similarity",
    "find_best_match",
    "map_categories",
    "should_exclude_product",
    "has_inclusion_category",
    "filter_products",
    "ProductRecord",
    "TagSuggester",
    "search_tags",
    "suggest_tag",
    "Vocabulary",
    "default_vocabulary",
]
