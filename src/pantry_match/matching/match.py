"""Recipe match calculation against the user's stock."""

import logging
import math
from typing import Iterable, List, Optional, Sequence, Set

from pantry_match.tagging.normalization import normalize

from .models import MatchResult, RankedRecipe, Recipe, RecipeIngredient

logger = logging.getLogger(__name__)


def owned_tags(
    inventory_tags: Iterable[Optional[str]], staple_tags: Iterable[Optional[str]] = ()
) -> Set[str]:
    """Union inventory tags and opted-in staple tags.

    Untagged inventory items (``None`` or empty tags) are dropped. A staple
    satisfies a recipe exactly like an inventory item does.
    """
    owned = {tag for tag in inventory_tags if tag}
    owned.update(tag for tag in staple_tags if tag)
    return owned


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_match(
    ingredients: Sequence[RecipeIngredient], owned: Iterable[str]
) -> MatchResult:
    """Compute how much of a recipe the user can make from their stock.

    Ingredients without a tag are ignored: they count neither as matched
    nor towards the total, and never show up as missing. A recipe whose
    ingredients are all untagged therefore scores 0.

    Args:
        ingredients: The recipe's ingredients with their tags.
        owned: Tags the user owns (inventory and staples combined).

    Returns:
        MatchResult with the percentage of tagged ingredients owned and the
        names of the tagged ingredients that are missing, in recipe order.

    Examples:
        >>> compute_match(
        ...     [RecipeIngredient("ui", "ui"), RecipeIngredient("zout", "zout")],
        ...     {"ui"},
        ... )
        MatchResult(percentage=50, missing=['zout'])
    """
    if not ingredients:
        return MatchResult(percentage=0, missing=[])

    owned_normalized = {normalize(tag) for tag in owned}
    missing: List[str] = []
    matched_count = 0
    tagged_count = 0

    for ingredient in ingredients:
        if not ingredient.tag:
            continue
        tagged_count += 1
        if normalize(ingredient.tag) in owned_normalized:
            matched_count += 1
        else:
            missing.append(ingredient.name)

    if tagged_count == 0:
        return MatchResult(percentage=0, missing=[])

    percentage = _round_half_up(100 * matched_count / tagged_count)
    return MatchResult(percentage=percentage, missing=missing)


def rank_recipes(recipes: Sequence[Recipe], owned: Iterable[str]) -> List[RankedRecipe]:
    """Rank recipes by match percentage, best first.

    Recipes with equal percentages keep their input order.
    """
    owned = set(owned)
    ranked = [
        RankedRecipe(recipe=recipe, result=compute_match(recipe.ingredients, owned))
        for recipe in recipes
    ]
    ranked.sort(key=lambda r: r.result.percentage, reverse=True)
    logger.debug(f"Ranked {len(ranked)} recipes against {len(owned)} owned tags")
    return ranked
