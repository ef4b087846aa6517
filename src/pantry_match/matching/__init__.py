"""Recipe matching against inventory and pantry staples."""

from .advice import BedrockTextGenerator, VariantAdvisor, build_variant_prompt
from .match import compute_match, owned_tags, rank_recipes
from .models import (
    MatchResult,
    RankedRecipe,
    Recipe,
    RecipeIngredient,
    StapleItem,
    Substitution,
    VariantAdvice,
    VariantCheckResult,
)
from .staples import StapleCatalog, check_missing_variants, check_variant, default_staples
from .substitution import apply_substitutions

__all__ = [
    "compute_match",
    "owned_tags",
    "rank_recipes",
    "check_variant",
    "check_missing_variants",
    "StapleCatalog",
    "default_staples",
    "apply_substitutions",
    "BedrockTextGenerator",
    "VariantAdvisor",
    "build_variant_prompt",
    "MatchResult",
    "RankedRecipe",
    "Recipe",
    "RecipeIngredient",
    "StapleItem",
    "Substitution",
    "VariantAdvice",
    "VariantCheckResult",
]
