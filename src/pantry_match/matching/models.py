import dataclasses
from typing import List, Optional


@dataclasses.dataclass
class RecipeIngredient:
    name: str
    tag: Optional[str] = None
    amount: Optional[float] = None
    unit: Optional[str] = None


@dataclasses.dataclass
class Recipe:
    id: str
    title: str
    ingredients: List[RecipeIngredient] = dataclasses.field(default_factory=list)
    steps: List[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class MatchResult:
    percentage: int
    missing: List[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class RankedRecipe:
    recipe: Recipe
    result: MatchResult


@dataclasses.dataclass(frozen=True)
class StapleItem:
    name: str
    category: str
    quantity: float
    unit: Optional[str] = None


@dataclasses.dataclass
class VariantCheckResult:
    is_variant: bool
    related_staple: Optional[str] = None
    variant: Optional[str] = None


@dataclasses.dataclass
class Substitution:
    original: str
    substitute: str
    adjustments: Optional[str] = None


@dataclasses.dataclass
class VariantAdvice:
    acceptable: bool
    needs_variant: bool
    basic_item: Optional[str]
    variant: Optional[str]
    message: str
    source: str  # 'llm:<model id>' or 'custom'
