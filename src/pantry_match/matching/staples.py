"""Pantry staples and their known variants."""

import dataclasses
import functools
import json
import logging
import os
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from pantry_match.tagging.normalization import normalize

from .models import StapleItem, VariantCheckResult

logger = logging.getLogger(__name__)

DEFAULT_STAPLES_FILE = os.path.join(os.path.dirname(__file__), "data", "staples.json")


def _names_match(a: str, b: str) -> bool:
    """Exact or substring match, in either direction, after normalization."""
    a, b = normalize(a), normalize(b)
    return a == b or a in b or b in a


@dataclasses.dataclass(frozen=True)
class StapleCatalog:
    """Read-only table of pantry staples and their variants.

    Attributes:
        items: The configured staples, in priority order.
        variants: Staple name -> names of products that can stand in for it
            (e.g. "Olijfolie" -> "Zonnebloemolie", ...).
    """

    items: Tuple[StapleItem, ...]
    variants: Mapping[str, Tuple[str, ...]]

    @classmethod
    def from_dict(cls, data: dict) -> "StapleCatalog":
        items = tuple(
            StapleItem(
                name=item["name"],
                category=item.get("category", ""),
                quantity=item.get("quantity", 1),
                unit=item.get("unit"),
            )
            for item in data.get("items", [])
        )
        variants: Dict[str, Tuple[str, ...]] = {
            name: tuple(dict.fromkeys(names))
            for name, names in data.get("variants", {}).items()
        }
        return cls(items=items, variants=MappingProxyType(variants))

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "StapleCatalog":
        with open(path or DEFAULT_STAPLES_FILE, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def find(self, name: str) -> Optional[StapleItem]:
        """Return the configured staple with this name (case-insensitive)."""
        normalized = normalize(name)
        for item in self.items:
            if normalize(item.name) == normalized:
                return item
        return None

    def is_staple_item(self, name: str) -> bool:
        return self.find(name) is not None

    def get_variants(self, name: str) -> List[str]:
        """Return the known variants of a staple, or an empty list."""
        item = self.find(name)
        if item is None:
            return []
        return list(self.variants.get(item.name, ()))


@functools.lru_cache(maxsize=None)
def default_staples() -> StapleCatalog:
    """Return the bundled staple catalog, loaded once per process."""
    return StapleCatalog.from_file()


def check_variant(
    name: str,
    owned_staples: Iterable[str],
    catalog: Optional[StapleCatalog] = None,
) -> VariantCheckResult:
    """Check whether a missing ingredient is a variant of an owned staple.

    Staples are checked in catalog order, skipping those the user does not
    own. If the ingredient is the staple itself (exact or substring match)
    it is not a variant and the check stops: matching failed to recognise
    it rather than it being a different product. Otherwise the staple's
    variants are compared against the ingredient and the first hit wins.

    Args:
        name: Display name of the missing recipe ingredient.
        owned_staples: Names of the staples the user has opted into.
        catalog: Staple catalog. Defaults to the bundled one.

    Returns:
        VariantCheckResult. ``is_variant`` means the user should be asked
        whether the staple they own will do, rather than the ingredient
        simply being reported as missing.

    Examples:
        >>> check_variant("Zonnebloemolie", ["Olijfolie"])
        VariantCheckResult(is_variant=True, related_staple='Olijfolie', variant='Zonnebloemolie')
        >>> check_variant("olijfolie", ["Olijfolie"])
        VariantCheckResult(is_variant=False, related_staple=None, variant=None)
    """
    catalog = catalog or default_staples()
    if not normalize(name):
        return VariantCheckResult(is_variant=False)

    owned = [staple for staple in owned_staples if normalize(staple)]

    for item in catalog.items:
        if not any(_names_match(staple, item.name) for staple in owned):
            continue

        if _names_match(name, item.name):
            return VariantCheckResult(is_variant=False)

        for variant in catalog.get_variants(item.name):
            if _names_match(name, variant):
                logger.debug(f"'{name}' is a variant of staple '{item.name}'")
                return VariantCheckResult(
                    is_variant=True, related_staple=item.name, variant=name
                )

    return VariantCheckResult(is_variant=False)


def check_missing_variants(
    missing: Iterable[str],
    owned_staples: Iterable[str],
    catalog: Optional[StapleCatalog] = None,
) -> Dict[str, VariantCheckResult]:
    """Run :func:`check_variant` over a recipe's missing ingredients.

    Returns:
        Missing ingredient name -> result, for the variants only.
    """
    owned = list(owned_staples)
    results = {}
    for name in missing:
        result = check_variant(name, owned, catalog)
        if result.is_variant:
            results[name] = result
    return results
