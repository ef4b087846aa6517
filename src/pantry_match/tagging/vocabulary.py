"""Controlled vocabulary of canonical ingredient tags."""

import dataclasses
import functools
import json
import os
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

DEFAULT_VOCABULARY_FILE = os.path.join(
    os.path.dirname(__file__), "data", "vocabulary.json"
)


def _unique(values) -> Tuple[str, ...]:
    """Deduplicate while keeping first-seen order."""
    return tuple(dict.fromkeys(values))


@dataclasses.dataclass(frozen=True)
class Vocabulary:
    """Read-only tagging configuration.

    Attributes:
        tag_groups: Food category name -> canonical tags, in priority order.
        category_mappings: Catalog category key (e.g. ``en:vegetables``) ->
            tags that category can resolve to.
        brands: Brand tokens stripped from product names.
        exclusion_keywords: Product name fragments that mark non-ingredients.
        exclusion_categories: Catalog categories that mark non-ingredients.
        inclusion_categories: Catalog categories preferred in product search.
        version: Version of the vocabulary file.
    """

    tag_groups: Mapping[str, Tuple[str, ...]]
    category_mappings: Mapping[str, Tuple[str, ...]]
    brands: Tuple[str, ...] = ()
    exclusion_keywords: Tuple[str, ...] = ()
    exclusion_categories: Tuple[str, ...] = ()
    inclusion_categories: Tuple[str, ...] = ()
    version: int = 1

    @property
    def tags(self) -> Tuple[str, ...]:
        """All canonical tags, flattened across groups without duplicates."""
        return _unique(tag for group in self.tag_groups.values() for tag in group)

    @classmethod
    def from_dict(cls, data: dict) -> "Vocabulary":
        """Build a vocabulary from its JSON representation.

        Category mappings may name a tag group (``"en:dairy": "dairy"``) or
        list their tags inline (``"en:fish": ["zalm", ...]``).

        Raises:
            ValueError: If a category mapping names an unknown tag group.
        """
        tag_groups: Dict[str, Tuple[str, ...]] = {
            name: tuple(tags) for name, tags in data.get("tag_groups", {}).items()
        }

        category_mappings: Dict[str, Tuple[str, ...]] = {}
        for key, mapping in data.get("category_mappings", {}).items():
            if isinstance(mapping, str):
                if mapping not in tag_groups:
                    raise ValueError(
                        f"Category mapping '{key}' refers to unknown tag group '{mapping}'"
                    )
                category_mappings[key] = tag_groups[mapping]
            else:
                category_mappings[key] = tuple(mapping)

        return cls(
            tag_groups=MappingProxyType(tag_groups),
            category_mappings=MappingProxyType(category_mappings),
            brands=_unique(data.get("brands", [])),
            exclusion_keywords=_unique(data.get("exclusion_keywords", [])),
            exclusion_categories=_unique(data.get("exclusion_categories", [])),
            inclusion_categories=_unique(data.get("inclusion_categories", [])),
            version=int(data.get("version", 1)),
        )

    @classmethod
    def from_file(cls, path: Optional[str] = None) -> "Vocabulary":
        """Load a vocabulary from a JSON file.

        Args:
            path: Path to the vocabulary file. Defaults to the bundled one.
        """
        with open(path or DEFAULT_VOCABULARY_FILE, "r", encoding="utf-8") as f:
            return cls.from_dict(json.load(f))


@functools.lru_cache(maxsize=None)
def default_vocabulary() -> Vocabulary:
    """Return the bundled vocabulary, loaded once per process."""
    return Vocabulary.from_file()
