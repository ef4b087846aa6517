"""Pantry Match - Ingredient tagging and recipe matching for home inventories."""

__version__ = "0.1.0"

from . import matching, tagging
from .matching import check_variant, compute_match
from .tagging import suggest_tag

__all__ = ["matching", "tagging", "suggest_tag", "compute_match", "check_variant"]
