import argparse
import json

import pandas as pd

from pantry_match.matching import (
    Recipe,
    RecipeIngredient,
    StapleCatalog,
    VariantAdvisor,
    check_missing_variants,
    owned_tags,
    rank_recipes,
)
from pantry_match.matching.advice import DEFAULT_MODEL_ID
from pantry_match.tagging import normalize


def load_recipes(json_file: str):
    """Load recipes from a JSON list of {id, title, ingredients, steps}."""
    with open(json_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    return [
        Recipe(
            id=str(item["id"]),
            title=item["title"],
            ingredients=[
                RecipeIngredient(
                    name=ing["name"],
                    tag=ing.get("tag") or ing.get("ingredient_tag"),
                    amount=ing.get("amount"),
                    unit=ing.get("unit"),
                )
                for ing in item.get("ingredients", [])
            ],
            steps=item.get("steps", []),
        )
        for item in data
    ]


def load_inventory_tags(csv_file: str):
    """Load inventory tags from a tagged CSV (see tag_products.py)."""
    df = pd.read_csv(csv_file, dtype=str)
    return df["ingredient_tag"].dropna().tolist()


def main():
    """Rank recipes by how much of them can be made from the inventory."""
    parser_args = argparse.ArgumentParser(
        description="Rank recipes against a tagged inventory and pantry staples"
    )
    parser_args.add_argument("recipes_json", type=str, help="JSON file with recipes")
    parser_args.add_argument(
        "inventory_csv", type=str, help="Tagged inventory CSV with an 'ingredient_tag' column"
    )
    parser_args.add_argument(
        "--staple",
        action="append",
        default=[],
        help="Name of an owned pantry staple (repeatable), e.g. --staple Olijfolie",
    )
    parser_args.add_argument(
        "--staples-file",
        type=str,
        default=None,
        help="Path to a staples JSON file (default: bundled staples)",
    )
    parser_args.add_argument(
        "--advise",
        action="store_true",
        help="Ask the LLM how to handle missing staple variants",
    )
    parser_args.add_argument(
        "--model-id",
        type=str,
        default=DEFAULT_MODEL_ID,
        help="Bedrock model ID used with --advise",
    )
    args = parser_args.parse_args()

    catalog = StapleCatalog.from_file(args.staples_file)
    recipes = load_recipes(args.recipes_json)
    owned = owned_tags(
        load_inventory_tags(args.inventory_csv),
        [normalize(staple) for staple in args.staple],
    )
    advisor = VariantAdvisor(model_id=args.model_id) if args.advise else None

    for ranked in rank_recipes(recipes, owned):
        print(f"{ranked.result.percentage:3d}%  {ranked.recipe.title}")
        if ranked.result.missing:
            print(f"      missing: {', '.join(ranked.result.missing)}")

        variants = check_missing_variants(ranked.result.missing, args.staple, catalog)
        for name, result in variants.items():
            print(f"      '{name}' is a variant of staple '{result.related_staple}'")
            if advisor:
                advice = advisor.advise(name, args.staple, ranked.recipe)
                if advice and advice.message:
                    print(f"        {advice.message}")


if __name__ == "__main__":
    main()
