"""Batch tagging of product exports."""

from typing import List, Optional, Tuple

import pandas as pd
from tqdm import tqdm

from .tagging import ProductRecord, TagSuggester

CATEGORY_SEPARATOR = "|"


def _split_categories(value) -> List[str]:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return []
    return [part.strip() for part in str(value).split(CATEGORY_SEPARATOR) if part.strip()]


def load_products_csv(csv_file: str) -> List[ProductRecord]:
    """Load products from a CSV file.

    The file needs a ``name`` column and may have a ``categories`` column
    holding ``|``-separated catalog categories. Rows without a name are
    skipped.
    """
    df = pd.read_csv(csv_file, dtype=str)
    if "name" not in df.columns:
        raise ValueError(f"{csv_file} has no 'name' column")

    products = []
    for _, row in df.iterrows():
        name = row["name"]
        if pd.isna(name) or not str(name).strip():
            continue
        categories = _split_categories(row["categories"]) if "categories" in df else []
        products.append(ProductRecord(name=str(name).strip(), categories=categories))
    return products


def tag_products(
    products: List[ProductRecord],
    suggester: Optional[TagSuggester] = None,
    show_progress: bool = True,
) -> List[Tuple[ProductRecord, Optional[str]]]:
    """Suggest a tag for every product.

    Products sharing a display name are tagged separately, since their
    categories can differ.

    Returns:
        (product, suggested tag) pairs in input order. The tag is None when
        no tag was found.
    """
    suggester = suggester or TagSuggester()
    results = []
    for product in tqdm(products, desc="Tagging products", disable=not show_progress):
        results.append((product, suggester.suggest_for_product(product)))
    return results


def write_tagged_csv(
    results: List[Tuple[ProductRecord, Optional[str]]], output_file: str
) -> None:
    """Write tagging results to a CSV file sorted by product name.

    Args:
        results: (product, tag) pairs, as returned by :func:`tag_products`.
        output_file: Path to output CSV file
    """
    df = pd.DataFrame(
        [
            {
                "name": product.name,
                "categories": CATEGORY_SEPARATOR.join(product.categories),
                "ingredient_tag": tag or "",
            }
            for product, tag in results
        ],
        columns=["name", "categories", "ingredient_tag"],
    )
    df.sort_values("name", inplace=True, kind="stable")
    df.to_csv(output_file, index=False)

    tagged = sum(1 for _, tag in results if tag)
    print(f"Wrote {len(results)} products ({tagged} tagged) to {output_file}")
