import pandas as pd
import pytest

from pantry_match.batch import load_products_csv, tag_products, write_tagged_csv
from pantry_match.tagging import ProductRecord


@pytest.fixture
def products_csv(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text(
        "name,categories\n"
        "Jumbo Rode Paprika,\n"
        "Kipfilet,en:meats|en:poultry\n"
        ",en:dairy\n"
        "Jumbo Qwxz,\n",
        encoding="utf-8",
    )
    return str(path)


def test_load_products_csv(products_csv):
    products = load_products_csv(products_csv)

    assert products == [
        ProductRecord("Jumbo Rode Paprika", []),
        ProductRecord("Kipfilet", ["en:meats", "en:poultry"]),
        ProductRecord("Jumbo Qwxz", []),
    ]


def test_load_products_csv_without_categories(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text("name\nVerse Spinazie\n", encoding="utf-8")

    assert load_products_csv(str(path)) == [ProductRecord("Verse Spinazie", [])]


def test_load_products_csv_requires_name(tmp_path):
    path = tmp_path / "products.csv"
    path.write_text("title\nVerse Spinazie\n", encoding="utf-8")

    with pytest.raises(ValueError, match="no 'name' column"):
        load_products_csv(str(path))


def test_tag_and_write(products_csv, tmp_path):
    products = load_products_csv(products_csv)
    results = tag_products(products, show_progress=False)
    assert results == [
        (products[0], "paprika"),
        (products[1], "kip"),
        (products[2], None),
    ]

    output_file = tmp_path / "tagged.csv"
    write_tagged_csv(results, str(output_file))

    df = pd.read_csv(output_file, keep_default_na=False)
    assert df["name"].tolist() == ["Jumbo Qwxz", "Jumbo Rode Paprika", "Kipfilet"]
    assert df["categories"].tolist() == ["", "", "en:meats|en:poultry"]
    assert df["ingredient_tag"].tolist() == ["", "paprika", "kip"]


def test_tag_products_keeps_duplicate_names(tmp_path):
    products = [
        ProductRecord("Verse Spinazie", []),
        ProductRecord("Verse Spinazie", ["en:dairy"]),
    ]

    results = tag_products(products, show_progress=False)
    assert results == [(products[0], "spinazie"), (products[1], "melk")]

    output_file = tmp_path / "tagged.csv"
    write_tagged_csv(results, str(output_file))

    df = pd.read_csv(output_file, keep_default_na=False)
    assert df["name"].tolist() == ["Verse Spinazie", "Verse Spinazie"]
    assert df["categories"].tolist() == ["", "en:dairy"]
    assert df["ingredient_tag"].tolist() == ["spinazie", "melk"]
