import argparse
import datetime

from pantry_match.batch import load_products_csv, tag_products, write_tagged_csv
from pantry_match.tagging import TagSuggester, Vocabulary


def main():
    """Tag a CSV export of products with canonical ingredient tags."""
    parser_args = argparse.ArgumentParser(
        description="Suggest ingredient tags for a CSV of products"
    )
    parser_args.add_argument(
        "products_csv",
        type=str,
        help="CSV with a 'name' column and optional '|'-separated 'categories'",
    )
    parser_args.add_argument(
        "--vocabulary",
        type=str,
        default=None,
        help="Path to a vocabulary JSON file (default: bundled vocabulary)",
    )
    parser_args.add_argument(
        "--threshold",
        type=float,
        default=0.7,
        help="Minimum similarity for fuzzy name matches (default: 0.7)",
    )
    parser_args.add_argument(
        "--output-dir",
        type=str,
        default=".",
        help="Directory to write the output CSV file (default: current directory)",
    )
    args = parser_args.parse_args()

    vocabulary = Vocabulary.from_file(args.vocabulary)
    suggester = TagSuggester(vocabulary=vocabulary, threshold=args.threshold)

    try:
        products = load_products_csv(args.products_csv)
        if not products:
            print(f"No products found in {args.products_csv}")
            exit(1)

        results = tag_products(products, suggester)

        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        output_file = f"{args.output_dir}/tagged_products_{timestamp}.csv"
        write_tagged_csv(results, output_file)

        tagged = sum(1 for _, tag in results if tag)
        print(f"\nSummary:")
        print(f"  Products processed: {len(results)}")
        print(f"  Tagged: {tagged}")
        print(f"  Untagged: {len(results) - tagged}")
        print(f"  Tag rate: {tagged / len(results) * 100:.1f}%")

    except KeyboardInterrupt:
        print("\nProcessing interrupted by user")


if __name__ == "__main__":
    main()
