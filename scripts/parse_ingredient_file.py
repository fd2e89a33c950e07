#!/usr/bin/env python3
"""
Parse a text file of ingredient lines (one per line) and export the results
as a CSV or parquet table.
"""

import argparse
import sys

from tqdm import tqdm

from recipe_ingredient_parser.i18n import available_languages
from recipe_ingredient_parser.ingredients import IngredientParser
from recipe_ingredient_parser.recipes import ingredients_to_dataframe


def main():
    """Main function to parse an ingredient file."""
    parser = argparse.ArgumentParser(
        description="Parse ingredient lines from a text file into a table"
    )
    parser.add_argument("input_file", type=str, help="Text file, one ingredient per line")
    parser.add_argument(
        "--language",
        type=str,
        choices=available_languages(),
        default="eng",
        help="Language of the ingredient lines",
    )
    parser.add_argument(
        "--alternatives",
        action="store_true",
        help="Resolve 'or', slash and parenthetical alternatives",
    )
    parser.add_argument(
        "--unit-systems",
        action="store_true",
        help="Attach the measurement system of each unit",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="data/parsed_ingredients",
        help="Output file path without extension",
    )
    parser.add_argument(
        "--output-format",
        type=str,
        choices=["parquet", "csv"],
        default="csv",
        help="Output file format (parquet or csv)",
    )
    args = parser.parse_args()

    try:
        with open(args.input_file, encoding="utf-8") as f:
            lines = [line.strip() for line in f if line.strip()]
    except OSError as e:
        print(f"Error reading {args.input_file}: {e}", file=sys.stderr)
        sys.exit(1)

    if not lines:
        print("No ingredient lines found. Exiting.")
        return

    ingredient_parser = IngredientParser(
        language=args.language,
        include_unit_systems=args.unit_systems,
        include_alternatives=args.alternatives,
    )
    parsed = [ingredient_parser.parse(line) for line in tqdm(lines, desc="Parsing ingredients")]
    df = ingredients_to_dataframe(parsed)

    output_file = f"{args.output}.{args.output_format}"
    try:
        if args.output_format == "parquet":
            df.to_parquet(output_file, index=False)
        else:  # csv
            df.to_csv(output_file, index=False)
    except OSError as e:
        print(f"Error writing {output_file}: {e}", file=sys.stderr)
        sys.exit(1)

    print("Successfully parsed ingredient file:")
    print(f"  - File: {output_file}")
    print(f"  - Lines parsed: {len(df)}")
    print(f"  - With a unit: {df['unit'].notna().sum()}")
    print(f"  - Unique ingredients: {df['ingredient'].nunique()}")
    print(f"  - Data shape: {df.shape}")


if __name__ == "__main__":
    main()
