"""
Ad Copy Compliance Pre-Screen: Standalone Runner (LangGraph)

Pipeline: SEGMENT → SCREEN (annotations + keyword tiers) → COMBINE

Usage:
    python main.py /path/to/ad.txt                  # all products' rules
    python main.py /path/to/ad.txt --product HA     # rules for one product
    cat ad.txt | python main.py -                   # read the copy from stdin
    python main.py                                  # uses AD_COPY_PATH from .env
"""

import sys
import os
import argparse
from dotenv import load_dotenv; load_dotenv()

from screening.config import load_config
from screening.errors import InvalidInputError, RuleTableLoadError
from screening.logger import setup_logging
from screening.report import build_review_hints, detailed_list
from screening.runner import run_screening, save_outputs
from screening.screener import ComplianceScreener


def read_copy(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def run(path: str, product_id: str | None, output_dir: str, show_hints: bool = False):
    config = load_config()
    setup_logging(config)

    screener = ComplianceScreener(config=config)
    text = read_copy(path)
    product_id = product_id or config.product_id

    print(f"\n{'='*60}")
    print(f"Ad Copy Compliance Pre-Screen (LangGraph)")
    print(f"Input:   {'<stdin>' if path == '-' else path}")
    print(f"Product: {product_id or 'all'}")
    print(f"Rules:   {screener.rule_tables.stats()}")
    print(f"{'='*60}\n")

    screening = run_screening(text, product_id, screener)
    save_outputs(screening, output_dir)

    result = screening.result
    print(detailed_list(result))
    if show_hints:
        print()
        print(build_review_hints(result))

    print(f"\n{'='*60}")
    print(f"SCREENING COMPLETE")
    print(f"  Segments             : {len(screening.segments)}")
    print(f"  Absolute             : {result.summary.by_tier['absolute']}")
    print(f"  Conditional          : {result.summary.by_tier['conditional']}")
    print(f"  Context-dependent    : {result.summary.by_tier['context-dependent']}")
    print(f"  Annotated (accepted) : {len(result.suppressed_matches)}")
    print(f"  Flagged keywords     : {'、'.join(result.unique_flagged_keywords) or '-'}")
    print(f"\nOutputs saved to {output_dir}/")
    print(f"{'='*60}\n")

    return screening


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Rule-based compliance pre-screen for Japanese ad copy")
    parser.add_argument("path", nargs="?", default=None, help="Path to a UTF-8 text file, or - for stdin")
    parser.add_argument("--product", default=None, help="Product id selecting the rule variant (e.g. HA, SH)")
    parser.add_argument("--output-dir", default=None, help="Directory for segments.json and screening.json")
    parser.add_argument("--hints", action="store_true", help="Also print the reviewer hint block")
    args = parser.parse_args()

    path = args.path or os.getenv("AD_COPY_PATH")

    if not path:
        print("Error: Provide a text file path (or -) as argument or set AD_COPY_PATH in .env")
        sys.exit(1)

    if path != "-" and not os.path.isfile(path):
        print(f"Error: File not found: {path}")
        sys.exit(1)

    try:
        run(path, args.product, args.output_dir or load_config().output_dir, args.hints)
    except (InvalidInputError, RuleTableLoadError, ValueError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)
