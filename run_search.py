#!/usr/bin/env python3
"""
Command-line script to extract search candidates from saved search pages.

Usage:
    python run_search.py search_results.html
    python run_search.py page1.html page2.html -o candidates.json
    python run_search.py search_results.html --no-preprocess -v
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Load .env file automatically
from dotenv import load_dotenv
load_dotenv()

from fanedit_parser.config import Settings
from fanedit_parser.logger import setup_logger
from fanedit_parser.main import FaneditParser


def main():
    parser = argparse.ArgumentParser(
        description="Extract search result candidates from fanedit.org search pages"
    )
    parser.add_argument("files", nargs="+", help="Saved search results HTML files")
    parser.add_argument("--output", "-o", help="Output JSON file (default: stdout)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument(
        "--no-preprocess",
        action="store_true",
        help="Parse the raw HTML without sanitizing it first"
    )
    args = parser.parse_args()

    settings = Settings.from_env()
    setup_logger(level=logging.DEBUG if args.verbose else settings.log_level)

    fanedit = FaneditParser(settings=settings, preprocess=not args.no_preprocess)

    results = []

    for file_path in args.files:
        path = Path(file_path)
        print(f"Parsing: {path.name}", file=sys.stderr)

        try:
            candidates = fanedit.search_file(path)
            results.append({
                "file": str(path),
                "status": "success",
                "candidates": [c.model_dump() for c in candidates]
            })
            print(f"  ✓ {len(candidates)} candidates", file=sys.stderr)

        except OSError as e:
            results.append({
                "file": str(path),
                "status": "error",
                "error": str(e)
            })
            print(f"  ✗ Error: {e}", file=sys.stderr)

    output = json.dumps(results, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"\nSaved to: {args.output}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
