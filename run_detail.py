#!/usr/bin/env python3
"""
Command-line script to extract full metadata from a saved detail page.

The listing id is the value fanedit.org uses in ?p=<id> URLs; it is copied
onto the record as-is.

Usage:
    python run_detail.py detail.html --id 12345
    python run_detail.py detail.html --id 12345 --images -o record.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

from fanedit_parser.config import Settings
from fanedit_parser.logger import setup_logger
from fanedit_parser.main import FaneditParser


def main():
    parser = argparse.ArgumentParser(
        description="Extract metadata from a fanedit.org detail page"
    )
    parser.add_argument("file", help="Saved detail page HTML file")
    parser.add_argument("--id", required=True, dest="external_id", help="Listing id of the page")
    parser.add_argument("--images", action="store_true", help="Also list image URLs")
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
    path = Path(args.file)

    try:
        html, charset = fanedit.read_file(path)
    except OSError as e:
        print(f"✗ Error: {e}", file=sys.stderr)
        sys.exit(1)

    record = fanedit.details(html, args.external_id, declared_charset=charset)
    result = {
        "file": str(path),
        "source_url": fanedit.settings.detail_url(args.external_id),
        "status": "success" if record.has_metadata else "no_metadata",
        "record": record.model_dump(mode="json"),
    }
    if args.images:
        result["images"] = [
            image.model_dump(mode="json")
            for image in fanedit.images(html, declared_charset=charset)
        ]

    print(f"  {'✓' if record.has_metadata else '✗'} {record.title or args.external_id}", file=sys.stderr)

    output = json.dumps(result, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"\nSaved to: {args.output}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
