#!/usr/bin/env python3
"""Command-line entry point: normalize scraped product JSON."""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from dotenv import load_dotenv
load_dotenv()

import config
from log_config import setup_logging
from models import ProductRecord
from normalization import decode_message, normalize_product
from retailers import process_url

logger = logging.getLogger(__name__)


def _with_derived(record: ProductRecord) -> dict:
    """Canonical document plus the computed per-variant fields and prices."""
    doc = record.to_document()
    doc["formattedPrice"] = record.formatted_price
    doc["formattedOriginalPrice"] = record.formatted_original_price
    for group, options in (record.variants or {}).items():
        doc["variants"][group] = [
            {
                **option.to_document(),
                "isInStock": option.is_in_stock,
                "colorValue": option.color_value,
                "rgbValue": option.rgb_value,
                "imageUrl": option.image_url,
            }
            for option in options
        ]
    return doc


def _read_sources(paths: list[str]) -> list[tuple[str, str]]:
    """Return (name, text) pairs; stdin when no paths were given."""
    if not paths:
        return [("<stdin>", sys.stdin.read())]
    sources = []
    for path in paths:
        with open(path, encoding="utf-8") as f:
            sources.append((path, f.read()))
    return sources


def run(args: argparse.Namespace) -> int:
    try:
        sources = _read_sources(args.files)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    failures = 0
    for name, text in sources:
        if args.message:
            decoded = decode_message(text, current_url=args.current_url)
            record = decoded.product
            if decoded.navigated_url:
                logger.info(f"[{name}] Navigated to {decoded.navigated_url}")
            if record is None:
                logger.info(f"[{name}] No product in message")
                continue
        else:
            try:
                raw = json.loads(text)
            except (ValueError, RecursionError) as e:
                logger.error(f"[{name}] Invalid JSON: {e}")
                failures += 1
                continue
            record = normalize_product(raw)

        doc = _with_derived(record) if args.derived else record.to_document()
        print(json.dumps(doc, ensure_ascii=False, indent=2 if args.pretty else None))

    return 1 if failures else 0


def main():
    parser = argparse.ArgumentParser(description="Normalize scraped product JSON")
    parser.add_argument(
        "files", nargs="*", help="JSON documents to normalize (default: stdin)"
    )
    parser.add_argument(
        "--message", action="store_true", help="Treat input as a raw extractor message"
    )
    parser.add_argument(
        "--current-url", default="", help="Page URL for legacy 'price|title' messages"
    )
    parser.add_argument(
        "--derived", action="store_true", help="Include stock/color/image fields and formatted prices"
    )
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument(
        "--check-url", metavar="URL", help="Check a URL against supported retailers and exit"
    )
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="e.g. DEBUG, VERBOSE")
    args = parser.parse_args()

    setup_logging(args.log_level, config.LOG_MAX_LENGTH, config.LOG_CATEGORIES)

    if args.check_url is not None:
        check = process_url(args.check_url)
        print(json.dumps(asdict(check), ensure_ascii=False, indent=2))
        sys.exit(0 if check.is_valid else 1)

    sys.exit(run(args))


if __name__ == "__main__":
    main()
