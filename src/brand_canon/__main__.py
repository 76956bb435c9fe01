"""Allow running with: python -m brand_canon"""

from __future__ import annotations

import argparse
import logging
import sys

from . import SourceDataError
from .assignment import assign_brands
from .config import settings
from .report import dry_run, format_report
from .rules import RuleGate
from .sources import JsonEdgeSource, JsonEnrichmentSource, JsonProductSource, build_index


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brand_canon",
        description="Assign canonical brands to catalog product titles.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--report", action="store_true", help="Dry run, print a text report")
    mode.add_argument("--report-json", action="store_true", help="Dry run, print the report as JSON")
    parser.add_argument("--connections", default=settings.connections_path,
                        help="Synonym connection JSON file")
    parser.add_argument("--mapping", default=settings.brands_mapping_path,
                        help="Enrichment alias JSON file (optional)")
    parser.add_argument("--products", default=settings.products_path,
                        help="Product JSON file")
    parser.add_argument("--workers", type=int, default=settings.match_workers,
                        help="Worker threads for the dry run")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    gate = RuleGate.from_settings(settings)
    try:
        index = build_index(
            JsonEdgeSource(args.connections, settings.secondary_delimiter),
            JsonEnrichmentSource(args.mapping),
        )
        products = JsonProductSource(args.products).load()
    except SourceDataError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.report or args.report_json:
        report = dry_run(products, index, gate, workers=args.workers,
                         max_ngram_tokens=settings.max_ngram_tokens)
        print(report.model_dump_json(indent=2) if args.report_json else format_report(report))
        return 0

    records = assign_brands(
        products, index, gate,
        source=settings.source,
        country=settings.country,
        max_ngram_tokens=settings.max_ngram_tokens,
    )
    for record in records:
        print(f"{record.title} -> {','.join(record.meta['matched_brands'])}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
