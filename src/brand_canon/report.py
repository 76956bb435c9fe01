"""Dry-run brand report: match every product, count brands, nothing is stored.

Matching fans out over a thread pool in contiguous chunks. Each chunk
keeps its own Counter; the counters are summed in chunk order afterwards,
which keeps "first encountered" tie order identical to a sequential run.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .canonical import BrandIndex
from .matcher import MAX_NGRAM_TOKENS, match_title
from .rules import RuleGate
from .schemas import BrandCount, BrandReport, MatchResult, Product

logger = logging.getLogger(__name__)


def _match_chunk(
    products: Sequence[Product],
    index: BrandIndex,
    gate: RuleGate | None,
    max_ngram_tokens: int,
) -> tuple[list[MatchResult], Counter]:
    rows = []
    counts: Counter = Counter()
    for product in products:
        result = match_title(product.title, index, gate, max_ngram_tokens)
        rows.append(result)
        if result.chosen:
            counts[result.chosen] += 1
    return rows, counts


def _chunks(items: Sequence[Product], n: int) -> list[Sequence[Product]]:
    size = max(1, -(-len(items) // n))
    return [items[i:i + size] for i in range(0, len(items), size)]


def dry_run(
    products: Sequence[Product],
    index: BrandIndex,
    gate: RuleGate | None = None,
    workers: int = 1,
    max_ngram_tokens: int = MAX_NGRAM_TOKENS,
) -> BrandReport:
    """Match all products and aggregate the chosen brands."""
    products = list(products)
    if workers > 1 and len(products) > 1:
        chunks = _chunks(products, workers)
        with ThreadPoolExecutor(max_workers=workers) as pool:
            partials = list(pool.map(
                lambda chunk: _match_chunk(chunk, index, gate, max_ngram_tokens), chunks
            ))
    else:
        partials = [_match_chunk(products, index, gate, max_ngram_tokens)]

    rows: list[MatchResult] = []
    totals: Counter = Counter()
    for chunk_rows, chunk_counts in partials:
        rows.extend(chunk_rows)
        totals.update(chunk_counts)

    # sorted() is stable, so equal counts keep first-encountered order
    by_brand = [
        BrandCount(brand=brand, count=count)
        for brand, count in sorted(totals.items(), key=lambda kv: -kv[1])
    ]
    report = BrandReport(
        total=len(rows),
        assigned=sum(1 for r in rows if r.chosen),
        unique_brands=len(totals),
        by_brand=by_brand,
        rows=rows,
    )
    logger.info(
        "Dry run: %d titles, %d assigned, %d unique brands",
        report.total, report.assigned, report.unique_brands,
    )
    return report


def format_report(report: BrandReport, top: int = 20, unmatched_sample: int = 10) -> str:
    coverage = (report.assigned / report.total * 100) if report.total else 0.0
    lines = [
        "Brand assignment dry run",
        f"Titles:        {report.total}",
        f"Assigned:      {report.assigned} ({coverage:.1f}%)",
        f"Unique brands: {report.unique_brands}",
    ]

    if report.by_brand:
        lines.append("")
        lines.append(f"Top {min(top, len(report.by_brand))} brands:")
        width = max(len(b.brand) for b in report.by_brand[:top])
        for entry in report.by_brand[:top]:
            lines.append(f"  {entry.brand:<{width}}  {entry.count}")

    unmatched = [r.title for r in report.rows if not r.chosen]
    if unmatched:
        lines.append("")
        lines.append(f"Unmatched ({len(unmatched)}), first {min(unmatched_sample, len(unmatched))}:")
        for title in unmatched[:unmatched_sample]:
            lines.append(f"  {title}")

    return "\n".join(lines)
