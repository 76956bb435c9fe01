"""Assign a canonical brand to every not-yet-mapped product."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Callable, Iterable

from .canonical import BrandIndex
from .matcher import MAX_NGRAM_TOKENS, match_title
from .rules import RuleGate
from .schemas import BrandAssignment, Product

logger = logging.getLogger(__name__)


def assignment_key(source: str, country: str, source_id: str) -> str:
    """Stable storage key for one product of one source/country."""
    return hashlib.sha1(f"{source}_{country}_{source_id}".encode("utf-8")).hexdigest()


def _has_mapping(product: Product) -> bool:
    return bool(product.mapping_id)


def assign_brands(
    products: Iterable[Product],
    index: BrandIndex,
    gate: RuleGate | None = None,
    *,
    source: str,
    country: str,
    already_assigned: Callable[[Product], bool] | None = None,
    max_ngram_tokens: int = MAX_NGRAM_TOKENS,
) -> list[BrandAssignment]:
    """Match products and build assignment records.

    Products for which ``already_assigned`` is true are skipped without
    matching. Storing the returned records is up to the caller.
    """
    already_assigned = already_assigned or _has_mapping
    records: list[BrandAssignment] = []
    skipped = 0

    for product in products:
        if already_assigned(product):
            skipped += 1
            continue

        result = match_title(product.title, index, gate, max_ngram_tokens)
        records.append(BrandAssignment(
            key=assignment_key(source, country, product.source_id),
            source=source,
            country=country,
            source_id=product.source_id,
            title=product.title,
            brand=result.chosen,
            meta={"matched_brands": result.ordered_canonicals},
        ))

    matched = sum(1 for r in records if r.brand)
    logger.info(
        "Brand assignment %s/%s: %d processed, %d matched, %d already assigned",
        source, country, len(records), matched, skipped,
    )
    return records
