"""Input providers for synonym edges, enrichment aliases and products.

The engine only depends on what ``load()`` returns, so tests and callers
can swap the JSON files for in-memory data.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from . import SourceDataError
from .canonical import BrandIndex, select_canonicals
from .graph import build_graph, find_components
from .schemas import AliasEdge, Product

logger = logging.getLogger(__name__)


class EdgeSource(Protocol):
    def load(self) -> list[AliasEdge]: ...


class EnrichmentSource(Protocol):
    def load(self) -> dict[str, list[str]]: ...


class ProductSource(Protocol):
    def load(self) -> list[Product]: ...


# ---------------------------------------------------------------------------
# Row parsing shared by file and in-memory providers
# ---------------------------------------------------------------------------


def parse_edges(rows: list[Any], delimiter: str = ";") -> list[AliasEdge]:
    edges = []
    skipped = 0
    for row in rows:
        edge = row if isinstance(row, AliasEdge) else AliasEdge.from_row(row, delimiter)
        if edge is None:
            skipped += 1
            continue
        edges.append(edge)
    if skipped:
        logger.warning("Skipped %d malformed connection rows", skipped)
    return edges


def parse_enrichment(data: dict[str, Any]) -> dict[str, list[str]]:
    mapping: dict[str, list[str]] = {}
    for key, value in data.items():
        if not isinstance(value, (list, tuple)):
            logger.warning("Skipping enrichment key %r: value is not a list", key)
            continue
        mapping[str(key)] = [v for v in value if isinstance(v, str)]
    return mapping


def parse_products(rows: list[Any]) -> list[Product]:
    products = []
    for row in rows:
        if isinstance(row, Product):
            products.append(row)
            continue
        if not isinstance(row, dict) or row.get("title") is None:
            logger.warning("Skipping product row without a title: %r", row)
            continue
        mapping_id = row.get("mapping_id", row.get("m_id"))
        products.append(Product(
            title=str(row["title"]),
            source_id=str(row.get("source_id", "")),
            mapping_id=str(mapping_id) if mapping_id else None,
        ))
    return products


# ---------------------------------------------------------------------------
# JSON file providers
# ---------------------------------------------------------------------------


def _read_json(path: str | Path, expected: type, required: bool = True) -> Any:
    path = Path(path)
    if not path.exists():
        if required:
            raise SourceDataError(f"Input file not found: {path}", str(path))
        logger.info("Optional input %s not found, using empty data", path)
        return expected()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SourceDataError(f"Cannot parse {path}: {e}", str(path)) from e
    if not isinstance(data, expected):
        raise SourceDataError(
            f"{path}: expected a JSON {expected.__name__}, got {type(data).__name__}",
            str(path),
        )
    return data


class JsonEdgeSource:
    def __init__(self, path: str | Path, delimiter: str = ";") -> None:
        self.path = path
        self.delimiter = delimiter

    def load(self) -> list[AliasEdge]:
        return parse_edges(_read_json(self.path, list), self.delimiter)


class JsonEnrichmentSource:
    """Missing file means no enrichment, not an error."""

    def __init__(self, path: str | Path) -> None:
        self.path = path

    def load(self) -> dict[str, list[str]]:
        return parse_enrichment(_read_json(self.path, dict, required=False))


class JsonProductSource:
    def __init__(self, path: str | Path) -> None:
        self.path = path

    def load(self) -> list[Product]:
        return parse_products(_read_json(self.path, list))


# ---------------------------------------------------------------------------
# In-memory providers
# ---------------------------------------------------------------------------


class StaticEdgeSource:
    def __init__(self, rows: list[Any] | None, delimiter: str = ";") -> None:
        self.rows = rows
        self.delimiter = delimiter

    def load(self) -> list[AliasEdge]:
        if self.rows is None:
            raise SourceDataError("Synonym edge data is missing")
        return parse_edges(self.rows, self.delimiter)


class StaticEnrichmentSource:
    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = data or {}

    def load(self) -> dict[str, list[str]]:
        return parse_enrichment(self.data)


class StaticProductSource:
    def __init__(self, rows: list[Any]) -> None:
        self.rows = rows

    def load(self) -> list[Product]:
        return parse_products(self.rows)


def build_index(
    edge_source: EdgeSource,
    enrichment_source: EnrichmentSource | None = None,
) -> BrandIndex:
    """Build the immutable brand index; run once before any matching."""
    edges = edge_source.load()
    enrichment = enrichment_source.load() if enrichment_source is not None else {}
    components = find_components(build_graph(edges))
    return select_canonicals(components, enrichment)
