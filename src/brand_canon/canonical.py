"""Canonical selection: one stable label per synonym group.

For every group the canonical is the alias whose normalized form sorts
first (first-seen raw form wins ties). Enrichment aliases are merged in
before the final pick, so an enrichment entry can change which member
becomes canonical. Groups that share a normalized alias ("Acme" and
"acme" in unconnected rows) are merged into one brand.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .text import normalize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrandIndex:
    """Read-only canonical table plus its inverse over normalized aliases.

    Built once per batch run and passed into every matching call.
    """

    canonical_to_aliases: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    alias_to_canonical: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def empty(cls) -> BrandIndex:
        return cls()

    def canonical_for(self, alias: str) -> str | None:
        return self.alias_to_canonical.get(normalize(alias))

    def aliases_of(self, canonical: str) -> tuple[str, ...]:
        return self.canonical_to_aliases.get(canonical, ())

    def __len__(self) -> int:
        return len(self.canonical_to_aliases)


def pick_canonical(names: Iterable[str]) -> str | None:
    """Raw name whose normalized form is lexicographically smallest."""
    best_norm: str | None = None
    best_raw: str | None = None
    for raw in names:
        norm = normalize(raw)
        if best_norm is None or norm < best_norm:
            best_norm, best_raw = norm, raw
    return best_raw


def merge_enrichment(
    canonical: str,
    aliases: dict[str, None],
    enrichment: Mapping[str, object],
) -> None:
    """Union in enrichment aliases keyed by the canonical or any current alias.

    Keys are matched exactly (not normalized). ``aliases`` is updated in place.
    """
    for key in [canonical, *aliases]:
        extra = enrichment.get(key)
        if extra is None:
            continue
        if not isinstance(extra, (list, tuple)):
            logger.warning("Skipping enrichment entry %r: expected a list, got %s",
                           key, type(extra).__name__)
            continue
        for alias in extra:
            if isinstance(alias, str) and alias.strip():
                aliases.setdefault(alias.strip(), None)


def _merge_overlapping(groups: list[dict[str, None]]) -> list[dict[str, None]]:
    """Union groups that share a normalized alias ("Acme" and "acme").

    Merged groups keep the position of their earliest member group, and
    alias order follows group order so first-seen tie breaking still holds.
    """
    parent = list(range(len(groups)))

    def find(i: int) -> int:
        while parent[i] != i:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    owner: dict[str, int] = {}
    for i, aliases in enumerate(groups):
        for alias in aliases:
            key = normalize(alias)
            j = owner.setdefault(key, i)
            root_i, root_j = find(i), find(j)
            if root_i != root_j:
                logger.warning("Alias %r shared by two synonym groups; merging them", key)
                parent[max(root_i, root_j)] = min(root_i, root_j)

    merged: dict[int, dict[str, None]] = {}
    for i, aliases in enumerate(groups):
        target = merged.setdefault(find(i), {})
        for alias in aliases:
            target.setdefault(alias, None)
    return list(merged.values())


def select_canonicals(
    components: Iterable[Iterable[str]],
    enrichment: Mapping[str, object] | None = None,
) -> BrandIndex:
    """Turn synonym groups into a ``BrandIndex``."""
    enrichment = enrichment or {}
    groups: list[dict[str, None]] = []

    for component in components:
        aliases: dict[str, None] = {}
        for name in component:
            if name and name.strip():
                aliases.setdefault(name.strip(), None)
        if not aliases:
            continue
        merge_enrichment(pick_canonical(aliases), aliases, enrichment)
        groups.append(aliases)

    canonical_to_aliases: dict[str, tuple[str, ...]] = {}
    alias_to_canonical: dict[str, str] = {}
    for aliases in _merge_overlapping(groups):
        canonical = pick_canonical(aliases)
        ordered = tuple(sorted(aliases, key=normalize))
        canonical_to_aliases[canonical] = ordered
        for alias in ordered:
            alias_to_canonical[normalize(alias)] = canonical

    logger.info(
        "Brand index built: %d canonical brands, %d aliases",
        len(canonical_to_aliases), len(alias_to_canonical),
    )
    return BrandIndex(
        canonical_to_aliases=MappingProxyType(canonical_to_aliases),
        alias_to_canonical=MappingProxyType(alias_to_canonical),
    )
