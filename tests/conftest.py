"""Test fixtures: in-memory synonym data, brand index and rule gate."""

import pytest

from brand_canon.rules import RuleGate
from brand_canon.sources import StaticEdgeSource, StaticEnrichmentSource, build_index

CONNECTIONS = [
    {"manufacturer_p1": "vitabiotics", "manufacturers_p2": "ultra;ultra ginkgo&ginseng;ultra omega"},
    {"manufacturer_p1": "heel", "manufacturers_p2": "gripp-heel;heel"},
    {"manufacturer_p1": "parodontax", "manufacturers_p2": "parodontax"},
    {"manufacturer_p1": "HAPPY", "manufacturers_p2": "HAPPY"},
    {"manufacturer_p1": "isdin", "manufacturers_p2": "isdin"},
    {"manufacturer_p1": "beautyco", "manufacturers_p2": "ultra beauty;beauty"},
    {"manufacturer_p1": "zimpli kids", "manufacturers_p2": "zimpli kids;baff-bombz"},
    {"manufacturer_p1": "Babe", "manufacturers_p2": "Babe;Babē"},
    {"manufacturer_p1": "genedens", "manufacturers_p2": "genedens"},
    {"manufacturer_p1": "bio", "manufacturers_p2": "bio"},
    {"manufacturer_p1": "112", "manufacturers_p2": "112"},
]


@pytest.fixture()
def connections() -> list[dict]:
    return [dict(row) for row in CONNECTIONS]


@pytest.fixture()
def index(connections):
    return build_index(StaticEdgeSource(connections), StaticEnrichmentSource({}))


@pytest.fixture()
def gate() -> RuleGate:
    return RuleGate(
        stopwords={"bio", "neb"},
        front_only={"rich", "rff", "flex", "ultra", "gum", "beauty", "orto", "free", "112", "kin", "happy"},
        front_or_second={"heel", "contour", "nero", "rsv"},
        uppercase_aliases={"happy": "HAPPY"},
    )
