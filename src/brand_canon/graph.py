"""Synonym graph: raw alias records → undirected graph → equivalence classes."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

from .schemas import AliasEdge

logger = logging.getLogger(__name__)


class AliasGraph:
    """Undirected graph of raw alias strings.

    Adjacency is kept in insertion-ordered dicts rather than sets so that
    traversal order (and therefore first-seen tie breaking downstream)
    does not depend on string hashing.
    """

    def __init__(self) -> None:
        self._adj: dict[str, dict[str, None]] = {}

    def add_node(self, node: str) -> None:
        self._adj.setdefault(node, {})

    def add_edge(self, a: str, b: str) -> None:
        self.add_node(a)
        self.add_node(b)
        self._adj[a][b] = None
        self._adj[b][a] = None

    def neighbors(self, node: str) -> list[str]:
        return list(self._adj.get(node, ()))

    @property
    def nodes(self) -> list[str]:
        return list(self._adj)

    def __contains__(self, node: object) -> bool:
        return node in self._adj

    def __len__(self) -> int:
        return len(self._adj)


def build_graph(edges: Iterable[AliasEdge]) -> AliasGraph:
    """Add ``primary ↔ secondary`` for every secondary term of every record."""
    graph = AliasGraph()
    for edge in edges:
        primary = edge.primary.strip()
        if not primary:
            continue
        graph.add_node(primary)
        for secondary in edge.secondary:
            alias = secondary.strip()
            if alias:
                graph.add_edge(primary, alias)
    return graph


def find_components(graph: AliasGraph) -> list[list[str]]:
    """Connected components via iterative BFS; each node lands in exactly one."""
    seen: set[str] = set()
    groups: list[list[str]] = []

    for start in graph.nodes:
        if start in seen:
            continue
        seen.add(start)
        queue = deque([start])
        component: list[str] = []
        while queue:
            node = queue.popleft()
            component.append(node)
            for nxt in graph.neighbors(node):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        groups.append(component)

    logger.debug("Found %d synonym groups over %d aliases", len(groups), len(graph))
    return groups
