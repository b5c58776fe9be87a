# =========================
# FILE: recipe_costing/src/services/unit_graph.py
# =========================
from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional, Tuple

from src.domain.entities import ConversionEdge, UnitNode, UnitOfMeasure, UoMName, UoMType
from src.domain.errors import ConversionNotFound
from src.domain.repositories import UnitReadRepo

log = logging.getLogger("services.unit_graph")

# node -> (parent node, factor of the edge parent -> node)
_ParentMap = Dict[UnitNode, Tuple[Optional[UnitNode], float]]


class UnitConversionGraph:
    """
    Directed graph over (unit name, unit type) nodes built from conversion edges.

    Queries run a breadth-first search from the source node, so the path used
    has the fewest hops. Outgoing edges are scanned in the order the provider
    lists them; the first edge to reach a node wins. No reciprocal edges are
    implied.

    With cache_trees=True the full BFS tree of each source is kept, which
    gives the same parents as a search that stops at the target.
    """

    def __init__(self, unit_repo: UnitReadRepo, cache_trees: bool = True) -> None:
        self.unit_repo = unit_repo
        self.cache_trees = cache_trees
        self._adjacency: Dict[UnitNode, List[ConversionEdge]] = {}
        self._trees: Dict[UnitNode, _ParentMap] = {}
        self.reload()

    def reload(self) -> None:
        """Re-read edges from the provider and drop cached trees."""
        adjacency: Dict[UnitNode, List[ConversionEdge]] = {}
        edges = self.unit_repo.all()
        for e in edges:
            adjacency.setdefault(e.source, []).append(e)
        self._adjacency = adjacency
        self._trees.clear()
        log.info("UnitConversionGraph loaded %d edges over %d source units", len(edges), len(adjacency))

    def convert(self, from_uom: UnitOfMeasure, to_name: UoMName, to_type: UoMType) -> UnitOfMeasure:
        if from_uom.name == to_name and from_uom.type == to_type:
            return UnitOfMeasure(from_uom.amount, from_uom.name, from_uom.type)

        target: UnitNode = (to_name, to_type)
        parents = self._parents(from_uom.node, target)
        if target not in parents:
            log.warning("No conversion path %s -> %s", from_uom.node, target)
            raise ConversionNotFound(from_uom, to_name, to_type)

        total_factor = 1.0
        hops = 0
        node: Optional[UnitNode] = target
        while node is not None:
            parent, factor = parents[node]
            if parent is None:
                break
            total_factor *= factor
            hops += 1
            node = parent

        log.debug("Converted %s -> %s in %d hop(s), factor=%s", from_uom.node, target, hops, total_factor)
        return UnitOfMeasure(from_uom.amount * total_factor, to_name, to_type)

    def _parents(self, source: UnitNode, target: UnitNode) -> _ParentMap:
        if not self.cache_trees:
            return self._bfs(source, stop_at=target)
        # Unlocked; concurrent misses on one source at worst both run the same BFS.
        tree = self._trees.get(source)
        if tree is None:
            tree = self._bfs(source, stop_at=None)
            self._trees[source] = tree
        return tree

    def _bfs(self, source: UnitNode, stop_at: Optional[UnitNode]) -> _ParentMap:
        parents: _ParentMap = {source: (None, 1.0)}
        queue = deque([source])
        while queue:
            current = queue.popleft()
            for e in self._adjacency.get(current, []):
                nxt = e.target
                if nxt in parents:
                    continue
                parents[nxt] = (current, e.factor)
                if nxt == stop_at:
                    return parents
                queue.append(nxt)
        return parents
