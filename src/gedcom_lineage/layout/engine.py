"""
Tidy-tree layout for a family tree view.

Two passes over a tree forced onto the family DAG (one primary parent edge
per child):

1. post-order: the width each subtree needs,
   ``max(own width, sum of child subtree widths + gaps)``;
2. pre-order: each node is centered in its allocated span and its
   children are laid out left to right under it.

Sibling subtrees never overlap and every node sits centered over its whole
descendant fan. Extra spouses widen only the node that owns them.

Nodes are duck-typed (``.id`` and optional ``.spouse_count``), as are edges
(``.source``, ``.target`` and optional ``.primary``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set

from gedcom_lineage.config import get_config


@dataclass(frozen=True)
class LayoutSettings:
    node_width: float = 140
    node_height: float = 60
    spouse_width: float = 160
    horizontal_gap: float = 30
    vertical_gap: float = 80

    @classmethod
    def from_config(cls, cfg=None) -> "LayoutSettings":
        cfg = cfg if cfg is not None else get_config()
        layout = cfg.layout
        return cls(
            node_width=layout["node_width"],
            node_height=layout["node_height"],
            spouse_width=layout["spouse_width"],
            horizontal_gap=layout["horizontal_gap"],
            vertical_gap=layout["vertical_gap"],
        )

    @property
    def row_height(self) -> float:
        return self.node_height + self.vertical_gap


@dataclass(frozen=True)
class LayoutNode:
    id: str
    spouse_count: int = 0


@dataclass(frozen=True)
class LayoutEdge:
    source: str
    target: str
    primary: bool = True


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass
class LayoutResult:
    """Top-left positions per node id, plus the edges passed in."""
    positions: Dict[str, Position] = field(default_factory=dict)
    edges: List[Any] = field(default_factory=list)
    widths: Dict[str, float] = field(default_factory=dict)
    root_id: Optional[str] = None

    def center_x(self, node_id: str) -> float:
        return self.positions[node_id].x + self.widths[node_id] / 2


def own_width(node: Any, settings: LayoutSettings) -> float:
    spouse_count = getattr(node, "spouse_count", 0) or 0
    return settings.node_width + spouse_count * settings.spouse_width


def primary_children(nodes: Sequence[Any], edges: Sequence[Any]) -> Dict[str, List[str]]:
    """
    Parent -> children from the first primary edge into each child.

    Edge order is sibling order. Edges touching unknown nodes are ignored.
    """
    known = {n.id for n in nodes}
    children_of: Dict[str, List[str]] = {}
    claimed: Set[str] = set()

    for edge in edges:
        if not getattr(edge, "primary", True):
            continue
        if edge.source not in known or edge.target not in known:
            continue
        if edge.target in claimed or edge.target == edge.source:
            continue
        claimed.add(edge.target)
        children_of.setdefault(edge.source, []).append(edge.target)

    return children_of


def _children_span(children: Sequence[str], subtree: Dict[str, float], gap: float) -> float:
    if not children:
        return 0.0
    return sum(subtree[c] for c in children) + gap * (len(children) - 1)


def layout_tree(
    nodes: Sequence[Any],
    edges: Sequence[Any],
    settings: Optional[LayoutSettings] = None,
) -> LayoutResult:
    settings = settings or LayoutSettings.from_config()
    result = LayoutResult(edges=list(edges))
    if not nodes:
        return result

    widths = {n.id: own_width(n, settings) for n in nodes}
    result.widths = widths
    children_of = primary_children(nodes, edges)

    has_parent = {c for kids in children_of.values() for c in kids}
    root_id = next((n.id for n in nodes if n.id not in has_parent), None)
    if root_id is None:
        return result
    result.root_id = root_id

    # Pre-order walk from the root; the visited guard breaks stray cycles.
    order: List[str] = []
    seen: Set[str] = set()
    stack = [root_id]
    while stack:
        node_id = stack.pop()
        if node_id in seen:
            continue
        seen.add(node_id)
        order.append(node_id)
        stack.extend(reversed(children_of.get(node_id, [])))

    def kids(node_id: str) -> List[str]:
        return [c for c in children_of.get(node_id, []) if c in seen]

    # Pass 1: subtree widths, children before parents
    subtree: Dict[str, float] = {}
    for node_id in reversed(order):
        span = _children_span(kids(node_id), subtree, settings.horizontal_gap)
        subtree[node_id] = max(widths[node_id], span)

    # Pass 2: positions, parents before children
    origins: Dict[str, float] = {root_id: 0.0}
    depths: Dict[str, int] = {root_id: 0}
    for node_id in order:
        x = origins[node_id]
        depth = depths[node_id]
        result.positions[node_id] = Position(
            x=x + (subtree[node_id] - widths[node_id]) / 2,
            y=depth * settings.row_height,
        )

        children = kids(node_id)
        child_x = x + (subtree[node_id] - _children_span(children, subtree, settings.horizontal_gap)) / 2
        for child_id in children:
            origins[child_id] = child_x
            depths[child_id] = depth + 1
            child_x += subtree[child_id] + settings.horizontal_gap

    for node in nodes:
        result.positions.setdefault(node.id, Position(0.0, 0.0))

    return result
