"""
Tree view: which people are drawn for a root, and how they connect.

Breadth-first from the root with one global visited set and a depth cutoff,
so cycles and runaway fan-out are both bounded. Each person becomes one
node carrying their visible spouses; each child hangs off the union it
belongs to through a coloured edge.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from gedcom_lineage.config import get_config
from gedcom_lineage.dates.normalizer import extract_year
from gedcom_lineage.graph.closures import get_all_ancestors, get_all_descendants, is_displayable
from gedcom_lineage.layout.engine import LayoutResult, LayoutSettings, layout_tree
from gedcom_lineage.logging import get_logger
from gedcom_lineage.registry.entities import GedcomData, Individual

log = get_logger("tree_view")

# One colour per union, so each child edge shows which spouse it belongs to
SPOUSE_EDGE_COLORS = (
    "#6366f1",  # indigo
    "#ec4899",  # pink
    "#14b8a6",  # teal
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#10b981",  # emerald
)

DEFAULT_HANDLE = "default"


def spouse_color(index: int) -> str:
    return SPOUSE_EDGE_COLORS[max(0, index) % len(SPOUSE_EDGE_COLORS)]


def spouse_handle(index: int) -> str:
    return f"spouse-{index}" if index >= 0 else DEFAULT_HANDLE


# ---------------------------------------------------------
# Lineage highlight
# ---------------------------------------------------------
@dataclass(frozen=True)
class HighlightState:
    highlighted_id: Optional[str] = None
    ancestors: frozenset = frozenset()
    descendants: frozenset = frozenset()

    @classmethod
    def for_person(cls, data: GedcomData, person_id: Optional[str]) -> "HighlightState":
        if not person_id:
            return cls()
        return cls(
            highlighted_id=person_id,
            ancestors=frozenset(get_all_ancestors(data, person_id)),
            descendants=frozenset(get_all_descendants(data, person_id)),
        )

    @property
    def active(self) -> bool:
        return self.highlighted_id is not None

    def in_lineage(self, person_id: str) -> bool:
        return (
            person_id == self.highlighted_id
            or person_id in self.ancestors
            or person_id in self.descendants
        )

    def classify(self, person_id: str) -> str:
        if not self.active:
            return ""
        if person_id == self.highlighted_id:
            return "selected"
        if person_id in self.ancestors:
            return "ancestor"
        if person_id in self.descendants:
            return "descendant"
        return "dimmed"

    def classify_edge(self, source_id: str, target_id: str) -> str:
        if not self.active:
            return ""
        if not (self.in_lineage(source_id) and self.in_lineage(target_id)):
            return "dimmed"
        if target_id in self.descendants:
            return "descendant-edge"
        return "ancestor-edge"


# ---------------------------------------------------------
# View model
# ---------------------------------------------------------
@dataclass(frozen=True)
class SpouseSlot:
    person_id: str
    color: str
    handle: str
    highlight: str = ""


@dataclass
class TreeNode:
    id: str
    depth: int
    spouses: Tuple[SpouseSlot, ...] = ()
    highlight: str = ""

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    @property
    def spouse_count(self) -> int:
        return len(self.spouses)


@dataclass
class TreeEdge:
    source: str
    target: str
    source_handle: str = DEFAULT_HANDLE
    color: str = SPOUSE_EDGE_COLORS[0]
    offset: int = 20
    primary: bool = True
    highlight: str = ""

    @property
    def id(self) -> str:
        return f"{self.source}-{self.target}"


@dataclass
class TreeView:
    root_id: str
    nodes: List[TreeNode] = field(default_factory=list)
    edges: List[TreeEdge] = field(default_factory=list)

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def find_node_for(self, person_id: str) -> Optional[TreeNode]:
        """Node drawing ``person_id``, either as its own card or as a spouse."""
        for node in self.nodes:
            if node.id == person_id:
                return node
        for node in self.nodes:
            if any(s.person_id == person_id for s in node.spouses):
                return node
        return None


# ---------------------------------------------------------
# Builders
# ---------------------------------------------------------
def visible_spouses(data: GedcomData, person: Individual) -> List[str]:
    """Distinct non-private spouses across the person's unions, FAMS order."""
    spouse_ids: List[str] = []
    for family in data.spouse_families(person):
        spouse_id = family.spouse_of(person.id)
        if spouse_id and spouse_id not in spouse_ids and is_displayable(data.get_individual(spouse_id)):
            spouse_ids.append(spouse_id)
    return spouse_ids


def ordered_children(data: GedcomData, person: Individual, spouse_ids: List[str]) -> List[Tuple[str, int]]:
    """
    (child id, spouse index) for every visible child of the person.

    Ordered by union (spouse index), then birth year, unknown years last.
    A child listed in several unions stays with the first one.
    """
    found: List[Tuple[str, int]] = []
    seen: Set[str] = set()
    for family in data.spouse_families(person):
        spouse_id = family.spouse_of(person.id)
        index = spouse_ids.index(spouse_id) if spouse_id in spouse_ids else -1
        for child_id in family.children:
            if child_id in seen or not is_displayable(data.get_individual(child_id)):
                continue
            seen.add(child_id)
            found.append((child_id, index))

    def sort_key(item: Tuple[str, int]):
        year = extract_year(data.individuals[item[0]].birth)
        return (item[1], year is None, year or 0)

    return sorted(found, key=sort_key)


def build_tree_view(
    data: GedcomData,
    root_id: str,
    max_depth: Optional[int] = None,
    highlight: Optional[HighlightState] = None,
) -> TreeView:
    if max_depth is None:
        max_depth = int(get_config().tree["max_depth"])
    highlight = highlight or HighlightState()

    view = TreeView(root_id=root_id)
    visited: Set[str] = set()
    claimed: Set[str] = {root_id}
    queue = deque([(root_id, 0)])

    while queue:
        person_id, depth = queue.popleft()
        if depth > max_depth or person_id in visited:
            continue

        person = data.get_individual(person_id)
        if not is_displayable(person):
            continue
        visited.add(person_id)

        spouse_ids = visible_spouses(data, person)
        view.nodes.append(
            TreeNode(
                id=person_id,
                depth=depth,
                spouses=tuple(
                    SpouseSlot(sid, spouse_color(i), spouse_handle(i), highlight.classify(sid))
                    for i, sid in enumerate(spouse_ids)
                ),
                highlight=highlight.classify(person_id),
            )
        )

        if depth + 1 > max_depth:
            continue

        for child_id, index in ordered_children(data, person, spouse_ids):
            view.edges.append(
                TreeEdge(
                    source=person_id,
                    target=child_id,
                    source_handle=spouse_handle(index),
                    color=spouse_color(index),
                    offset=20 + index * 15,
                    primary=child_id not in claimed,
                    highlight=highlight.classify_edge(person_id, child_id),
                )
            )
            claimed.add(child_id)
            queue.append((child_id, depth + 1))

    log.debug("Tree view for %s: %d nodes, %d edges", root_id, len(view.nodes), len(view.edges))
    return view


def build_tree_layout(
    data: GedcomData,
    root_id: str,
    max_depth: Optional[int] = None,
    highlight: Optional[HighlightState] = None,
    settings: Optional[LayoutSettings] = None,
) -> Tuple[TreeView, LayoutResult]:
    """Tree view for ``root_id`` together with its positioned layout."""
    view = build_tree_view(data, root_id, max_depth=max_depth, highlight=highlight)
    return view, layout_tree(view.nodes, view.edges, settings=settings)
