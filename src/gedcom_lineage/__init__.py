"""
gedcom-lineage: GEDCOM individuals/families -> family graph views.

    from gedcom_lineage import parse_gedcom, find_default_root, build_tree_layout
"""

from gedcom_lineage.graph import (
    PersonRelationships,
    build_children_graph,
    build_root_candidates,
    calculate_descendant_counts,
    filter_out_private,
    find_default_root,
    find_root_ancestors,
    get_all_ancestors,
    get_all_descendants,
    get_person_relationships,
    get_tree_visible_individuals,
    is_displayable,
    tree_stats,
)
from gedcom_lineage.layout import (
    HighlightState,
    LayoutResult,
    LayoutSettings,
    build_tree_layout,
    build_tree_view,
    layout_tree,
)
from gedcom_lineage.names import (
    DEFAULT_NASAB_DEPTH,
    get_display_name,
    get_display_name_with_nasab,
)
from gedcom_lineage.parser_core import parse_gedcom
from gedcom_lineage.registry import Family, GedcomData, Individual, RootAncestor
from gedcom_lineage.utils.search import matches_search, search_individuals

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_NASAB_DEPTH",
    "Family",
    "GedcomData",
    "HighlightState",
    "Individual",
    "LayoutResult",
    "LayoutSettings",
    "PersonRelationships",
    "RootAncestor",
    "build_children_graph",
    "build_root_candidates",
    "build_tree_layout",
    "build_tree_view",
    "calculate_descendant_counts",
    "filter_out_private",
    "find_default_root",
    "find_root_ancestors",
    "get_all_ancestors",
    "get_all_descendants",
    "get_display_name",
    "get_display_name_with_nasab",
    "get_person_relationships",
    "get_tree_visible_individuals",
    "is_displayable",
    "layout_tree",
    "matches_search",
    "parse_gedcom",
    "search_individuals",
    "tree_stats",
]
