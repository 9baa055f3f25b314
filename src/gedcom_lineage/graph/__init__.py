from .closures import (
    build_children_graph,
    filter_out_private,
    get_all_ancestors,
    get_all_descendants,
    get_tree_visible_individuals,
    is_displayable,
)
from .relationships import PersonRelationships, get_person_relationships
from .roots import (
    RootFilterStrategy,
    build_root_candidates,
    calculate_descendant_counts,
    filter_candidates,
    find_default_root,
    find_root_ancestors,
    resolve_initial_root,
    root_label,
)
from .stats import TreeStats, tree_stats

__all__ = [
    "PersonRelationships",
    "RootFilterStrategy",
    "TreeStats",
    "build_children_graph",
    "build_root_candidates",
    "calculate_descendant_counts",
    "filter_candidates",
    "filter_out_private",
    "find_default_root",
    "find_root_ancestors",
    "get_all_ancestors",
    "get_all_descendants",
    "get_person_relationships",
    "get_tree_visible_individuals",
    "is_displayable",
    "resolve_initial_root",
    "root_label",
    "tree_stats",
]
