from .engine import (
    LayoutEdge,
    LayoutNode,
    LayoutResult,
    LayoutSettings,
    Position,
    layout_tree,
    own_width,
    primary_children,
)
from .tree_view import (
    SPOUSE_EDGE_COLORS,
    HighlightState,
    SpouseSlot,
    TreeEdge,
    TreeNode,
    TreeView,
    build_tree_layout,
    build_tree_view,
    ordered_children,
    visible_spouses,
)

__all__ = [
    "SPOUSE_EDGE_COLORS",
    "HighlightState",
    "LayoutEdge",
    "LayoutNode",
    "LayoutResult",
    "LayoutSettings",
    "Position",
    "SpouseSlot",
    "TreeEdge",
    "TreeNode",
    "TreeView",
    "build_tree_layout",
    "build_tree_view",
    "layout_tree",
    "ordered_children",
    "own_width",
    "primary_children",
    "visible_spouses",
]
