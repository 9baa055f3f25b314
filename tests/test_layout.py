# tests/test_layout.py

from __future__ import annotations

import pytest

from gedcom_lineage.layout.engine import (
    LayoutEdge,
    LayoutNode,
    LayoutSettings,
    layout_tree,
    own_width,
    primary_children,
)

SETTINGS = LayoutSettings()


def test_two_children_are_spaced_by_width_plus_gap() -> None:
    nodes = [LayoutNode("p"), LayoutNode("a"), LayoutNode("b")]
    edges = [LayoutEdge("p", "a"), LayoutEdge("p", "b")]

    result = layout_tree(nodes, edges, SETTINGS)

    a, b, p = (result.center_x(n) for n in ("a", "b", "p"))
    assert b - a == pytest.approx(170)
    assert p == pytest.approx((a + b) / 2)


def test_rows_follow_depth() -> None:
    nodes = [LayoutNode("p"), LayoutNode("a"), LayoutNode("g")]
    edges = [LayoutEdge("p", "a"), LayoutEdge("a", "g")]

    result = layout_tree(nodes, edges, SETTINGS)

    assert result.root_id == "p"
    assert [result.positions[n].y for n in ("p", "a", "g")] == [0, 140, 280]


def test_spouses_widen_only_their_node() -> None:
    nodes = [LayoutNode("p", spouse_count=2), LayoutNode("a"), LayoutNode("b")]
    edges = [LayoutEdge("p", "a"), LayoutEdge("p", "b")]

    result = layout_tree(nodes, edges, SETTINGS)

    assert result.widths == {"p": 460, "a": 140, "b": 140}
    assert result.positions["p"].x == 0
    assert result.center_x("b") - result.center_x("a") == pytest.approx(170)
    assert result.center_x("p") == pytest.approx(230)


def test_sibling_subtrees_do_not_overlap() -> None:
    nodes = [
        LayoutNode("root"),
        LayoutNode("left", spouse_count=3),
        LayoutNode("right"),
        LayoutNode("l1"),
        LayoutNode("l2"),
        LayoutNode("r1"),
    ]
    edges = [
        LayoutEdge("root", "left"),
        LayoutEdge("root", "right"),
        LayoutEdge("left", "l1"),
        LayoutEdge("left", "l2"),
        LayoutEdge("right", "r1"),
    ]

    result = layout_tree(nodes, edges, SETTINGS)

    rows = {}
    for node_id, pos in result.positions.items():
        rows.setdefault(pos.y, []).append((pos.x, pos.x + result.widths[node_id]))
    for spans in rows.values():
        spans.sort()
        for (_, end), (start, _) in zip(spans, spans[1:]):
            assert start >= end + SETTINGS.horizontal_gap


def test_secondary_edges_do_not_move_nodes() -> None:
    nodes = [LayoutNode("p"), LayoutNode("a"), LayoutNode("b"), LayoutNode("c")]
    edges = [
        LayoutEdge("p", "a"),
        LayoutEdge("p", "b"),
        LayoutEdge("a", "c"),
        LayoutEdge("b", "c", primary=False),
    ]

    assert primary_children(nodes, edges) == {"p": ["a", "b"], "a": ["c"]}

    result = layout_tree(nodes, edges, SETTINGS)
    assert result.center_x("c") == pytest.approx(result.center_x("a"))


def test_edges_to_unknown_nodes_are_ignored() -> None:
    nodes = [LayoutNode("p")]
    edges = [LayoutEdge("p", "ghost")]

    assert primary_children(nodes, edges) == {}
    result = layout_tree(nodes, edges, SETTINGS)
    assert result.positions["p"].x == 0
    assert len(result.edges) == 1


def test_empty_layout() -> None:
    result = layout_tree([], [], SETTINGS)
    assert result.positions == {}
    assert result.root_id is None


def test_own_width_and_custom_settings() -> None:
    settings = LayoutSettings(node_width=100, spouse_width=50, horizontal_gap=10, node_height=40, vertical_gap=20)
    assert own_width(LayoutNode("x", spouse_count=2), settings) == 200
    assert settings.row_height == 60

    nodes = [LayoutNode("p"), LayoutNode("a"), LayoutNode("b")]
    edges = [LayoutEdge("p", "a"), LayoutEdge("p", "b")]
    result = layout_tree(nodes, edges, settings)
    assert result.center_x("b") - result.center_x("a") == pytest.approx(110)


def test_settings_from_config_defaults() -> None:
    from gedcom_lineage.config import GLConfig

    assert LayoutSettings.from_config(GLConfig({})) == LayoutSettings()
