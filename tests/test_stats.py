# tests/test_stats.py

from __future__ import annotations

from gedcom_lineage.graph.stats import TreeStats, tree_stats


def test_stats_all(family_data):
    assert tree_stats(family_data) == TreeStats(individuals=11, families=4)


def test_stats_descendants_of_root(family_data):
    stats = tree_stats(family_data, "descendants", "@I1@")
    # Omar plus five descendants; F1, F2 and F3 have a parent in scope
    assert stats == TreeStats(individuals=6, families=3)


def test_stats_descendants_without_root_counts_everything(family_data):
    assert tree_stats(family_data, "descendants", None) == TreeStats(11, 4)
