from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

from gedcom_lineage.core.context import TreeContext
from gedcom_lineage.core.exceptions import PipelineError, SourceLoadError
from gedcom_lineage.graph.closures import get_tree_visible_individuals
from gedcom_lineage.graph.roots import build_root_candidates, resolve_initial_root
from gedcom_lineage.layout.engine import LayoutResult, LayoutSettings
from gedcom_lineage.layout.tree_view import HighlightState, TreeView, build_tree_layout
from gedcom_lineage.loader.file_loader import load_source
from gedcom_lineage.parser_core import parse_gedcom
from gedcom_lineage.registry.entities import GedcomData, Individual, RootAncestor


@dataclass
class TreeSnapshot:
    """Everything computed for one loaded source and one root choice."""
    data: GedcomData
    root: Optional[Individual] = None
    candidates: List[RootAncestor] = field(default_factory=list)
    visible: Set[str] = field(default_factory=set)
    view: Optional[TreeView] = None
    layout: Optional[LayoutResult] = None


class Pipeline:
    """
    Orchestrates load -> parse -> root -> visible set -> layout.
    No business logic lives here.

    A source that cannot be loaded is not raised: the message lands in
    ``ctx.errors`` and ``run`` returns None.
    """

    def __init__(self, context: TreeContext):
        self.ctx = context
        self.log = context.logger

    def load(self) -> Optional[str]:
        try:
            return load_source(self.ctx.input_path)
        except SourceLoadError as exc:
            self.log.error("Source load failed: %s", exc)
            self.ctx.errors.append(str(exc))
            return None

    def run(self, text: Optional[str] = None) -> Optional[TreeSnapshot]:
        self.log.info("Pipeline starting")

        if text is None:
            text = self.load()
            if text is None:
                return None

        try:
            snapshot = self._compute(text)
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineError(str(exc)) from exc

        self.log.info("Pipeline completed successfully")
        return snapshot

    def _compute(self, text: str) -> TreeSnapshot:
        cfg = self.ctx.config
        data = parse_gedcom(text)
        snapshot = TreeSnapshot(
            data=data,
            candidates=build_root_candidates(data, exclude_private=self.ctx.exclude_private),
        )

        snapshot.root = resolve_initial_root(data, self.ctx.forced_root_id)
        if snapshot.root is None:
            self.log.warning("No individuals found; nothing to lay out")
        else:
            root_id = snapshot.root.id
            snapshot.visible = get_tree_visible_individuals(
                data, root_id, exclude_private=self.ctx.exclude_private
            )
            snapshot.view, snapshot.layout = build_tree_layout(
                data,
                root_id,
                max_depth=self.ctx.max_depth,
                highlight=HighlightState.for_person(data, self.ctx.highlight_id),
                settings=LayoutSettings.from_config(cfg),
            )

        self.ctx.stats.update(
            individuals=len(data.individuals),
            families=len(data.families),
            root=snapshot.root.id if snapshot.root else None,
            visible=len(snapshot.visible),
            nodes=len(snapshot.view.nodes) if snapshot.view else 0,
        )
        return snapshot
