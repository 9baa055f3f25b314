"""
json_exporter.py
JSON export of parsed records and computed tree views.

- dataclasses -> dict (recursively)
- mappings (including read-only proxies) -> dict
- tuples/lists -> list, sets -> sorted list (stable output)
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from gedcom_lineage.layout.engine import LayoutResult
from gedcom_lineage.layout.tree_view import TreeView
from gedcom_lineage.logging import get_logger
from gedcom_lineage.registry.entities import GedcomData, Individual

log = get_logger("json_exporter")


def to_json_compatible(obj: Any) -> Any:
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj

    if is_dataclass(obj) and not isinstance(obj, type):
        return {k: to_json_compatible(v) for k, v in asdict(obj).items()}

    if isinstance(obj, Mapping):
        return {str(k): to_json_compatible(v) for k, v in obj.items()}

    if isinstance(obj, (set, frozenset)):
        return sorted(to_json_compatible(v) for v in obj)

    if isinstance(obj, (list, tuple)):
        return [to_json_compatible(v) for v in obj]

    # Last resort
    return str(obj)


def build_export_dict(
    data: GedcomData,
    *,
    default_root: Optional[Individual] = None,
    visible: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """Records plus the root/visibility views computed for them."""
    out: Dict[str, Any] = {
        "counts": {
            "individuals": len(data.individuals),
            "families": len(data.families),
        },
        "individuals": to_json_compatible(data.individuals),
        "families": to_json_compatible(data.families),
        "default_root": default_root.id if default_root else None,
    }
    if visible is not None:
        out["visible"] = sorted(visible)
    return out


def layout_to_dict(view: TreeView, layout: LayoutResult) -> Dict[str, Any]:
    nodes = []
    for node in view.nodes:
        pos = layout.positions[node.id]
        nodes.append(
            {
                "id": node.id,
                "depth": node.depth,
                "is_root": node.is_root,
                "x": pos.x,
                "y": pos.y,
                "width": layout.widths[node.id],
                "highlight": node.highlight,
                "spouses": to_json_compatible(node.spouses),
            }
        )

    edges = [{"id": edge.id, **to_json_compatible(edge)} for edge in view.edges]
    return {"root": view.root_id, "nodes": nodes, "edges": edges}


def dumps(payload: Any, *, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(payload, indent=2, ensure_ascii=False)
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def write_json(payload: Any, *, out: Optional[Path] = None, pretty: bool = False) -> None:
    """
    Write JSON to a file, or to stdout when ``out`` is None.
    """
    text = dumps(payload, pretty=pretty)

    if out is None:
        print(text)
        return

    out = Path(out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    log.info("JSON written to %s (%d bytes)", out, out.stat().st_size)
