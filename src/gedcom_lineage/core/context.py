from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class TreeContext:
    """
    Shared pipeline context.
    Carries the request keys (root, depth, privacy) and collects the
    host-visible outcome: stats and error messages.
    """

    config: Any
    logger: Any

    input_path: Optional[str] = None
    forced_root_id: Optional[str] = None
    max_depth: Optional[int] = None
    exclude_private: bool = False
    highlight_id: Optional[str] = None

    stats: Dict[str, Any] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    debug: bool = False

    @property
    def failed(self) -> bool:
        return bool(self.errors)
