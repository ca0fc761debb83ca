from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# ---------------------------------------------------------------------
# Graph engine policy
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls how edge weights are reported and how a graph is written
    out by the serializer.
    """

    default_edge_weight: float = 1.0
    serialize_default_weights: bool = False
    json_indent: Optional[int] = None
