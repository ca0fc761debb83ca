from __future__ import annotations

from typing import Any

import numpy as np


def to_json_safe(value: Any) -> Any:
    """
    Recursively converts numpy arrays and scalars into plain Python values
    so caller-supplied attributes can be written as JSON.
    """
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, dict):
        return {k: to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(v) for v in value]
    return value
