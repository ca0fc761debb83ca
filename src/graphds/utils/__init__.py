"""
Utility functions for graphds.

Low-level helpers only. No graph logic should live here.
"""

from graphds.utils.json_safe import to_json_safe

__all__ = [
    "to_json_safe",
]
