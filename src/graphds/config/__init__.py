"""
Configuration layer for graphds.

Configuration is explicit: a GraphConfig is passed to the Graph that uses
it. ``load_graph_config`` is the only place the environment is read.
"""

from graphds.config.settings import GraphConfig
from graphds.config.loader import load_graph_config

__all__ = [
    "GraphConfig",
    "load_graph_config",
]
