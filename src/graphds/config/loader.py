from __future__ import annotations

import logging

from dynaconf import Dynaconf

from graphds.config.constants import DEFAULTS
from graphds.config.settings import GraphConfig


def load_graph_config(*, load_dotenv: bool = True) -> GraphConfig:
    """
    Build a GraphConfig from ``GRAPHDS_*`` environment variables layered
    over DEFAULTS.

    Environment values are parsed by dynaconf, so ``GRAPHDS_JSON_INDENT=2``
    arrives as an int. The weights flag goes through dynaconf's ``@bool``
    cast, so ``no`` or ``off`` read as False.
    """
    settings = Dynaconf(
        envvar_prefix="GRAPHDS",
        load_dotenv=load_dotenv,
        settings_files=[],
    )

    config = GraphConfig(
        default_edge_weight=float(
            settings.get("DEFAULT_EDGE_WEIGHT", DEFAULTS["DEFAULT_EDGE_WEIGHT"])
        ),
        serialize_default_weights=settings.get(
            "SERIALIZE_DEFAULT_WEIGHTS",
            DEFAULTS["SERIALIZE_DEFAULT_WEIGHTS"],
            cast="@bool",
        ),
        json_indent=settings.get("JSON_INDENT", DEFAULTS["JSON_INDENT"]),
    )

    logging.getLogger("graphds.config").debug("Loaded graph config: %s", config)
    return config
