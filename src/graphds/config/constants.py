DEFAULTS = {
    # Weight reported by edges that never had one set explicitly
    "DEFAULT_EDGE_WEIGHT": 1.0,
    # Write the default weight on every serialized link, not only explicit ones
    "SERIALIZE_DEFAULT_WEIGHTS": False,
    # Indentation used by Graph.to_json (None = compact)
    "JSON_INDENT": None,
}
