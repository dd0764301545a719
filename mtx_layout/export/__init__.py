"""Serializers for views of a TripleStore."""

from mtx_layout.export.graph_json import to_graph_dict, write_graph_json

__all__ = ["to_graph_dict", "write_graph_json"]
