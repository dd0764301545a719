"""Tests for the graph JSON view."""

import io
import json

from mtx_layout.export import to_graph_dict, write_graph_json


def test_reference_example(general_store):
    graph = to_graph_dict(general_store)

    assert graph["nodes"] == [{"id": 0}, {"id": 1}, {"id": 2}]
    assert graph["edges"] == [
        {"source": 0, "target": 0},
        {"source": 1, "target": 0},
        {"source": 0, "target": 1},
    ]


def test_symmetric_edges_include_mirrors(symmetric_store):
    graph = to_graph_dict(symmetric_store)

    # One node per declared nonzero, one edge per stored entry
    assert len(graph["nodes"]) == 2
    assert graph["edges"][-1] == {"source": 0, "target": 1}
    assert len(graph["edges"]) == 3


def test_write_graph_json(general_store):
    stream = io.StringIO()
    write_graph_json(general_store, stream)

    text = stream.getvalue()
    assert text.endswith("\n")
    assert json.loads(text) == to_graph_dict(general_store)
