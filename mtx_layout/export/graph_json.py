"""Graph JSON view of a TripleStore.

Produces the document consumed by graph challenge tooling::

    {"nodes": [{"id": 0}, ...], "edges": [{"source": r, "target": c}, ...]}

One node per declared nonzero, one edge per stored entry in store order.
"""

import json
import logging
from typing import Any, Dict, TextIO

from mtx_layout.core.triples import TripleStore

logger = logging.getLogger(__name__)


def to_graph_dict(store: TripleStore) -> Dict[str, Any]:
    """Build the nodes/edges mapping for store."""
    return {
        "nodes": [{"id": i} for i in range(store.nonzero_count)],
        "edges": [{"source": e.row, "target": e.col} for e in store.entries],
    }


def write_graph_json(store: TripleStore, stream: TextIO) -> None:
    """Serialize the graph view of store to stream, newline terminated."""
    logger.info("Writing json: %d nodes, %d edges", store.nonzero_count, store.entry_count)
    json.dump(to_graph_dict(store), stream)
    stream.write("\n")
