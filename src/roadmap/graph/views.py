"""NetworkX views of a DirectedGraph.

The core container deliberately ships no traversal algorithms. Callers that
need them take a snapshot here and run NetworkX on it. The snapshot is
detached: later mutations of either graph do not affect the other.
"""

from __future__ import annotations

from typing import Any

import networkx as nx

from roadmap.graph.directed import DirectedGraph

type _Graph = nx.DiGraph


def to_digraph(graph: DirectedGraph[Any, Any]) -> _Graph:
    """Snapshot *graph* as a NetworkX DiGraph.

    Each vertex becomes a node carrying its ``position``. Each arc becomes an
    edge carrying the payload under ``arc`` and, when the payload has a
    ``type`` attribute, its value under ``arc_type``. Vertices must be
    hashable; NetworkX raises ``TypeError`` otherwise.
    """
    g: _Graph = nx.DiGraph()
    vertices = graph.vertices
    # Add all nodes first so isolated vertices survive the snapshot.
    for position, vertex in enumerate(vertices):
        g.add_node(vertex, position=position)

    for output_vertex in vertices:
        for input_vertex in vertices:
            arc = graph.get(output_vertex, input_vertex)
            if arc is None:
                continue
            arc_type = getattr(arc, "type", None)
            g.add_edge(
                output_vertex,
                input_vertex,
                arc=arc,
                arc_type=str(arc_type) if arc_type is not None else None,
            )
    return g
