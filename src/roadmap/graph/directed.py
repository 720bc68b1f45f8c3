"""DirectedGraph — vertex registry plus a square adjacency matrix.

Vertices are arbitrary values compared by equality. Each registered vertex
owns a *position* (its insertion order, compacted on removal) which indexes
both a row and a column of the matrix. Cell ``(out, in)`` holds the arc from
the out-vertex to the in-vertex, or ``None`` when there is no arc.

Structural invariants, restored before every public method returns:

- the matrix has exactly one row per vertex and every row has one cell
  per vertex;
- a position exists iff its vertex is registered, and no vertex is
  registered twice;
- removing a vertex drops its row and column, so every arc touching it
  disappears and later positions shift down by one.

Reads are forgiving: an unknown vertex reads as "no arc", never an error.
The graph is not thread-safe; callers sharing an instance must serialize
access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from itertools import chain
from typing import TYPE_CHECKING, Any, Self

if TYPE_CHECKING:
    from roadmap.config.models import GraphConfig

logger = logging.getLogger(__name__)


class VertexNotFoundError(LookupError):
    """Raised by strict-mode writes that name an unregistered vertex."""

    def __init__(self, vertex: Any) -> None:
        super().__init__(f"Vertex not registered: {vertex!r}")
        self.vertex = vertex


class DirectedGraph[V, A]:
    """A mutable directed graph over equality-compared vertices.

    Construction forms::

        DirectedGraph()                          # empty
        DirectedGraph([a, b, c])                 # vertices, no arcs
        DirectedGraph([a, b], [b, c], [x, y])    # arcs a->b = x, b->c = y

    The three-sequence form zips output vertices, input vertices and arcs
    positionally; the shortest sequence bounds the zip.

    Args:
        vertices: Initial vertices, or the output vertices when
            *input_vertices* and *arcs* are also given.
        input_vertices: Input endpoints, paired with *vertices* by index.
        arcs: Arc payloads, paired by index. ``None`` entries register
            the endpoints without setting an arc.
        auto_register: When True (the default), :meth:`set` registers
            missing endpoints. When False, :meth:`set` raises
            :class:`VertexNotFoundError` instead.
    """

    def __init__(
        self,
        vertices: Iterable[V] = (),
        input_vertices: Iterable[V] | None = None,
        arcs: Iterable[A | None] | None = None,
        *,
        auto_register: bool = True,
    ) -> None:
        self._vertices: list[V] = []
        self._index: dict[V, int] = {}
        self._unhashable = 0
        self._rows: list[list[A | None]] = []
        self._auto_register = auto_register

        if input_vertices is None and arcs is None:
            self.add_vertices(vertices)
        elif input_vertices is None or arcs is None:
            raise TypeError("input_vertices and arcs must be given together")
        else:
            # Seeding always registers endpoints, even in strict mode.
            self._auto_register = True
            try:
                self.set_arcs(vertices, input_vertices, arcs)
            finally:
                self._auto_register = auto_register

    @classmethod
    def from_arcs(
        cls,
        output_vertices: Iterable[V],
        input_vertices: Iterable[V],
        arcs: Iterable[A | None],
        *,
        auto_register: bool = True,
    ) -> Self:
        """Build a graph from parallel endpoint and arc sequences."""
        return cls(output_vertices, input_vertices, arcs, auto_register=auto_register)

    @classmethod
    def from_config(cls, config: GraphConfig, vertices: Iterable[V] = ()) -> Self:
        """Build a graph whose write policy follows *config*."""
        return cls(vertices, auto_register=config.auto_register)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def vertices(self) -> tuple[V, ...]:
        """Registered vertices in position order."""
        return tuple(self._vertices)

    @property
    def arcs(self) -> list[A]:
        """Every present arc, row by row."""
        return [arc for arc in chain.from_iterable(self._rows) if arc is not None]

    @property
    def auto_register(self) -> bool:
        return self._auto_register

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[V]:
        return iter(tuple(self._vertices))

    def __contains__(self, vertex: object) -> bool:
        return self._position(vertex) is not None

    def __getitem__(self, key: tuple[V, V]) -> A | None:
        output_vertex, input_vertex = key
        return self.get(output_vertex, input_vertex)

    def __setitem__(self, key: tuple[V, V], arc: A | None) -> None:
        output_vertex, input_vertex = key
        self.set(output_vertex, input_vertex, arc)

    def __delitem__(self, key: tuple[V, V]) -> None:
        output_vertex, input_vertex = key
        self.unset(output_vertex, input_vertex)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self._vertices)}, arcs={len(self.arcs)})"

    # ------------------------------------------------------------------
    # Position lookup
    # ------------------------------------------------------------------

    def _position(self, vertex: object) -> int | None:
        try:
            position = self._index.get(vertex)  # type: ignore[call-overload]
        except TypeError:
            # An unhashable query may still equal a hashable registered vertex.
            return self._scan(vertex)
        if position is not None or not self._unhashable:
            return position
        # Unhashable vertices live only in the registry list.
        return self._scan(vertex)

    def _scan(self, vertex: object) -> int | None:
        for pos, known in enumerate(self._vertices):
            if known == vertex:
                return pos
        return None

    def _reindex(self, start: int) -> None:
        for pos in range(start, len(self._vertices)):
            try:
                self._index[self._vertices[pos]] = pos
            except TypeError:
                continue

    # ------------------------------------------------------------------
    # Vertex operations
    # ------------------------------------------------------------------

    def contains(self, vertex: V) -> bool:
        """Whether *vertex* is registered."""
        return vertex in self

    def add_vertex(self, vertex: V) -> None:
        """Register *vertex* with an empty row and column. No-op if present."""
        if self._position(vertex) is not None:
            return
        position = len(self._vertices)
        for row in self._rows:
            row.append(None)
        self._rows.append([None] * (position + 1))
        self._vertices.append(vertex)
        try:
            self._index[vertex] = position
        except TypeError:
            self._unhashable += 1
        logger.debug("Added vertex at position %d", position)

    def add_vertices(self, vertices: Iterable[V]) -> None:
        for vertex in vertices:
            self.add_vertex(vertex)

    def remove_vertex(self, vertex: V) -> None:
        """Unregister *vertex*, dropping every arc that touches it.

        Later vertices shift down one position. No-op if absent.
        """
        position = self._position(vertex)
        if position is None:
            logger.debug("remove_vertex: vertex not registered, nothing to do")
            return
        del self._rows[position]
        for row in self._rows:
            del row[position]
        removed = self._vertices.pop(position)
        try:
            del self._index[removed]
        except TypeError:
            self._unhashable -= 1
        self._reindex(position)
        logger.debug("Removed vertex at position %d", position)

    def remove_vertices(self, vertices: Iterable[V]) -> None:
        for vertex in vertices:
            self.remove_vertex(vertex)

    def clear(self) -> None:
        """Remove every vertex and arc."""
        self._vertices.clear()
        self._index.clear()
        self._unhashable = 0
        self._rows.clear()
        logger.debug("Cleared graph")

    # ------------------------------------------------------------------
    # Arc operations
    # ------------------------------------------------------------------

    def get(self, output_vertex: V, input_vertex: V) -> A | None:
        """Return the arc from *output_vertex* to *input_vertex*, or None.

        Unregistered endpoints read as "no arc".
        """
        out_pos = self._position(output_vertex)
        in_pos = self._position(input_vertex)
        if out_pos is None or in_pos is None:
            return None
        return self._rows[out_pos][in_pos]

    def get_arcs(self, output_vertices: Iterable[V], input_vertices: Iterable[V]) -> list[A]:
        """Return the arcs for each ``(output, input)`` pair, skipping pairs without one.

        The sequences are zipped; the shorter one bounds the result.
        """
        arcs: list[A] = []
        for output_vertex, input_vertex in zip(output_vertices, input_vertices):
            arc = self.get(output_vertex, input_vertex)
            if arc is not None:
                arcs.append(arc)
        return arcs

    def get_all_output_arcs(self, vertex: V) -> list[A] | None:
        """Return every arc leaving *vertex*, by destination position.

        Returns None when *vertex* is not registered, which is distinct
        from the empty list of a registered vertex with no outgoing arcs.
        """
        position = self._position(vertex)
        if position is None:
            return None
        return [arc for arc in self._rows[position] if arc is not None]

    def contains_arc(self, output_vertex: V, input_vertex: V) -> bool:
        return self.get(output_vertex, input_vertex) is not None

    def set(self, output_vertex: V, input_vertex: V, arc: A | None) -> None:
        """Store *arc* from *output_vertex* to *input_vertex*.

        Missing endpoints are registered first, as a deliberate side
        effect of the write. Passing ``None`` clears the cell but still
        registers the endpoints. With ``auto_register=False`` an
        unregistered endpoint raises :class:`VertexNotFoundError` and the
        graph is left untouched; clearing an arc between unregistered
        vertices is then a no-op.
        """
        if not self._auto_register:
            for vertex in (output_vertex, input_vertex):
                if self._position(vertex) is None:
                    if arc is None:
                        return
                    raise VertexNotFoundError(vertex)
        self.add_vertex(output_vertex)
        self.add_vertex(input_vertex)
        out_pos = self._position(output_vertex)
        in_pos = self._position(input_vertex)
        assert out_pos is not None and in_pos is not None
        self._rows[out_pos][in_pos] = arc

    def set_arcs(
        self,
        output_vertices: Iterable[V],
        input_vertices: Iterable[V],
        arcs: Iterable[A | None],
    ) -> None:
        """Apply :meth:`set` to each zipped ``(output, input, arc)`` triple, in order.

        The shortest sequence bounds the zip. Later triples overwrite
        earlier ones targeting the same pair. In strict mode a failing
        triple raises after the preceding triples have been applied.
        """
        for output_vertex, input_vertex, arc in zip(output_vertices, input_vertices, arcs):
            self.set(output_vertex, input_vertex, arc)

    def unset(self, output_vertex: V, input_vertex: V) -> None:
        """Clear the arc between two vertices without registering either."""
        out_pos = self._position(output_vertex)
        in_pos = self._position(input_vertex)
        if out_pos is None or in_pos is None:
            return
        self._rows[out_pos][in_pos] = None

    def clear_arcs_of(self, vertex: V) -> None:
        """Drop every arc entering or leaving *vertex*, keeping the vertex.

        No-op if *vertex* is not registered.
        """
        position = self._position(vertex)
        if position is None:
            logger.debug("clear_arcs_of: vertex not registered, nothing to do")
            return
        row = self._rows[position]
        for col in range(len(row)):
            row[col] = None
        for other in self._rows:
            other[position] = None
