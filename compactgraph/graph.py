""" Compact directed graph.

Vertices are dense integers in the range [0, vertex_count). Edges are
numbered in order of insertion. The outgoing edges of a vertex form a chain
of edge ids stored in flat lists:

- first: maps a vertex to the most recently added edge leaving it.
- next_edge: maps an edge to the previously added edge with the same source.
- end_vertex: maps an edge to the vertex it points to.

Edges cannot be deleted, so insertion is O(1) and the adjacency of a vertex
is enumerated in reverse insertion order.
"""

import logging
from .common import VertexIndexError
from . import traversal, cycle, dominance
from .domtree import DominatorTree


logger = logging.getLogger('graph')


class Graph:
    """ Directed multigraph over integer vertices.

    The edge_count_hint is the expected number of edges. Lists grow on
    demand, so it does not limit the number of edges.

    Space: O(|V| + |E|)
    """
    def __init__(self, vertex_count, edge_count_hint=0):
        if vertex_count < 0:
            raise ValueError(
                'Vertex count must not be negative, got {}'.format(
                    vertex_count))
        self._first = [None] * vertex_count
        self._next_edge = []
        self._end_vertex = []

    @classmethod
    def from_edges(cls, edges):
        """ Create a graph from a list of (source, destination) pairs.

        The number of vertices is one more than the highest vertex seen.
        """
        edges = list(edges)
        vmax = max((max(u, v) for u, v in edges), default=-1)
        graph = cls(vmax + 1, len(edges))
        for source, destination in edges:
            graph.add_edge(source, destination)
        return graph

    def __len__(self):
        return len(self._first)

    def __repr__(self):
        return 'Graph(vertices={}, edges={})'.format(
            self.vertex_count(), self.edge_count())

    def vertex_count(self):
        """ Get the number of vertices """
        return len(self._first)

    def edge_count(self):
        """ Get the number of edges """
        return len(self._end_vertex)

    def is_empty(self):
        """ Test if the graph has no vertices """
        return not self._first

    def check_vertex(self, vertex):
        """ Raise VertexIndexError when vertex is not in this graph """
        if not 0 <= vertex < len(self._first):
            raise VertexIndexError(vertex, len(self._first))

    def add_edge(self, source, destination):
        """ Add a directed edge from source to destination.

        Returns the id of the new edge.
        """
        self.check_vertex(source)
        self.check_vertex(destination)
        edge = len(self._end_vertex)
        self._next_edge.append(self._first[source])
        self._first[source] = edge
        self._end_vertex.append(destination)
        return edge

    def destination(self, edge):
        """ Get the vertex an edge points to """
        return self._end_vertex[edge]

    def neighbors(self, vertex):
        """ Get (destination, edge) pairs leaving vertex, newest first """
        self.check_vertex(vertex)
        return NeighborIterator(self, self._first[vertex])

    def edges(self):
        """ Iterate over all (source, destination, edge) triples """
        for source, first in enumerate(self._first):
            if first is not None:
                for destination, edge in NeighborIterator(self, first):
                    yield source, destination, edge

    def transpose(self):
        """ Create a new graph with all edges reversed.

        See: https://en.wikipedia.org/wiki/Transpose_graph

        Time complexity: O(|V| + |E|)
        """
        graph = Graph(self.vertex_count(), self.edge_count())
        # Walk sources from high to low, so that the chain of a vertex in
        # the transpose lists its predecessors in increasing order:
        for source in reversed(range(self.vertex_count())):
            for destination, _ in self.neighbors(source):
                graph.add_edge(destination, source)
        logger.debug('transposed %r', self)
        return graph

    def pre_order(self, start):
        return traversal.PreOrder(self, start)

    def post_order(self, start):
        return traversal.PostOrder(self, start)

    def level_order(self, start):
        return traversal.LevelOrder(self, start)

    def is_dag(self):
        return cycle.is_dag(self)

    def topological_order(self):
        return cycle.topological_order(self)

    def dominators(self, start):
        return dominance.dominators(self, start)

    def post_dominators(self, exit_vertex):
        return dominance.post_dominators(self, exit_vertex)

    def dominator_tree(self, start):
        """ Calculate the dominator tree rooted at start """
        return DominatorTree(dominance.dominators(self, start), start)


class NeighborIterator:
    """ Cursor over the adjacency chain of a single vertex.

    Iterating a partially consumed cursor resumes where it stopped.
    """
    __slots__ = ('graph', 'next_edge')

    def __init__(self, graph, next_edge):
        self.graph = graph
        self.next_edge = next_edge

    def __iter__(self):
        return self

    def __next__(self):
        edge = self.next_edge
        if edge is None:
            raise StopIteration
        self.next_edge = self.graph._next_edge[edge]
        return self.graph._end_vertex[edge], edge
