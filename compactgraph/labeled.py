""" Graph with hashable labels for vertices.

The labels are numbered in order of appearance and stored in a compact
Graph. All queries translate labels to vertex ids and back.
"""

from .graph import Graph


class LabeledGraph:
    """ Directed graph over arbitrary hashable labels.

    Labels given in labels are registered first, after that the endpoints
    of the edges in order.
    """
    def __init__(self, edges, labels=()):
        edges = list(edges)
        self._labels = []
        self._vertex_map = {}
        for label in labels:
            self._register(label)
        for source, destination in edges:
            self._register(source)
            self._register(destination)

        self.graph = Graph(len(self._labels), len(edges))
        for source, destination in edges:
            self.graph.add_edge(
                self._vertex_map[source], self._vertex_map[destination])

    def _register(self, label):
        if label not in self._vertex_map:
            self._vertex_map[label] = len(self._labels)
            self._labels.append(label)

    def __len__(self):
        return len(self._labels)

    def __iter__(self):
        return iter(self._labels)

    def __contains__(self, label):
        return label in self._vertex_map

    def __repr__(self):
        return 'LabeledGraph(vertices={}, edges={})'.format(
            len(self), self.graph.edge_count())

    def vertex_id(self, label):
        """ Get the vertex id of a label """
        return self._vertex_map[label]

    def label(self, vertex):
        """ Get the label of a vertex id """
        self.graph.check_vertex(vertex)
        return self._labels[vertex]

    def neighbors(self, label):
        """ Get the labels which label has edges to """
        return [
            self._labels[v]
            for v, _ in self.graph.neighbors(self.vertex_id(label))]

    def pre_order(self, start):
        walker = self.graph.pre_order(self.vertex_id(start))
        return (self._labels[vertex] for vertex, _ in walker)

    def post_order(self, start):
        walker = self.graph.post_order(self.vertex_id(start))
        return (self._labels[vertex] for vertex in walker)

    def level_order(self, start):
        walker = self.graph.level_order(self.vertex_id(start))
        return (self._labels[vertex] for vertex, _ in walker)

    def is_dag(self):
        return self.graph.is_dag()

    def dominators(self, start):
        """ Map every label reachable from start to its immediate dominator """
        idom = self.graph.dominators(self.vertex_id(start))
        return {
            self._labels[vertex]: self._labels[dominator]
            for vertex, dominator in idom.items()}
