""" Traversal of a compact graph.

Each traversal is an iterator object which keeps its own worklist and
visited markers. Iterators are one-shot: once exhausted they stay exhausted.

- PreOrder: depth first, a vertex before its descendants.
  See: https://en.wikipedia.org/wiki/Depth-first_search
- LevelOrder: breadth first.
  See: https://en.wikipedia.org/wiki/Breadth-first_search
- PostOrder: depth first, a vertex after all its descendants.

Neighbors are visited in adjacency chain order, which is the reverse of
edge insertion order.
"""

from collections import deque


class Traversal:
    """ Base for the graph walkers """
    def __init__(self, graph, start):
        graph.check_vertex(start)
        self.graph = graph
        self.start = start
        self._visited = [False] * graph.vertex_count()
        self._visited[start] = True

    def __iter__(self):
        return self

    def __next__(self):  # pragma: no cover
        raise NotImplementedError()


class PreOrder(Traversal):
    """ Produce (vertex, edge) pairs in depth first pre-order.

    The edge is the one through which the vertex was first reached, the
    start vertex is produced as (start, None).
    """
    def __init__(self, graph, start):
        super().__init__(graph, start)
        self._cursors = [None] * graph.vertex_count()
        self._cursors[start] = graph.neighbors(start)
        self._stack = [start]
        self._pending = (start, None)

    def __next__(self):
        if self._pending:
            pair, self._pending = self._pending, None
            return pair

        while self._stack:
            vertex = self._stack[-1]
            for neighbor, edge in self._cursors[vertex]:
                if not self._visited[neighbor]:
                    self._visited[neighbor] = True
                    self._cursors[neighbor] = self.graph.neighbors(neighbor)
                    self._stack.append(neighbor)
                    return neighbor, edge

            # All neighbors done:
            self._stack.pop()
            self._cursors[vertex] = None
        raise StopIteration


class PostOrder(Traversal):
    """ Produce vertices in depth first post-order.

    A vertex is produced once all of its neighbors have been explored,
    so the start vertex comes last.
    """
    def __init__(self, graph, start):
        super().__init__(graph, start)
        self._cursors = [None] * graph.vertex_count()
        self._cursors[start] = graph.neighbors(start)
        self._stack = [start]

    def __next__(self):
        while self._stack:
            vertex = self._stack[-1]
            for neighbor, _ in self._cursors[vertex]:
                if not self._visited[neighbor]:
                    self._visited[neighbor] = True
                    self._cursors[neighbor] = self.graph.neighbors(neighbor)
                    self._stack.append(neighbor)
                    break
            else:
                # Tail of the path:
                self._stack.pop()
                self._cursors[vertex] = None
                return vertex
        raise StopIteration


class LevelOrder(Traversal):
    """ Produce (vertex, edge) pairs in breadth first order.

    The start vertex is produced as (start, None).
    """
    def __init__(self, graph, start):
        super().__init__(graph, start)
        self._queue = deque([start])
        self._cursor = None
        self._pending = (start, None)

    def __next__(self):
        if self._pending:
            pair, self._pending = self._pending, None
            return pair

        while True:
            if self._cursor is not None:
                for neighbor, edge in self._cursor:
                    if not self._visited[neighbor]:
                        self._visited[neighbor] = True
                        self._queue.append(neighbor)
                        return neighbor, edge

            if not self._queue:
                self._cursor = None
                raise StopIteration

            self._cursor = self.graph.neighbors(self._queue.popleft())


def pre_order(graph, start):
    """ List vertices reachable from start in pre-order """
    return [vertex for vertex, _ in PreOrder(graph, start)]


def post_order(graph, start):
    """ List vertices reachable from start in post-order """
    return list(PostOrder(graph, start))


def level_order(graph, start):
    """ List vertices reachable from start in breadth first order """
    return [vertex for vertex, _ in LevelOrder(graph, start)]
