""" Cycle checks and topological ordering.

"""

import logging
from .common import CycleError


logger = logging.getLogger('cycle')


def is_dag(graph):
    """ Test whether the graph is a directed acyclic graph.

    Every vertex not yet seen starts a depth first walk. Hitting a vertex
    that was already visited, in this walk or an earlier one, counts as a
    cycle. Graphs where two paths converge on the same vertex are reported
    as cyclic too, use topological_order for an exact answer.
    """
    visited = [False] * graph.vertex_count()
    worklist = []
    for vertex in range(graph.vertex_count()):
        if visited[vertex]:
            continue
        worklist.append(vertex)
        while worklist:
            node = worklist.pop()
            if visited[node]:
                logger.debug('vertex %s visited twice', node)
                return False
            visited[node] = True
            for neighbor, _ in graph.neighbors(node):
                worklist.append(neighbor)
    return True


def topological_order(graph):
    """ Sort vertices topologically, using Kahn's algorithm.

    See: https://en.wikipedia.org/wiki/Topological_sorting

    Time complexity: O(|V| + |E|)
    """
    in_degree = [0] * graph.vertex_count()
    for _, destination, _ in graph.edges():
        in_degree[destination] += 1

    # Vertices without incoming edges, lowest vertex on top:
    worklist = [
        vertex for vertex in reversed(range(graph.vertex_count()))
        if in_degree[vertex] == 0]

    ordering = []
    while worklist:
        vertex = worklist.pop()
        ordering.append(vertex)
        for neighbor, _ in graph.neighbors(vertex):
            in_degree[neighbor] -= 1
            if in_degree[neighbor] == 0:
                worklist.append(neighbor)

    if len(ordering) != graph.vertex_count():
        raise CycleError(
            'Graph has cycles, {} vertices could not be ordered'.format(
                graph.vertex_count() - len(ordering)))
    return ordering
