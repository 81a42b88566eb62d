""" Dominators in graphs.

A vertex d dominates a vertex n when every path from the start vertex to n
passes through d. The immediate dominator of n is the dominator closest to
n, which forms a tree rooted at the start vertex.

The immediate dominators are calculated with the iterative algorithm of
Cooper, Harvey and Kennedy:

"A Simple, Fast Dominance Algorithm"
https://www.cs.rice.edu/~keith/EMBED/dom.pdf
"""

import logging
from .traversal import PostOrder


logger = logging.getLogger('dominance')


def reverse_post_order(graph, start):
    """ Calculate the reverse post-order of vertices reachable from start """
    ordering = list(PostOrder(graph, start))
    ordering.reverse()
    return ordering


def common_dominator(node_a, node_b, idom, order):
    """ Find the nearest common dominator of two vertices.

    Walks up the (partial) dominator tree in idom, where order maps a
    vertex to its position in the reverse post-order.
    """
    while node_a != node_b:
        # Positions are in reverse post-order, so the vertex with the
        # highest position is deepest and moves up:
        while order[node_a] > order[node_b]:
            node_a = idom[node_a]
            assert node_a is not None, 'Dominator chain broken'
        while order[node_b] > order[node_a]:
            node_b = idom[node_b]
            assert node_b is not None, 'Dominator chain broken'
    return node_a


def dominators(graph, start):
    """ Calculate the immediate dominator of every vertex reachable from start.

    Returns a dictionary mapping each reachable vertex to its immediate
    dominator. The start vertex maps to itself. Unreachable vertices are not
    present.
    """
    rpo = reverse_post_order(graph, start)
    transpose = graph.transpose()
    logger.debug(
        'Computing dominators of %s reachable vertices from %s',
        len(rpo), start)

    order = [None] * graph.vertex_count()
    for position, vertex in enumerate(rpo):
        order[vertex] = position

    idom = [None] * graph.vertex_count()
    idom[start] = start

    passes = 0
    change = True
    while change:
        change = False
        passes += 1
        for vertex in rpo:
            if vertex == start:
                continue

            # Only predecessors which were already processed count:
            predecessors = [
                p for p, _ in transpose.neighbors(vertex)
                if idom[p] is not None]

            # A reverse post-order always processes some predecessor first:
            assert predecessors, 'No processed predecessor'
            new_idom = predecessors[0]
            for predecessor in predecessors[1:]:
                new_idom = common_dominator(
                    predecessor, new_idom, idom, order)

            if idom[vertex] != new_idom:
                idom[vertex] = new_idom
                change = True

    logger.debug('Dominators stable after %s passes', passes)
    return {vertex: idom[vertex] for vertex in rpo}


def post_dominators(graph, exit_vertex):
    """ Calculate immediate post dominators.

    Post domination is the same as domination, but then starting at
    the exit vertex and following edges backwards.
    """
    return dominators(graph.transpose(), exit_vertex)
