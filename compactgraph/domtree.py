""" Dominator tree.

Built from the immediate dominators, allows queries such as:

- Dominates
- Strictly dominates
- Children in the tree
- Dominance frontier
"""


class DominatorTree:
    """ Tree of vertices, each vertex hangs below its immediate dominator """
    def __init__(self, idom, root):
        assert idom[root] == root
        self.root = root
        self._idom = dict(idom)
        self._children = {vertex: [] for vertex in self._idom}
        for vertex, dominator in self._idom.items():
            if vertex != root:
                self._children[dominator].append(vertex)

    def __repr__(self):
        return 'DominatorTree(root={}, size={})'.format(self.root, len(self))

    def __len__(self):
        return len(self._idom)

    def __contains__(self, vertex):
        return vertex in self._idom

    def __iter__(self):
        return iter(self._idom)

    def immediate_dominator(self, vertex):
        """ Retrieve a vertex its immediate dominator, None for the root """
        dominator = self._idom[vertex]
        return None if vertex == self.root else dominator

    def children(self, vertex):
        """ Return the vertices immediately dominated by vertex """
        return list(self._children[vertex])

    def dominates(self, one, other):
        """ Test whether a vertex dominates another vertex """
        if one not in self._idom:
            raise KeyError(one)
        while other != one:
            if other == self.root:
                return False
            other = self._idom[other]
        return True

    def strictly_dominates(self, one, other):
        """ Test whether a vertex strictly dominates another vertex """
        return one != other and self.dominates(one, other)

    def pre_order(self):
        """ Generator that yields vertices top down """
        worklist = [self.root]
        while worklist:
            vertex = worklist.pop()
            yield vertex
            worklist.extend(reversed(self._children[vertex]))

    def bottom_up(self):
        """ Generator that yields vertices, children before parents """
        worklist = [self.root]
        visited = set()
        while worklist:
            vertex = worklist[-1]
            if vertex in visited:
                worklist.pop()
                yield vertex
            else:
                visited.add(vertex)
                worklist.extend(self._children[vertex])

    def dominance_frontier(self, graph):
        """ Calculate the dominance frontier of every vertex in the tree.

        Algorithm from Ron Cytron et al. which uses the dominator tree
        to visit children before their parents.
        """
        df = {}
        for x in self.bottom_up():
            df[x] = set()

            # Local rule:
            for y, _ in graph.neighbors(x):
                if self.immediate_dominator(y) != x:
                    df[x].add(y)

            # Upwards rule:
            for z in self._children[x]:
                for y in df[z]:
                    if self.immediate_dominator(y) != x:
                        df[x].add(y)
        return df
