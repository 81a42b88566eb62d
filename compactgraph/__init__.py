""" Compact directed graphs and graph algorithms in pure Python.

Example usage:

>>> from compactgraph import Graph
>>> graph = Graph.from_edges([(0, 2), (0, 1), (2, 3), (1, 3)])
>>> [vertex for vertex, edge in graph.pre_order(0)]
[0, 1, 3, 2]
>>> graph.dominators(0)
{0: 0, 2: 0, 1: 0, 3: 0}

"""

# Define version here. Used in the setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))

from .common import GraphError, VertexIndexError, CycleError  # noqa: E402
from .graph import Graph, NeighborIterator  # noqa: E402
from .traversal import PreOrder, PostOrder, LevelOrder  # noqa: E402
from .dominance import dominators, post_dominators  # noqa: E402
from .dominance import reverse_post_order  # noqa: E402
from .domtree import DominatorTree  # noqa: E402
from .cycle import is_dag, topological_order  # noqa: E402
from .labeled import LabeledGraph  # noqa: E402


__all__ = (
    'Graph', 'NeighborIterator', 'PreOrder', 'PostOrder', 'LevelOrder',
    'dominators', 'post_dominators', 'reverse_post_order', 'DominatorTree',
    'is_dag', 'topological_order', 'LabeledGraph', 'GraphError',
    'VertexIndexError', 'CycleError')
