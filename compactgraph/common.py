"""
   Error classes
   Log format
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class GraphError(Exception):
    """ Base class for all graph errors """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)


class VertexIndexError(GraphError, IndexError):
    """ A vertex id outside of [0, vertex_count) was used """
    def __init__(self, vertex, vertex_count):
        super().__init__(
            'Vertex {} out of range for graph with {} vertices'.format(
                vertex, vertex_count))
        self.vertex = vertex
        self.vertex_count = vertex_count


class CycleError(GraphError):
    pass
