from collections import deque, namedtuple
from numbers import Integral


class GraphValidationError(ValueError):
    """Raised when a capacity matrix or its source/sink pair is unusable"""


class AugmentingPath(namedtuple('AugmentingPath', ['edges', 'flow'])):
    """
    One augmenting path as it was found

    Attributes:
        edges: tuple of (u, v) pairs, source to sink
        flow: bottleneck pushed along the path
    """
    __slots__ = ()

    @property
    def nodes(self):
        return [self.edges[0][0]] + [v for _, v in self.edges]


def initialize(capacity):
    """
    Validate a capacity matrix and return a residual copy of it

    Args:
        capacity: N x N matrix of non-negative integers, N >= 2

    Returns:
        list of lists holding the same values as capacity
    """
    try:
        rows = [list(row) for row in capacity]
    except TypeError:
        raise GraphValidationError("Graph error :: invalid graph")

    n = len(rows)
    if n < 2:
        raise GraphValidationError(f"Graph error :: need at least 2 nodes, got {n}")

    for u, row in enumerate(rows):
        if len(row) != n:
            raise GraphValidationError(
                f"Graph error :: invalid graph. graph needs to be NxN "
                f"(row {u} has {len(row)} entries, expected {n})")
        for v, value in enumerate(row):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise GraphValidationError(
                    f"Graph error :: capacity[{u}][{v}] is not an integer: {value!r}")
            if value < 0:
                raise GraphValidationError(
                    f"Graph error :: capacity[{u}][{v}] is negative: {value}")
            row[v] = int(value)

    return rows


def validate_terminals(n, source, sink):
    for name, node in (('source', source), ('sink', sink)):
        if isinstance(node, bool) or not isinstance(node, Integral) or not 0 <= node < n:
            raise GraphValidationError(
                f"Graph error :: invalid {name} {node!r} for {n} nodes")
    if source == sink:
        raise GraphValidationError("Graph error :: source and sink must differ")


def apply_path(residual, path):
    """
    Push the bottleneck of path through the residual matrix

    Args:
        residual: residual matrix, updated in place
        path: sequence of (u, v) edges, each with positive residual capacity

    Returns:
        the bottleneck pushed
    """
    assert path, "augmenting path is empty"
    bottleneck = min(residual[u][v] for u, v in path)
    assert bottleneck > 0, f"augmenting path {list(path)} has a saturated edge"

    for u, v in path:
        residual[u][v] -= bottleneck
        residual[v][u] += bottleneck

    return bottleneck


def find_path(residual, source, sink):
    """BFS over positive residual edges, lower node index first.

    Returns the parent vector if sink is reachable, otherwise None.
    """
    n = len(residual)
    parent = [-1] * n
    visited = [False] * n
    queue = deque([source])
    visited[source] = True

    while queue:
        u = queue.popleft()

        for v in range(n):
            if not visited[v] and residual[u][v] > 0:
                queue.append(v)
                visited[v] = True
                parent[v] = u

    if visited[sink]:
        return parent
    return None


def path_from_parents(parent, source, sink):
    edges = []
    v = sink
    while v != source:
        u = parent[v]
        edges.append((u, v))
        v = u
    edges.reverse()
    return tuple(edges)


class MaxFlowResult:
    """
    Everything one Edmonds-Karp run produced

    Attributes:
        capacity: validated copy of the input matrix
        residual: residual matrix after the last augmentation
        paths: AugmentingPath records in discovery order
        max_flow: total flow from source to sink
    """

    def __init__(self, capacity, residual, source, sink, paths=None, max_flow=0):
        self.capacity = capacity
        self.residual = residual
        self.source = source
        self.sink = sink
        self.paths = paths if paths is not None else []
        self.max_flow = max_flow

    @property
    def size(self):
        return len(self.capacity)

    def flow_matrix(self):
        """Net flow on every edge, never negative"""
        n = self.size
        return [[max(0, self.capacity[u][v] - self.residual[u][v]) for v in range(n)]
                for u in range(n)]

    def min_cut(self):
        """
        Minimum cut read off the final residual graph

        Returns:
            tuple: (source side node set, list of (u, v) cut edges)
        """
        n = self.size
        reachable = {self.source}
        queue = deque([self.source])
        while queue:
            u = queue.popleft()
            for v in range(n):
                if v not in reachable and self.residual[u][v] > 0:
                    reachable.add(v)
                    queue.append(v)

        cut_edges = [(u, v) for u in sorted(reachable) for v in range(n)
                     if v not in reachable and self.capacity[u][v] > 0]
        return reachable, cut_edges

    def __repr__(self):
        return (f"MaxFlowResult(source={self.source}, sink={self.sink}, "
                f"max_flow={self.max_flow}, paths={len(self.paths)})")


def edmonds_karp(capacity, source, sink, verbose=False, vertex_names=None):
    """
    Maximum flow from source to sink by shortest augmenting paths

    Args:
        capacity: N x N matrix of non-negative integers
        source: source node index
        sink: sink node index, different from source
        verbose: print every augmenting path as it is found
        vertex_names: optional labels used when printing

    Returns:
        MaxFlowResult
    """
    residual = initialize(capacity)
    validate_terminals(len(residual), source, sink)
    result = MaxFlowResult([row[:] for row in residual], residual, source, sink)
    names = vertex_names or [str(node) for node in range(len(residual))]

    while True:
        parent = find_path(residual, source, sink)
        if parent is None:
            break

        edges = path_from_parents(parent, source, sink)
        path_flow = apply_path(residual, edges)
        path = AugmentingPath(edges, path_flow)
        result.paths.append(path)
        result.max_flow += path_flow

        if verbose:
            print("path: ", " -> ".join(names[node] for node in path.nodes), ", flow: ", path_flow)

    return result


class Graph:
    def __init__(self, size):
        self.adj_matrix = [[0] * size for _ in range(size)]
        self.size = size
        self.vertex_data = [str(i) for i in range(size)]

    @classmethod
    def from_matrix(cls, matrix):
        rows = initialize(matrix)
        g = cls(len(rows))
        g.adj_matrix = rows
        return g

    def add_edge(self, u, v, capacity):
        self.adj_matrix[u][v] = capacity

    def add_vertex_data(self, vertex, data):
        if 0 <= vertex < self.size:
            self.vertex_data[vertex] = data

    def edmonds_karp(self, source, sink, verbose=False):
        """Run the max-flow engine on a snapshot of this graph's capacities"""
        return edmonds_karp(self.adj_matrix, source, sink, verbose=verbose,
                            vertex_names=self.vertex_data)
