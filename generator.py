import random

# Demo defaults: 6 to 12 nodes including source and sink, capacities 6 to 19
MIN_NODES = 6
MAX_NODES = 12
MIN_CAPACITY = 6
MAX_CAPACITY = 19


def generate_graph(n=None, low=MIN_CAPACITY, high=MAX_CAPACITY, seed=None, rng=None):
    """
    Random layered capacity matrix with node 0 as source and node n-1 as sink

    Only edges i -> j with j > i are generated, so there are no self loops,
    no antiparallel pairs, nothing leaves the sink and nothing enters the source.

    Args:
        n: number of nodes, random in [MIN_NODES, MAX_NODES] when None
        low: smallest capacity
        high: largest capacity
        seed: seed for a private random generator
        rng: random.Random instance, takes precedence over seed

    Returns:
        n x n list of lists of ints
    """
    if rng is None:
        rng = random.Random(seed)
    if n is None:
        n = rng.randint(MIN_NODES, MAX_NODES)
    if n < 2:
        raise ValueError(f"need at least 2 nodes, got {n}")
    if low < 0 or low > high:
        raise ValueError(f"invalid capacity range [{low}, {high}]")

    graph = []
    for i in range(n):
        graph.append([rng.randint(low, high) if j > i else 0 for j in range(n)])
    return graph


def vertex_labels(n):
    return ['Source'] + [f'Node{i}' for i in range(1, n - 1)] + ['Sink']
