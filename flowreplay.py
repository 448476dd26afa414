import pandas as pd

from edmondskarp import initialize


def replay(capacity, paths):
    """Rebuild the final residual matrix by pushing every recorded path in order"""
    residual = initialize(capacity)
    for path in paths:
        push(residual, path)
    return residual


def push(residual, path):
    for u, v in path.edges:
        assert residual[u][v] >= path.flow, f"edge ({u}, {v}) cannot carry {path.flow}"
        residual[u][v] -= path.flow
        residual[v][u] += path.flow


def pull(residual, path):
    for u, v in path.edges:
        assert residual[v][u] >= path.flow, f"edge ({u}, {v}) never carried {path.flow}"
        residual[u][v] += path.flow
        residual[v][u] -= path.flow


class FlowReplay:
    """
    Step through the construction of a max flow one augmenting path at a time

    step is the number of paths currently applied: 0 is the empty flow,
    len(paths) is the final one.
    """

    def __init__(self, result):
        self.result = result
        self.residual = initialize(result.capacity)
        self.step = 0
        self.current_flow = 0

    @property
    def total_steps(self):
        return len(self.result.paths)

    def at_start(self):
        return self.step == 0

    def at_end(self):
        return self.step == self.total_steps

    def step_forward(self):
        """Apply the next path and return it"""
        if self.at_end():
            raise IndexError("no more augmenting paths to apply")
        path = self.result.paths[self.step]
        push(self.residual, path)
        self.step += 1
        self.current_flow += path.flow
        return path

    def step_back(self):
        """Undo the last applied path and return it"""
        if self.at_start():
            raise IndexError("no augmenting path to undo")
        self.step -= 1
        path = self.result.paths[self.step]
        pull(self.residual, path)
        self.current_flow -= path.flow
        return path

    def seek(self, step):
        if not 0 <= step <= self.total_steps:
            raise IndexError(f"step {step} outside 0..{self.total_steps}")
        while self.step < step:
            self.step_forward()
        while self.step > step:
            self.step_back()
        return self.residual

    def flow_on(self, u, v):
        return max(0, self.result.capacity[u][v] - self.residual[u][v])


def paths_frame(result, vertex_names=None):
    """
    Augmenting paths as a table, one row per step

    Returns:
        DataFrame with columns step, path, edges, flow, cumulative_flow
    """
    names = vertex_names or [str(node) for node in range(result.size)]
    rows = []
    total = 0
    for step, path in enumerate(result.paths, 1):
        total += path.flow
        rows.append({
            'step': step,
            'path': " -> ".join(names[node] for node in path.nodes),
            'edges': len(path.edges),
            'flow': path.flow,
            'cumulative_flow': total,
        })
    return pd.DataFrame(rows, columns=['step', 'path', 'edges', 'flow', 'cumulative_flow'])
