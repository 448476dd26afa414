import time

import networkx as nx
import pandas as pd
from networkx.algorithms.flow import maximum_flow

from edmondskarp import edmonds_karp, initialize, validate_terminals
from flowreplay import paths_frame


class MaxFlowAnalyzer:
    """
    Runs Edmonds-Karp on a capacity matrix and reports on the result:
    network statistics, augmenting paths, minimum cut and saturated edges
    """

    def __init__(self, capacity, vertex_names=None):
        """Validate the capacity matrix and keep a copy of it"""
        self.capacity = initialize(capacity)
        n = len(self.capacity)
        self.vertex_names = list(vertex_names) if vertex_names else [str(i) for i in range(n)]
        if len(self.vertex_names) != n:
            raise ValueError(f"Expected {n} vertex names, got {len(self.vertex_names)}")
        self.network = None
        self.result = None

    def build_network(self):
        """
        Build a directed graph with one edge per positive capacity, self loops dropped

        Returns:
            NetworkX DiGraph with integer nodes and a 'capacity' edge attribute
        """
        self.network = nx.DiGraph()
        for u, name in enumerate(self.vertex_names):
            self.network.add_node(u, name=name)

        for u, row in enumerate(self.capacity):
            for v, cap in enumerate(row):
                if cap > 0 and u != v:
                    self.network.add_edge(u, v, capacity=cap)

        return self.network

    def get_network_stats(self):
        """Print network statistics"""
        if self.network is None:
            self.build_network()

        print("\n" + "=" * 60)
        print("NETWORK STATISTICS")
        print("=" * 60)
        print(f"Nodes: {self.network.number_of_nodes()}")
        print(f"Edges: {self.network.number_of_edges()}")
        print(f"Density: {nx.density(self.network):.4f}")

        capacities = [d['capacity'] for u, v, d in self.network.edges(data=True)]
        if capacities:
            print(f"\nCapacity Statistics:")
            print(f"  Total capacity: {sum(capacities):,}")
            print(f"  Average capacity per edge: {sum(capacities) / len(capacities):.1f}")
            print(f"  Max capacity: {max(capacities):,}")
            print(f"  Min capacity: {min(capacities):,}")

    def analyze_max_flow(self, source, sink, verbose=False):
        """
        Run Edmonds-Karp and print the augmenting paths

        Args:
            source: source node index
            sink: sink node index
            verbose: print each path while the engine runs

        Returns:
            MaxFlowResult
        """
        validate_terminals(len(self.capacity), source, sink)
        print(f"\nAnalyzing max flow: {self.vertex_names[source]} -> {self.vertex_names[sink]}")
        start_time = time.time()

        self.result = edmonds_karp(self.capacity, source, sink, verbose=verbose,
                                   vertex_names=self.vertex_names)

        elapsed_time = time.time() - start_time

        print(f"Maximum flow: {self.result.max_flow}")
        print(f"Augmenting paths: {len(self.result.paths)}")
        print(f"Computation time: {elapsed_time:.4f} seconds")

        if self.result.paths:
            print(f"\nAugmenting Paths:")
            print(paths_frame(self.result, self.vertex_names).to_string(index=False))

        return self.result

    def _require_result(self):
        if self.result is None:
            raise ValueError("Max flow not computed. Call analyze_max_flow() first.")
        return self.result

    def find_min_cut(self):
        """
        Report the minimum cut of the last run

        Returns:
            tuple: (source side node set, list of (u, v, capacity))
        """
        result = self._require_result()
        reachable, cut_edges = result.min_cut()
        cut = [(u, v, self.capacity[u][v]) for u, v in cut_edges]

        print(f"\nMinimum cut: {sum(c for _, _, c in cut)} over {len(cut)} edges")
        print(f"  Source side: {', '.join(self.vertex_names[u] for u in sorted(reachable))}")
        for u, v, cap in cut:
            print(f"  {self.vertex_names[u]} -> {self.vertex_names[v]}: {cap}")

        return reachable, cut

    def find_bottlenecks(self, threshold=1.0):
        """
        Identify edges whose flow is close to capacity

        Args:
            threshold: Consider bottleneck if flow/capacity >= threshold

        Returns:
            DataFrame with columns source, target, flow, capacity, utilization
        """
        result = self._require_result()
        flow = result.flow_matrix()

        bottlenecks = []
        for u, row in enumerate(self.capacity):
            for v, cap in enumerate(row):
                if cap > 0 and flow[u][v] > 0:
                    utilization = flow[u][v] / cap
                    if utilization >= threshold:
                        bottlenecks.append({
                            'source': u,
                            'target': v,
                            'flow': flow[u][v],
                            'capacity': cap,
                            'utilization': utilization,
                        })

        df = pd.DataFrame(bottlenecks, columns=['source', 'target', 'flow', 'capacity', 'utilization'])
        df = df.sort_values(['utilization', 'source', 'target'], ascending=[False, True, True])
        df = df.reset_index(drop=True)

        print(f"\nFound {len(df)} bottlenecks (>={threshold * 100:.0f}% capacity)")
        for i, row in enumerate(df.itertuples(index=False), 1):
            print(f"{i}. {self.vertex_names[row.source]} -> {self.vertex_names[row.target]}")
            print(f"   Flow: {row.flow}/{row.capacity} ({row.utilization * 100:.1f}% utilization)")

        return df

    def cross_check(self):
        """
        Compare the last run's value with networkx's maximum_flow

        Returns:
            tuple: (networkx flow value, whether it matches)
        """
        result = self._require_result()
        if self.network is None:
            self.build_network()

        flow_value, _ = maximum_flow(self.network, result.source, result.sink, capacity='capacity')
        matches = flow_value == result.max_flow
        print(f"\nnetworkx maximum_flow: {flow_value} ({'match' if matches else 'MISMATCH'})")
        return flow_value, matches
