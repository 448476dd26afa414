import argparse
import sys

import pandas as pd

from analyzer import MaxFlowAnalyzer
from edmondskarp import GraphValidationError
from generator import MAX_CAPACITY, MIN_CAPACITY, generate_graph, vertex_labels


def load_capacity_csv(path, header=False):
    """
    Read a capacity matrix from CSV

    Args:
        path: CSV file, one matrix row per line
        header: first line holds the vertex names

    Returns:
        tuple: (matrix as list of lists, vertex names or None)
    """
    df = pd.read_csv(path, header=0 if header else None)
    if df.isnull().values.any():
        raise GraphValidationError(f"Graph error :: {path} has missing entries")
    names = [str(c) for c in df.columns] if header else None
    return df.values.tolist(), names


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Edmonds-Karp maximum flow with augmenting path replay")
    parser.add_argument('--csv', help="capacity matrix CSV; a random graph is generated when omitted")
    parser.add_argument('--header', action='store_true', help="first CSV line holds vertex names")
    parser.add_argument('--nodes', type=int, default=None, help="node count of the random graph")
    parser.add_argument('--seed', type=int, default=None, help="seed of the random graph")
    parser.add_argument('--low', type=int, default=MIN_CAPACITY, help="smallest random capacity")
    parser.add_argument('--high', type=int, default=MAX_CAPACITY, help="largest random capacity")
    parser.add_argument('--source', type=int, default=0)
    parser.add_argument('--sink', type=int, default=None, help="defaults to the last node")
    parser.add_argument('--threshold', type=float, default=1.0, help="bottleneck utilization threshold")
    parser.add_argument('--verbose', action='store_true', help="print paths while the engine runs")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    print("=" * 60)
    print("MAXIMUM FLOW ANALYSIS (EDMONDS-KARP)")
    print("=" * 60)

    try:
        print("\n1. Loading capacity matrix...")
        if args.csv:
            matrix, names = load_capacity_csv(args.csv, header=args.header)
            print(f"   Loaded {len(matrix)}x{len(matrix[0]) if matrix else 0} matrix from {args.csv}")
        else:
            matrix = generate_graph(args.nodes, low=args.low, high=args.high, seed=args.seed)
            names = vertex_labels(len(matrix))
            print(f"   Generated random graph: {len(matrix)} nodes, capacities {args.low}-{args.high}")

        for row in matrix:
            print(f"   {row}")

        analyzer = MaxFlowAnalyzer(matrix, vertex_names=names)
        sink = args.sink if args.sink is not None else len(analyzer.capacity) - 1

        print("\n2. Building network graph...")
        analyzer.build_network()
        analyzer.get_network_stats()

        print("\n3. Running max flow...")
        analyzer.analyze_max_flow(args.source, sink, verbose=args.verbose)
        analyzer.find_min_cut()
        analyzer.find_bottlenecks(threshold=args.threshold)
        analyzer.cross_check()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print("\n" + "=" * 60)
    print("ANALYSIS COMPLETE")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(main())
