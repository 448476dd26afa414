import pytest

from analyzer import MaxFlowAnalyzer
from edmondskarp import GraphValidationError
from generator import generate_graph, vertex_labels

CAPACITY = [
    [0, 3, 2, 0],
    [0, 0, 0, 2],
    [0, 0, 0, 3],
    [0, 0, 0, 0],
]


@pytest.fixture
def analyzer():
    return MaxFlowAnalyzer(CAPACITY, vertex_names=['s', 'a', 'b', 't'])


def test_build_network(analyzer):
    network = analyzer.build_network()
    assert network.number_of_nodes() == 4
    assert network.number_of_edges() == 4
    assert network[0][1]['capacity'] == 3
    assert network.nodes[3]['name'] == 't'


def test_build_network_drops_self_loops():
    network = MaxFlowAnalyzer([[4, 1], [0, 0]]).build_network()
    assert not network.has_edge(0, 0)
    assert network.number_of_edges() == 1


def test_analyze_max_flow(analyzer, capsys):
    result = analyzer.analyze_max_flow(0, 3)
    assert result.max_flow == 4
    out = capsys.readouterr().out
    assert "Analyzing max flow: s -> t" in out
    assert "Maximum flow: 4" in out
    assert "s -> a -> t" in out


def test_analyze_rejects_bad_terminals(analyzer):
    with pytest.raises(GraphValidationError):
        analyzer.analyze_max_flow(0, 4)
    with pytest.raises(GraphValidationError):
        analyzer.analyze_max_flow(2, 2)


def test_min_cut(analyzer):
    analyzer.analyze_max_flow(0, 3)
    side, cut = analyzer.find_min_cut()
    assert side == {0, 1}
    assert cut == [(0, 2, 2), (1, 3, 2)]
    assert sum(c for _, _, c in cut) == analyzer.result.max_flow


def test_bottlenecks_are_saturated(analyzer):
    analyzer.analyze_max_flow(0, 3)
    df = analyzer.find_bottlenecks()
    assert set(zip(df['source'], df['target'])) == {(0, 2), (1, 3)}
    assert (df['flow'] == df['capacity']).all()
    assert (df['utilization'] == 1.0).all()


def test_bottleneck_threshold(analyzer):
    analyzer.analyze_max_flow(0, 3)
    df = analyzer.find_bottlenecks(threshold=0.5)
    assert len(df) == 4
    assert df['utilization'].is_monotonic_decreasing


def test_results_required(analyzer):
    with pytest.raises(ValueError):
        analyzer.find_min_cut()
    with pytest.raises(ValueError):
        analyzer.find_bottlenecks()
    with pytest.raises(ValueError):
        analyzer.cross_check()


@pytest.mark.parametrize('seed', range(5))
def test_cross_check(seed):
    graph = generate_graph(seed=seed)
    analyzer = MaxFlowAnalyzer(graph, vertex_names=vertex_labels(len(graph)))
    result = analyzer.analyze_max_flow(0, len(graph) - 1)
    flow_value, matches = analyzer.cross_check()
    assert matches
    assert flow_value == result.max_flow


def test_network_stats(analyzer, capsys):
    analyzer.get_network_stats()
    out = capsys.readouterr().out
    assert "NETWORK STATISTICS" in out
    assert "Edges: 4" in out
    assert "Total capacity: 10" in out


def test_vertex_name_count():
    with pytest.raises(ValueError):
        MaxFlowAnalyzer(CAPACITY, vertex_names=['s', 't'])


def test_invalid_matrix():
    with pytest.raises(GraphValidationError):
        MaxFlowAnalyzer([[0, -2], [0, 0]])
