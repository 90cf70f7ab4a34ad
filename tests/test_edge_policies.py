from edge_policies import DIRECTED, UNDIRECTED, DirectedEdges, UndirectedEdges, policy_for
from sorted_map import SortedMap


def test_policy_for_returns_shared_instances():
    assert policy_for(False) is UNDIRECTED
    assert policy_for(True) is DIRECTED
    assert isinstance(UNDIRECTED, UndirectedEdges)
    assert isinstance(DIRECTED, DirectedEdges)


def test_undirected_insert_mirrors():
    adj = SortedMap()
    UNDIRECTED.insert(adj, 1, 2, 3, SortedMap)

    assert adj == {1: {2: 3}, 2: {1: 3}}
    assert UNDIRECTED.count(adj) == 1


def test_directed_insert_only_creates_destination():
    adj = SortedMap()
    DIRECTED.insert(adj, 1, 2, 3, SortedMap)

    assert adj == {1: {2: 3}, 2: {}}
    assert DIRECTED.count(adj) == 1


def test_existing_inner_mapping_is_reused():
    adj = SortedMap()
    DIRECTED.insert(adj, 1, 2, 1, SortedMap)
    inner = adj[1]
    DIRECTED.insert(adj, 1, 3, 1, SortedMap)

    assert adj[1] is inner
    assert list(inner) == [2, 3]
