"""
Tests for vertex and neighbour cursors.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from adjacency_iterators import AdjacentIterator, AdjacentRange


def sample() -> AdjacencyListGraph:
    # 1-2 (5), 1-3 (1), 2-3 (2), plus isolated 7
    g = AdjacencyListGraph([(1, 2, 5), (3, 1, 1), (2, 3, 2)])
    g.add_vertex(7)
    return g


def test_forward_vertex_cursor_walk():
    g = sample()
    seen = []
    it, end = g.begin(), g.end()
    while it != end:
        seen.append(it.value)
        it.advance()

    assert seen == [1, 2, 3, 7]


def test_reverse_vertex_cursor_walk():
    g = sample()
    seen = []
    it, end = g.rbegin(), g.rend()
    while it != end:
        seen.append(it.value)
        it.advance()

    assert seen == [7, 3, 2, 1]


def test_vertex_cursor_is_bidirectional():
    g = sample()
    it = g.end()
    it.retreat()

    assert it.value == 7
    assert it.retreat().retreat().value == 2
    assert it == g.vertex(2)


def test_vertex_lookup():
    g = sample()

    assert g.vertex(3).value == 3
    assert g.vertex(99) == g.end()


def test_cursor_equality_is_positional():
    g = sample()

    assert g.begin() == g.vertex(1)
    assert g.begin() != g.end()
    assert g.begin() != sample().begin()
    # forward and reverse cursors never compare equal
    assert g.begin() != g.rbegin()


def test_dereferencing_end_raises():
    g = sample()

    with pytest.raises(IndexError):
        g.end().value
    with pytest.raises(IndexError):
        g.begin().retreat().value
    with pytest.raises(IndexError):
        g.rend().value


def test_vertex_cursor_exposes_neighbours():
    g = sample()
    it = g.vertex(1)

    assert list(it.adjacent()) == [(2, 5), (3, 1)]
    assert list(it) == [(2, 5), (3, 1)]
    assert list(g.vertex(7)) == []


def test_neighbour_cursor_walk():
    g = sample()
    pairs = []
    it, end = g.vertex(2).begin(), g.vertex(2).end()
    while it != end:
        pairs.append((it.dest(), it.weight()))
        it.advance()

    assert pairs == [(1, 5), (3, 2)]


def test_neighbour_cursor_backwards():
    nbrs = sample().adjacent(3)
    it = nbrs.end().retreat()

    assert it.value == 2
    assert it.weight() == 2
    assert it.retreat() == nbrs.begin()
    assert it.dest() == 1


def test_absent_vertex_has_empty_range():
    nbrs = sample().adjacent(99)

    assert isinstance(nbrs, AdjacentRange)
    assert nbrs.begin() == nbrs.end()
    assert list(reversed(nbrs)) == []


def test_neighbour_cursor_is_read_only():
    it = sample().adjacent(1).begin()

    assert isinstance(it, AdjacentIterator)
    with pytest.raises(AttributeError):
        it.value = 4


def test_vertices_yields_cursors_in_order():
    g = sample()
    rows = [(vx.value, dict(vx.adjacent())) for vx in g.vertices()]

    assert rows == [
        (1, {2: 5, 3: 1}),
        (2, {1: 5, 3: 2}),
        (3, {1: 1, 2: 2}),
        (7, {}),
    ]


def test_copy_is_independent():
    g = sample()
    it = g.begin()
    other = it.copy()
    it.advance()

    assert other.value == 1
    assert it.value == 2


def test_absent_vertex_cursor_loop_terminates():
    g = sample()
    pairs = []
    it, end = g.adjacent(99).begin(), g.adjacent(42).end()
    while it != end:
        pairs.append(it.dest())
        it.advance()

    assert pairs == []
    assert g.adjacent(99).begin() == g.adjacent(99).end()
    assert g.adjacent(99).begin() != g.adjacent(7).begin()
