from dataclasses import FrozenInstanceError, dataclass

import pytest

from edges import EdgeLike, UnweightedEdge, WeightedEdge, as_edge


@dataclass
class Hop:
    source: str
    dest: str

    def get_weight(self) -> int:
        return 2


def test_unweighted_edge_defaults_to_one():
    e = UnweightedEdge(1, 2)

    assert e.get_weight() == 1
    assert isinstance(e, EdgeLike)


def test_weighted_edge_is_immutable():
    e = WeightedEdge(1, 2, 9)

    assert e.get_weight() == 9
    with pytest.raises(FrozenInstanceError):
        e.weight = 3  # type: ignore[misc]


def test_as_edge_accepts_tuples():
    assert as_edge((1, 2)) == UnweightedEdge(1, 2)
    assert as_edge((1, 2, 4)) == WeightedEdge(1, 2, 4)


def test_as_edge_passes_edge_like_through():
    hop = Hop("a", "b")

    assert as_edge(hop) is hop


def test_as_edge_rejects_bad_items():
    with pytest.raises(ValueError):
        as_edge((1,))
    with pytest.raises(ValueError):
        as_edge((1, 2, 3, 4))
    with pytest.raises(TypeError):
        as_edge([1, 2])
    with pytest.raises(TypeError):
        as_edge(7)
