"""
Tests for the session, edge and flow table models.
"""
import math

import pytest

from flowmap import Edge, FlowTable, InvalidSessionError, InvalidTimestampError, Session


def test_session_rejects_inverted_interval():
    with pytest.raises(InvalidSessionError):
        Session("A", 10.0, 5.0)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_session_rejects_non_finite_start(bad):
    with pytest.raises(InvalidTimestampError):
        Session("A", bad, 5.0)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_session_rejects_non_finite_end(bad):
    with pytest.raises(InvalidTimestampError):
        Session("A", 0.0, bad)


def test_nan_session_is_not_reported_as_inverted():
    with pytest.raises(InvalidTimestampError):
        Session("A", math.nan, math.nan)


def test_session_properties():
    session = Session("A", 10.0, 20.0)
    assert session.duration_seconds == 10.0
    assert session.midpoint == 15.0
    assert session.to_dict() == {"location": "A", "start_time": 10.0, "end_time": 20.0}


def test_edge_key_round_trip():
    edge = Edge("A", "B")
    assert edge.key == "A->B"
    assert Edge.from_key(edge.key) == edge


def test_edge_key_splits_at_first_separator():
    assert Edge.from_key("A->B->C") == Edge("A", "B->C")


def test_edge_from_key_requires_separator():
    with pytest.raises(ValueError):
        Edge.from_key("AB")


def test_edges_are_hashable_and_directed():
    assert len({Edge("A", "B"), Edge("A", "B"), Edge("B", "A")}) == 2


def test_flow_table_add_and_lookup():
    table = FlowTable()
    table.add(Edge("A", "B"))
    table.add(Edge("A", "B"), 2)
    table.add(Edge("B", "C"), 0)
    assert table[Edge("A", "B")] == 3
    assert table[Edge("B", "C")] == 0
    assert Edge("B", "C") not in table
    assert len(table) == 1
    assert list(table) == [Edge("A", "B")]


def test_flow_table_rejects_negative_counts():
    with pytest.raises(ValueError):
        FlowTable().add(Edge("A", "B"), -1)


def test_flow_table_dict_round_trip():
    data = {"A->B": 2, "B->A": 1}
    assert FlowTable.from_dict(data).to_dict() == data
