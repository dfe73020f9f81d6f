"""
Tests for session compression.
"""
import math
import random

import pytest

from conftest import make_random_track
from flowmap import (
    InputShapeError,
    InvalidTimestampError,
    Observation,
    Session,
    compress_movement,
    compress_observations,
)


def test_walk_a_a_b_a(scenario_observations):
    locations, timestamps = scenario_observations
    sessions = compress_movement(locations, timestamps, gap=10)
    assert sessions == [
        Session("A", 0.0, 5.0),
        Session("B", 20.0, 20.0),
        Session("A", 25.0, 25.0),
    ]


def test_single_observation_gives_zero_length_session():
    sessions = compress_movement(["A"], [42.0], gap=10)
    assert sessions == [Session("A", 42.0, 42.0)]
    assert sessions[0].duration_seconds == 0.0


def test_zero_gap_merges_identical_timestamps():
    sessions = compress_movement(["A", "A"], [7.0, 7.0], gap=0)
    assert sessions == [Session("A", 7.0, 7.0)]


def test_zero_gap_splits_distinct_timestamps():
    sessions = compress_movement(["A", "A"], [7.0, 7.5], gap=0)
    assert sessions == [Session("A", 7.0, 7.0), Session("A", 7.5, 7.5)]


def test_empty_input():
    assert compress_movement([], [], gap=10) == []


def test_last_open_session_is_emitted():
    sessions = compress_movement(["A", "B", "B", "B"], [0, 1, 2, 3], gap=5)
    assert sessions[-1] == Session("B", 1, 3)


def test_one_location_within_gap_collapses_regardless_of_span():
    timestamps = [i * 9.0 for i in range(100)]
    sessions = compress_movement(["A"] * 100, timestamps, gap=10)
    assert sessions == [Session("A", 0.0, 891.0)]


def test_gap_is_measured_from_previous_observation_not_session_start():
    sessions = compress_movement(["A", "A", "A"], [0, 8, 16], gap=10)
    assert sessions == [Session("A", 0, 16)]


def test_input_is_sorted_internally():
    sessions = compress_movement(["A", "B", "A", "A"], [5, 20, 0, 25], gap=10)
    assert sessions == [
        Session("A", 0, 5),
        Session("B", 20, 20),
        Session("A", 25, 25),
    ]


def test_empty_location_label_is_an_ordinary_value():
    sessions = compress_movement(["", "", "A"], [0, 1, 2], gap=5)
    assert sessions == [Session("", 0, 1), Session("A", 2, 2)]


def test_negative_gap_never_merges():
    sessions = compress_movement(["A", "A", "A"], [0, 0, 1], gap=-1)
    assert [s.location for s in sessions] == ["A", "A", "A"]
    assert all(s.duration_seconds == 0 for s in sessions)


def test_mismatched_lengths_rejected():
    with pytest.raises(InputShapeError):
        compress_movement(["A", "B"], [0.0], gap=10)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_timestamp_rejected(bad):
    with pytest.raises(InvalidTimestampError):
        compress_movement(["A", "B"], [0.0, bad], gap=10)


def test_compress_observations_wrapper():
    observations = [Observation("B", 3.0), Observation("A", 0.0), Observation("A", 1.0)]
    assert compress_observations(observations, gap=5) == [
        Session("A", 0.0, 1.0),
        Session("B", 3.0, 3.0),
    ]


# ----------------------------------------------------------------------
# properties
# ----------------------------------------------------------------------


@pytest.mark.parametrize("gap", [0.0, 5.0, 15.0, 60.0])
def test_output_is_time_ordered_and_adjacent_distinct(random_tracks, gap):
    for locations, timestamps in random_tracks:
        sessions = compress_movement(locations, timestamps, gap)
        for prev, cur in zip(sessions, sessions[1:]):
            assert prev.start_time <= cur.start_time
            assert prev.end_time <= cur.start_time
            if prev.location == cur.location:
                # same location only when the gap broke the session
                assert cur.start_time - prev.end_time > gap


@pytest.mark.parametrize("gap", [0.0, 5.0, 15.0])
def test_recompressing_midpoints_is_idempotent(random_tracks, gap):
    for locations, timestamps in random_tracks:
        sessions = compress_movement(locations, timestamps, gap)
        again = compress_movement(
            [s.location for s in sessions],
            [s.midpoint for s in sessions],
            gap,
        )
        assert [s.location for s in again] == [s.location for s in sessions]
        assert len(again) == len(sessions)


def test_order_invariance_under_permutation():
    rng = random.Random(7)
    # distinct timestamps: tie order across locations is the only permitted difference
    locations = [rng.choice("ABC") for _ in range(50)]
    timestamps = rng.sample(range(0, 2000), 50)
    expected = compress_movement(locations, timestamps, gap=40)

    pairs = list(zip(locations, timestamps))
    for _ in range(5):
        rng.shuffle(pairs)
        locs, times = zip(*pairs)
        assert compress_movement(list(locs), list(times), gap=40) == expected


@pytest.mark.parametrize("gap", [0.0, 10.0, 30.0])
def test_every_observation_is_covered(random_tracks, gap):
    for locations, timestamps in random_tracks:
        sessions = compress_movement(locations, timestamps, gap)
        for loc, t in zip(locations, timestamps):
            assert any(
                s.location == loc and s.start_time <= t <= s.end_time for s in sessions
            )


def test_larger_gap_coarsens(random_tracks):
    gaps = [0.0, 5.0, 10.0, 20.0, 50.0, 1000.0]
    for locations, timestamps in random_tracks:
        counts = [len(compress_movement(locations, timestamps, g)) for g in gaps]
        assert counts == sorted(counts, reverse=True)


def test_huge_gap_leaves_only_location_changes():
    locations, timestamps = make_random_track(seed=11)
    sessions = compress_movement(locations, timestamps, gap=1e12)
    ordered = [locations[i] for i in sorted(range(len(timestamps)), key=lambda i: timestamps[i])]
    changes = [ordered[0]] + [b for a, b in zip(ordered, ordered[1:]) if a != b]
    assert [s.location for s in sessions] == changes
