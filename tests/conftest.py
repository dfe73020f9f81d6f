"""
Pytest configuration and fixtures for flowmap tests.
"""
import random

import pandas as pd
import pytest

from flowmap import Session


def make_random_track(seed, n=60, locations="ABCD", max_step=30.0, stay_prob=0.7):
    """Random walk between locations with irregular sampling intervals."""
    rng = random.Random(seed)
    locs = []
    times = []
    t = 0.0
    loc = rng.choice(locations)
    for _ in range(n):
        if rng.random() > stay_prob:
            loc = rng.choice(locations)
        # integer-ish steps so that equal timestamps also occur
        t += float(rng.randint(0, int(max_step)))
        locs.append(loc)
        times.append(t)
    return locs, times


@pytest.fixture
def scenario_observations():
    """Observations from the A, A, B, A walk."""
    return ["A", "A", "B", "A"], [0.0, 5.0, 20.0, 25.0]


@pytest.fixture
def scenario_sessions():
    """Sessions produced by compressing the A, A, B, A walk with gap=10."""
    return [
        Session("A", 0.0, 5.0),
        Session("B", 20.0, 20.0),
        Session("A", 25.0, 25.0),
    ]


@pytest.fixture
def random_tracks():
    """A handful of reproducible random tracks."""
    return [make_random_track(seed) for seed in range(5)]


@pytest.fixture
def observations_frame():
    """Two entities, observations deliberately out of time order."""
    return pd.DataFrame(
        {
            "entity_id": ["w1", "w1", "w1", "w1", "w2", "w2", "w2"],
            "loc": ["A", "B", "A", "A", "B", "C", "C"],
            "time": [5.0, 20.0, 0.0, 25.0, 100.0, 104.0, 102.0],
        }
    )


@pytest.fixture
def observations_csv(tmp_path, observations_frame):
    """observations_frame written as CSV."""
    path = tmp_path / "observations.csv"
    observations_frame.to_csv(path, index=False)
    return str(path)
