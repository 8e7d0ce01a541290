import pytest

from iv_tracker.models.tracker import Tracker
from iv_tracker.parsing.stat_line import array_to_stat_line

LILLIPUP = [45, 60, 45, 25, 45, 55]
HERDIER = [65, 80, 65, 35, 65, 60]


def make_tracker(name="Lillipup", generation=5, **kwargs) -> Tracker:
    kwargs.setdefault("base_stats", [array_to_stat_line(LILLIPUP), array_to_stat_line(HERDIER)])
    return Tracker(name=name, species=name, generation=generation, **kwargs)


def observe(tracker: Tracker, level: int, evolution: int = 0, **stats) -> Tracker:
    tracker.recorded_stats.setdefault(evolution, {}).setdefault(level, {}).update(stats)
    return tracker


@pytest.fixture
def tracker() -> Tracker:
    return make_tracker()
