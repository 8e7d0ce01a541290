"""Tests for nature inference from the per-stat IV ranges."""

from iv_tracker.models.ranges import ConfirmedNature
from iv_tracker.models.tracker import STATS
from iv_tracker.services.iv_ranges import calculate_possible_iv_range
from iv_tracker.services.nature_inference import FALLBACK_NATURE, calculate_possible_nature

from conftest import make_tracker, observe


def _nature(tracker):
    ranges = {stat: calculate_possible_iv_range(stat, tracker) for stat in STATS}
    return calculate_possible_nature(ranges, tracker), ranges


def test_unknown_without_observations(tracker):
    nature, _ = _nature(tracker)
    assert nature == ConfirmedNature(None, None)


def test_static_nature_is_authoritative(tracker):
    tracker.static_nature = "Modest"
    observe(tracker, 5, attack=13)
    nature, _ = _nature(tracker)
    assert nature == ConfirmedNature("attack", "sp_attack")


def test_static_neutral_nature_uses_same_stat_twice(tracker):
    tracker.static_nature = "hardy"
    nature, _ = _nature(tracker)
    assert nature == ConfirmedNature("attack", "attack")


def test_forced_regimes_confirm_both_sides(tracker):
    # 13 de ataque solo con naturaleza que sube; 8 de defensa solo con la que baja
    observe(tracker, 5, attack=13, defense=8)
    nature, _ = _nature(tracker)
    assert nature == ConfirmedNature("defense", "attack")


def test_increased_alone_leaves_decreased_open(tracker):
    observe(tracker, 5, attack=13)
    nature, _ = _nature(tracker)
    assert nature == ConfirmedNature(None, "attack")


def test_decreased_found_by_elimination(tracker):
    observe(tracker, 5, attack=13, defense=10, sp_attack=9, sp_defense=10)
    nature, ranges = _nature(tracker)
    assert nature == ConfirmedNature("speed", "attack")
    assert ranges["speed"].negative is not None


def test_manual_pins_win(tracker):
    tracker.manual_negative_nature = "speed"
    nature, _ = _nature(tracker)
    assert nature == ConfirmedNature("speed", None)


def test_no_candidate_returns_fallback(tracker):
    observe(tracker, 5, attack=13, defense=10, sp_attack=9, sp_defense=10, speed=11)
    nature, _ = _nature(tracker)
    assert nature == FALLBACK_NATURE


def test_confirmed_stats_have_viable_opposite_role():
    for observations in (
        {"attack": 13, "defense": 8},
        {"attack": 13, "defense": 10, "sp_attack": 9, "sp_defense": 10},
        {"attack": 13},
    ):
        tracker = observe(make_tracker(), 5, **observations)
        (decreased, increased), ranges = _nature(tracker)
        if decreased is not None and increased is not None:
            assert ranges[decreased].negative is not None
            assert ranges[increased].positive is not None
