"""Tests for building and publishing the per-tracker calculation sets."""

import pytest

from iv_tracker.controllers.route_calculations_controller import (
    RouteCalculationsController,
    build_all_tracker_calculation_sets,
    build_tracker_calculation_set,
)
from iv_tracker.models.ranges import ConfirmedNature, IVRange
from iv_tracker.models.tracker import RouteState, RouteVariable
from iv_tracker.utils.nature import NO_NATURE

from conftest import make_tracker, observe


def _state(*trackers, **variables):
    return RouteState(
        trackers={t.name: t for t in trackers},
        variables={k: RouteVariable(*v) for k, v in variables.items()},
    )


def test_calculation_set_for_tracker():
    tracker = observe(make_tracker(), 5, attack=13, defense=8)
    state = _state(tracker, badges=("number", "3"), shiny=("boolean", "false"))
    calc = build_tracker_calculation_set(state, tracker)
    assert calc.confirmed_nature == ConfirmedNature("defense", "attack")
    assert calc.iv_ranges["attack"].combined == IVRange(20, 31)
    assert calc.variables == {"badges": 3, "shiny": False}
    assert calc.hidden_power_type is not None
    assert calc.tracker is tracker


def test_legacy_generation_has_no_nature():
    tracker = make_tracker("Rattata", generation=1)
    calc = build_tracker_calculation_set(_state(tracker), tracker)
    assert calc.confirmed_nature == NO_NATURE


def test_sets_keyed_by_tracker_name():
    sets = build_all_tracker_calculation_sets(_state(make_tracker("Lillipup"), make_tracker("Mudkip")))
    assert sorted(sets) == ["Lillipup", "Mudkip"]


def test_controller_lookup():
    controller = RouteCalculationsController(_state(make_tracker("Lillipup")))
    assert controller.calculation_set("Lillipup").tracker.name == "Lillipup"
    assert controller.calculation_set("Mudkip") is None
    assert controller.calculation_set("") is None
    assert controller.calculation_set(None) is None


def test_rebuild_replaces_snapshot_wholesale():
    controller = RouteCalculationsController(_state(make_tracker("Lillipup")))
    old = controller.calculations
    new = controller.rebuild(_state(make_tracker("Mudkip")))
    assert list(old) == ["Lillipup"]
    assert list(new) == ["Mudkip"]
    assert controller.calculations is new
    assert controller.calculation_set("Lillipup") is None


def test_snapshot_is_read_only():
    controller = RouteCalculationsController(_state(make_tracker("Lillipup")))
    with pytest.raises(TypeError):
        controller.calculations["Mudkip"] = None


def test_unknown_static_nature_does_not_stop_rebuild():
    broken = observe(make_tracker("Lillipup", static_nature="Sleepy"), 5, attack=13)
    controller = RouteCalculationsController()
    sets = controller.rebuild(_state(broken, make_tracker("Mudkip")))
    assert sorted(sets) == ["Lillipup", "Mudkip"]
    # el nombre desconocido cuenta como sin naturaleza fija: se infiere
    assert sets["Lillipup"].confirmed_nature.increased == "attack"
