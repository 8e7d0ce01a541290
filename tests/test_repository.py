"""Tests for the SQLAlchemy tracker store."""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from iv_tracker.controllers.route_calculations_controller import RouteCalculationsController
from iv_tracker.db.base import DB_URL_ENV, database_url, get_engine, session_scope
from iv_tracker.db.models import TrackerRecord
from iv_tracker.db.repository import (
    delete_tracker,
    get_tracker,
    init_db,
    list_trackers,
    load_route_state,
    save_tracker,
)
from iv_tracker.models.tracker import RouteVariable

from conftest import make_tracker, observe


@pytest.fixture
def engine():
    eng = create_engine("sqlite://", future=True)
    init_db(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as s:
        yield s


def test_tracker_round_trip(session):
    tracker = observe(make_tracker(), 5, attack=13, defense=8)
    tracker.ev_segments = {5: {6: {"hp": 0, "attack": 1, "defense": 0, "sp_attack": 0, "sp_defense": 0, "speed": 0}}}
    tracker.static_ivs = {"speed": 20}
    tracker.manual_positive_nature = "attack"
    save_tracker(session, tracker)

    loaded = get_tracker(session, "Lillipup")
    assert loaded == tracker
    assert 5 in loaded.recorded_stats[0]


def test_save_updates_existing(session):
    tracker = make_tracker()
    save_tracker(session, tracker)
    tracker.static_nature = "Jolly"
    save_tracker(session, tracker)
    assert session.query(TrackerRecord).count() == 1
    assert get_tracker(session, "Lillipup").static_nature == "Jolly"


def test_list_and_delete(session):
    save_tracker(session, make_tracker("Mudkip"))
    save_tracker(session, make_tracker("Lillipup"))
    assert [t.name for t in list_trackers(session)] == ["Lillipup", "Mudkip"]
    assert delete_tracker(session, "Mudkip") == 1
    assert delete_tracker(session, "Mudkip") == 0
    assert get_tracker(session, "Mudkip") is None


def test_route_state_feeds_controller(session):
    save_tracker(session, observe(make_tracker(), 5, attack=13))
    state = load_route_state(session, {"badges": RouteVariable("number", "2")})
    controller = RouteCalculationsController(state)
    calc = controller.calculation_set("Lillipup")
    assert calc.confirmed_nature.increased == "attack"
    assert calc.variables == {"badges": 2}


def test_session_scope_rolls_back(engine):
    with pytest.raises(RuntimeError):
        with session_scope(engine) as s:
            s.add(TrackerRecord(
                name="Ghost",
                base_stats_json="[]",
                ev_segments_json="{}",
                recorded_stats_json="{}",
                static_ivs_json="{}",
                direct_input_ivs_json="{}",
            ))
            s.flush()
            raise RuntimeError("boom")
    with session_scope(engine) as s:
        assert get_tracker(s, "Ghost") is None


def test_database_url_read_at_call_time(monkeypatch):
    monkeypatch.setenv(DB_URL_ENV, "sqlite://")
    assert database_url() == "sqlite://"
    assert get_engine() is get_engine("sqlite://")
    monkeypatch.delenv(DB_URL_ENV)
    assert database_url().startswith("sqlite:///")
    assert database_url().endswith("iv_tracker.db")


def test_default_engine_used_without_bind(monkeypatch):
    monkeypatch.setenv(DB_URL_ENV, "sqlite://")
    init_db()
    with session_scope() as s:
        save_tracker(s, make_tracker("Mudkip"))
    with session_scope() as s:
        assert get_tracker(s, "Mudkip").name == "Mudkip"
