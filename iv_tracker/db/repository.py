from __future__ import annotations

import json
from typing import Dict, Optional
from sqlalchemy import select, delete
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from .base import Base, get_engine
from .models import TrackerRecord
from ..models.tracker import RouteState, RouteVariable, StatLine, Tracker, empty_stat_line

def init_db(bind: Engine | None = None):
    Base.metadata.create_all(bind=bind or get_engine())

def _dumps(value) -> str:
    return json.dumps(value, ensure_ascii=False)

def _load_levels(raw: str) -> Dict[int, Dict[int, StatLine]]:
    # JSON solo admite claves str: se vuelven a int al leer
    data = json.loads(raw or "{}")
    return {int(outer): {int(level): line for level, line in inner.items()} for outer, inner in data.items()}

def _apply(record: TrackerRecord, tracker: Tracker) -> None:
    record.species = tracker.species
    record.generation = tracker.generation
    record.evolution = tracker.evolution
    record.starting_level = tracker.starting_level
    record.base_stats_json = _dumps(tracker.base_stats)
    record.ev_segments_json = _dumps(tracker.ev_segments)
    record.recorded_stats_json = _dumps(tracker.recorded_stats)
    record.static_ivs_json = _dumps(tracker.static_ivs)
    record.direct_input_ivs_json = _dumps(tracker.direct_input_ivs)
    record.static_nature = tracker.static_nature
    record.direct_input = 1 if tracker.direct_input else 0
    record.manual_positive_nature = tracker.manual_positive_nature
    record.manual_negative_nature = tracker.manual_negative_nature

def record_to_tracker(record: TrackerRecord) -> Tracker:
    return Tracker(
        name=record.name,
        species=record.species or "",
        generation=record.generation,
        base_stats=json.loads(record.base_stats_json or "[]"),
        evolution=record.evolution,
        starting_level=record.starting_level,
        ev_segments=_load_levels(record.ev_segments_json),
        recorded_stats=_load_levels(record.recorded_stats_json),
        static_ivs=json.loads(record.static_ivs_json or "{}"),
        static_nature=record.static_nature,
        direct_input=bool(record.direct_input),
        direct_input_ivs=json.loads(record.direct_input_ivs_json or "null") or empty_stat_line(),
        manual_positive_nature=record.manual_positive_nature,
        manual_negative_nature=record.manual_negative_nature,
    )

def get_tracker_record(session: Session, name: str) -> TrackerRecord | None:
    return session.scalar(select(TrackerRecord).where(TrackerRecord.name == name))

def save_tracker(session: Session, tracker: Tracker) -> TrackerRecord:
    rec = get_tracker_record(session, tracker.name)
    if not rec:
        rec = TrackerRecord(name=tracker.name)
        session.add(rec)
    _apply(rec, tracker)
    session.commit()
    return rec

def get_tracker(session: Session, name: str) -> Tracker | None:
    rec = get_tracker_record(session, name)
    return record_to_tracker(rec) if rec else None

def list_trackers(session: Session) -> list[Tracker]:
    stmt = select(TrackerRecord).order_by(TrackerRecord.name.asc())
    return [record_to_tracker(rec) for rec in session.scalars(stmt).all()]

def delete_tracker(session: Session, name: str) -> int:
    res = session.execute(delete(TrackerRecord).where(TrackerRecord.name == name))
    session.commit()
    return int(res.rowcount or 0)

def load_route_state(session: Session, variables: Optional[Dict[str, RouteVariable]] = None) -> RouteState:
    trackers = list_trackers(session)
    return RouteState(trackers={t.name: t for t in trackers}, variables=dict(variables or {}))
