import json
import logging
from numbers import Real
from typing import Callable, List, Sequence

from ..models.tracker import STATS, StatLine, empty_stat_line
from ..services.types import TYPE_NAMES, is_type_name

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[str], None]


def log_error(message: str) -> None:
    logger.error(message)


def _is_stat_array(value) -> bool:
    return (
        isinstance(value, list)
        and len(value) == len(STATS)
        and all(isinstance(v, Real) and not isinstance(v, bool) for v in value)
    )


def array_to_stat_line(values: Sequence[int]) -> StatLine:
    return dict(zip(STATS, values))


def parse_stat_line(raw_stats: str, on_error: ErrorCallback = log_error) -> StatLine:
    """'[45, 60, 45, 25, 45, 55]' -> {'hp': 45, 'attack': 60, ...}. Si no se puede, todo a 0."""
    try:
        values = json.loads(raw_stats)
    except (TypeError, ValueError):
        values = None
    if not _is_stat_array(values):
        on_error(f"Unable to parse stat line: {raw_stats}")
        return empty_stat_line()
    return array_to_stat_line(values)


def parse_base_stats(raw_base_stats: str, on_error: ErrorCallback = log_error) -> List[StatLine]:
    """Una fila por etapa evolutiva: '[[45, 60, ...], [65, 80, ...]]'."""
    try:
        rows = json.loads(raw_base_stats)
    except (TypeError, ValueError):
        rows = None
    if not isinstance(rows, list) or not all(_is_stat_array(row) for row in rows):
        on_error(f"Unable to parse base stats: {raw_base_stats}")
        return []
    return [array_to_stat_line(row) for row in rows]


def parse_type_definition(raw_types: str, on_error: ErrorCallback = log_error) -> List[str]:
    segments = [s.strip().lower() for s in raw_types.split("/")]
    invalid = next((s for s in segments if not is_type_name(s)), None)
    if invalid is not None:
        on_error(invalid)
        return []
    return [s for s in segments if s in TYPE_NAMES]
