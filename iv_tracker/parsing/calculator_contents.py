import logging
import re
from typing import Dict, Optional

from ..models.tracker import STATS, StatLine
from .stat_line import ErrorCallback, array_to_stat_line, log_error

logger = logging.getLogger(__name__)

# Bloques del tipo:
#   5:
#     6 -> 0, 0, 0, 1, 0, 0 # Oshawott (1 SPATK)
RE_STARTING_LEVEL = re.compile(r"^\s*(\d+)\s*:\s*$")
RE_SEGMENT = re.compile(r"^\s*(\d+)\s*->\s*(.+?)\s*$")
RE_COMMENT = re.compile(r"#.*$")


def _parse_values(raw: str) -> Optional[StatLine]:
    parts = [p.strip() for p in raw.split(",")]
    if len(parts) != len(STATS) or not all(re.fullmatch(r"\d+", p) for p in parts):
        return None
    return array_to_stat_line([int(p) for p in parts])


def parse_calculator_contents(text: str, on_error: ErrorCallback = log_error) -> Dict[int, Dict[int, StatLine]]:
    """Devuelve {nivel inicial: {nivel: EVs acumulados}}. Las líneas inválidas se reportan y se saltan."""
    segments: Dict[int, Dict[int, StatLine]] = {}
    current: Optional[int] = None

    for raw in (text or "").splitlines():
        line = RE_COMMENT.sub("", raw).rstrip()
        if not line.strip():
            continue

        m_start = RE_STARTING_LEVEL.match(line)
        if m_start:
            current = int(m_start.group(1))
            segments.setdefault(current, {})
            continue

        m_seg = RE_SEGMENT.match(line)
        values = _parse_values(m_seg.group(2)) if m_seg else None
        if current is None or values is None:
            on_error(f"Unable to parse EV segment: {raw.strip()}")
            continue
        segments[current][int(m_seg.group(1))] = values

    logger.debug("Parsed %d EV segment block(s)", len(segments))
    return segments
