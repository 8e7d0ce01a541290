import logging
from typing import Dict, List, Optional

from ..models.ranges import ConfirmedNature, IVRangeSet
from ..models.tracker import STATS, Tracker
from ..utils.nature import static_nature_of

logger = logging.getLogger(__name__)

# sin candidatos para subir o bajar: se devuelve un par neutro fijo
FALLBACK_NATURE = ConfirmedNature("attack", "attack")


def _nature_stats(iv_ranges: Dict[str, IVRangeSet]) -> List[str]:
    return [stat for stat in STATS if stat != "hp" and stat in iv_ranges]


def _first_with_excluded(iv_ranges: Dict[str, IVRangeSet], excluded: tuple[str, str]) -> Optional[str]:
    for stat in _nature_stats(iv_ranges):
        if all(iv_ranges[stat].regime(key) is None for key in excluded):
            return stat
    return None


def calculate_possible_nature(iv_ranges: Dict[str, IVRangeSet], tracker: Tracker) -> ConfirmedNature:
    static_nature = static_nature_of(tracker.static_nature)
    if static_nature:
        return static_nature

    # solo sobrevive el régimen negativo -> ese stat baja (y al revés para el positivo)
    decreased = tracker.manual_negative_nature or _first_with_excluded(iv_ranges, ("positive", "neutral"))
    increased = tracker.manual_positive_nature or _first_with_excluded(iv_ranges, ("negative", "neutral"))

    possible_negatives = [s for s in _nature_stats(iv_ranges) if iv_ranges[s].negative is not None]
    possible_positives = [s for s in _nature_stats(iv_ranges) if iv_ranges[s].positive is not None]

    if not possible_negatives or not possible_positives:
        logger.debug("Tracker '%s': no stat can carry the nature, using neutral fallback", tracker.name)
        return FALLBACK_NATURE

    # por eliminación, solo a partir de lo ya confirmado (sin encadenar)
    decreased_by_exclusion = possible_negatives[0] if increased and len(possible_negatives) == 1 else None
    increased_by_exclusion = possible_positives[0] if decreased and len(possible_positives) == 1 else None

    return ConfirmedNature(decreased or decreased_by_exclusion, increased or increased_by_exclusion)
