from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from ..models.ranges import FULL_IV_RANGE, REGIMES, ConfirmedNature, IVRange, IVRangeSet, StatValuePossibilitySet
from ..models.tracker import Tracker
from ..utils.nature import NATURE_MODIFIERS, AdmissibleRegimes, admissible_regimes
from ..utils.range_utils import ranges_overlap
from .calculations import stat_value

T = TypeVar("T")

# {régimen: rango de IVs que produce un resultado dado}, p.ej. desde la calculadora de daño
CombinedIVResult = Dict[str, Optional[IVRange]]


def calculate_possible_stat_values(
    stat: str,
    level: int,
    base_stat: int,
    iv_range: Optional[IVRange],
    ev: int,
    modifiers: Iterable[float],
    generation: int,
) -> StatValuePossibilitySet:
    """
    `possible`: todos los valores alcanzables con cualquier IV de 0 a 31.
    `valid`: solo los alcanzables dentro de `iv_range` (vacío si el régimen es imposible).
    """
    modifiers = list(modifiers)
    possible = {
        stat_value(stat, level, base_stat, iv, ev, m, generation)
        for iv in FULL_IV_RANGE.values()
        for m in modifiers
    }
    valid = set()
    if iv_range is not None:
        valid = {
            stat_value(stat, level, base_stat, iv, ev, m, generation)
            for iv in iv_range.values()
            for m in modifiers
        }
    return StatValuePossibilitySet(possible=sorted(possible), valid=sorted(valid))


def calculate_possible_stats(
    stat: str,
    level: int,
    iv_ranges: Dict[str, IVRangeSet],
    confirmed_nature: ConfirmedNature,
    tracker: Tracker,
    evolution: Optional[int] = None,
) -> StatValuePossibilitySet:
    possible: set[int] = set()
    valid: set[int] = set()
    for key in admissible_regimes(stat, confirmed_nature).keys():
        iv_range = iv_ranges[stat].regime(key)
        if iv_range is None:
            continue
        values = calculate_possible_stat_values(
            stat,
            level,
            tracker.base_stat(stat, evolution),
            iv_range,
            tracker.ev_at(stat, level),
            [NATURE_MODIFIERS[key]],
            tracker.generation,
        )
        possible.update(values.possible)
        valid.update(values.valid)
    return StatValuePossibilitySet(possible=sorted(possible), valid=sorted(valid))


def possible_nature_adjustments(range_set: IVRangeSet, stat: str, confirmed_nature: ConfirmedNature) -> AdmissibleRegimes:
    """Regímenes admisibles por la naturaleza y además compatibles con las observaciones."""
    allowed = admissible_regimes(stat, confirmed_nature)
    return AdmissibleRegimes(*(ok and range_set.regime(key) is not None for key, ok in zip(REGIMES, allowed)))


def filter_by_possible_nature_adjustments(
    range_set: IVRangeSet,
    stat: str,
    confirmed_nature: ConfirmedNature,
    values: Sequence[T],
) -> List[T]:
    """`values` viene en orden (negativo, neutro, positivo)."""
    adjustments = possible_nature_adjustments(range_set, stat, confirmed_nature)
    return [value for value, ok in zip(values, adjustments) if ok]


def is_iv_within_values(calculated: Optional[IVRange], iv_range: Optional[IVRange]) -> bool:
    if calculated is None or iv_range is None:
        return False
    return ranges_overlap(calculated.as_pair(), iv_range.as_pair())


def is_iv_within_range(
    result: CombinedIVResult,
    confirmed_nature: ConfirmedNature,
    stat: str,
    range_set: IVRangeSet,
) -> bool:
    adjustments = possible_nature_adjustments(range_set, stat, confirmed_nature)
    return any(
        is_iv_within_values(result.get(key), range_set.regime(key))
        for key in adjustments.keys()
    )
