from dataclasses import replace
from typing import Dict, Optional

from ..models.ranges import FULL_IV_RANGE, REGIMES, ConfirmedNature, IVRange, IVRangeSet, span
from ..models.tracker import STATS, Tracker
from ..utils.nature import NATURE_MODIFIERS, NO_NATURE, AdmissibleRegimes, admissible_regimes, static_nature_of
from .calculations import LEGACY_GENERATION, stat_value
from .nature_inference import calculate_possible_nature


def _fixed_range_set(iv: int, allowed: AdmissibleRegimes) -> IVRangeSet:
    fixed = IVRange(iv, iv)
    return IVRangeSet(
        negative=fixed if allowed.negative else None,
        neutral=fixed if allowed.neutral else None,
        positive=fixed if allowed.positive else None,
        combined=fixed,
    )


def _narrow_regime(stat: str, tracker: Tracker, modifier: float) -> Optional[IVRange]:
    current = FULL_IV_RANGE
    for evo, segments in sorted(tracker.recorded_stats.items()):
        base = tracker.base_stat(stat, evo)
        for level, stat_line in sorted(segments.items()):
            observed = (stat_line or {}).get(stat)
            if not observed:
                continue
            ev = tracker.ev_at(stat, level)
            matching = [
                iv for iv in current.values()
                if stat_value(stat, level, base, iv, ev, modifier, tracker.generation) == observed
            ]
            if not matching:
                # contradicción: este régimen ya no puede aplicar
                return None
            current = IVRange(max(current.low, min(matching)), min(current.high, max(matching)))
    return current


def calculate_possible_iv_range(stat: str, tracker: Tracker) -> IVRangeSet:
    static_nature = static_nature_of(tracker.static_nature)
    everything = AdmissibleRegimes(True, True, True)
    by_static_nature = admissible_regimes(stat, static_nature) if static_nature else everything

    static_iv = tracker.static_ivs.get(stat)
    if static_iv is not None and static_iv >= 0:
        return _fixed_range_set(static_iv, by_static_nature)

    if tracker.direct_input:
        manual = ConfirmedNature(tracker.manual_negative_nature, tracker.manual_positive_nature)
        by_manual = admissible_regimes(stat, manual) if any(manual) else everything
        allowed = AdmissibleRegimes(*(a and b for a, b in zip(by_static_nature, by_manual)))
        return _fixed_range_set(tracker.direct_input_ivs.get(stat, 0), allowed)

    # HP ignora la naturaleza: los tres regímenes usan el modificador neutro
    ranges = {
        key: _narrow_regime(
            stat,
            tracker,
            NATURE_MODIFIERS["neutral"] if stat == "hp" else NATURE_MODIFIERS[key],
        )
        for key in REGIMES
    }
    return IVRangeSet(
        negative=ranges["negative"],
        neutral=ranges["neutral"],
        positive=ranges["positive"],
        combined=span(ranges.values()),
    )


def combine_with_nature(stat: str, range_set: IVRangeSet, confirmed_nature: ConfirmedNature) -> IVRangeSet:
    allowed = admissible_regimes(stat, confirmed_nature)
    relevant = [range_set.regime(key) for key in allowed.keys()]
    return replace(range_set, combined=span(relevant))


def calculate_all_possible_iv_ranges(tracker: Tracker) -> Dict[str, IVRangeSet]:
    preliminary = {stat: calculate_possible_iv_range(stat, tracker) for stat in STATS}
    if tracker.generation <= LEGACY_GENERATION:
        confirmed = NO_NATURE
    else:
        confirmed = calculate_possible_nature(preliminary, tracker)
    return {
        stat: combine_with_nature(stat, range_set, confirmed)
        for stat, range_set in preliminary.items()
    }
