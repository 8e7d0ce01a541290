import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..models.ranges import TrackerCalculations
from ..models.tracker import RouteState, Tracker
from ..parsing.variables import cast_route_variables
from ..services.calculations import LEGACY_GENERATION
from ..services.hidden_power import calculate_hidden_power_type
from ..services.iv_ranges import calculate_all_possible_iv_ranges
from ..services.nature_inference import calculate_possible_nature
from ..utils.nature import NO_NATURE

logger = logging.getLogger(__name__)


def build_tracker_calculation_set(state: RouteState, tracker: Tracker) -> TrackerCalculations:
    iv_ranges = calculate_all_possible_iv_ranges(tracker)
    if tracker.generation <= LEGACY_GENERATION:
        confirmed_nature = NO_NATURE
    else:
        confirmed_nature = calculate_possible_nature(iv_ranges, tracker)
    return TrackerCalculations(
        iv_ranges=iv_ranges,
        confirmed_nature=confirmed_nature,
        variables=cast_route_variables(state.variables),
        hidden_power_type=calculate_hidden_power_type(iv_ranges, confirmed_nature),
        tracker=tracker,
    )


def build_all_tracker_calculation_sets(state: RouteState) -> Dict[str, TrackerCalculations]:
    return {
        tracker.name: build_tracker_calculation_set(state, tracker)
        for tracker in state.trackers.values()
    }


class RouteCalculationsController:
    """Guarda el último conjunto de cálculos de la ruta, indexado por nombre de tracker."""

    def __init__(self, state: Optional[RouteState] = None):
        self._calculations: Mapping[str, TrackerCalculations] = MappingProxyType({})
        if state is not None:
            self.rebuild(state)

    @property
    def calculations(self) -> Mapping[str, TrackerCalculations]:
        return self._calculations

    def rebuild(self, state: RouteState) -> Mapping[str, TrackerCalculations]:
        # se construye completo antes de publicarlo: los lectores ven el viejo o el nuevo
        snapshot = MappingProxyType(build_all_tracker_calculation_sets(state))
        self._calculations = snapshot
        logger.debug("Rebuilt calculations for %d tracker(s)", len(snapshot))
        return snapshot

    def calculation_set(self, source: Optional[str]) -> Optional[TrackerCalculations]:
        if not source:
            return None
        return self._calculations.get(source)
