from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional

from ..utils.range_utils import int_range
from .tracker import Tracker

MIN_IV = 0
MAX_IV = 31

REGIMES = ("negative", "neutral", "positive")


@dataclass(frozen=True)
class IVRange:
    low: int
    high: int

    def values(self) -> List[int]:
        return int_range(self.low, self.high)

    def as_pair(self) -> tuple[int, int]:
        return (self.low, self.high)


FULL_IV_RANGE = IVRange(MIN_IV, MAX_IV)


def span(ranges) -> Optional[IVRange]:
    """Rango envolvente de los intervalos no vacíos (None si no queda ninguno)."""
    present = [r for r in ranges if r is not None]
    if not present:
        return None
    return IVRange(min(r.low for r in present), max(r.high for r in present))


@dataclass(frozen=True)
class IVRangeSet:
    # None = régimen imposible para las observaciones
    negative: Optional[IVRange]
    neutral: Optional[IVRange]
    positive: Optional[IVRange]
    combined: Optional[IVRange]

    def regime(self, key: str) -> Optional[IVRange]:
        if key not in REGIMES:
            raise ValueError(f"Unknown regime '{key}'")
        return getattr(self, key)


class ConfirmedNature(NamedTuple):
    decreased: Optional[str] = None
    increased: Optional[str] = None


@dataclass(frozen=True)
class StatValuePossibilitySet:
    possible: List[int] = field(default_factory=list)
    valid: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class TrackerCalculations:
    iv_ranges: Dict[str, IVRangeSet]
    confirmed_nature: ConfirmedNature
    variables: Dict[str, Any]
    hidden_power_type: Optional[str]
    tracker: Tracker
