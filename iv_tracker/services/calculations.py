from math import ceil, floor, sqrt
from typing import Dict, Optional

from ..models.tracker import STATS, StatLine
from ..utils.nature import nature_multiplier

LEGACY_GENERATION = 2


def _stat_exp_bonus(ev: int) -> int:
    # la raíz de la experiencia de stat se satura en 255
    return floor(min(255, ceil(sqrt(ev))) / 4)


def calc_hp(level: int, base: int, iv: int, ev: int, generation: int) -> int:
    if generation <= LEGACY_GENERATION:
        return floor((((base + iv) * 2 + _stat_exp_bonus(ev)) * level) / 100) + level + 10
    return floor(((2 * base + iv + floor(ev / 4)) * level) / 100) + level + 10


def calc_legacy_stat(level: int, base: int, iv: int, ev: int) -> int:
    return floor((((base + iv) * 2 + _stat_exp_bonus(ev)) * level) / 100) + 5


def calc_stat(level: int, base: int, iv: int, ev: int, modifier: float) -> int:
    return floor((floor(((2 * base + iv + floor(ev / 4)) * level) / 100) + 5) * modifier)


def stat_value(
    stat: str,
    level: int,
    base_stat: int,
    iv: int,
    ev: int,
    modifier: float,
    generation: int,
) -> int:
    if stat == "hp":
        return calc_hp(level, base_stat, iv, ev, generation)
    if generation <= LEGACY_GENERATION:
        return calc_legacy_stat(level, base_stat, iv, ev)
    return calc_stat(level, base_stat, iv, ev, modifier)


def compute_stats(
    level: int,
    base_stats: StatLine,
    ivs: StatLine,
    evs: Optional[StatLine] = None,
    nature: Optional[str] = None,
    generation: int = 5,
) -> Dict[str, int]:
    """Stats finales de una línea completa (útil para comprobar observaciones a mano)."""
    evs = evs or {}
    return {
        stat: stat_value(
            stat,
            level,
            base_stats[stat],
            ivs[stat],
            evs.get(stat, 0),
            nature_multiplier(stat, nature),
            generation,
        )
        for stat in STATS
    }
