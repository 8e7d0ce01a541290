"""Hidden Power type from the parity (lowest bit) of the six IVs.

Each IV is only known as a set of candidate values, so every one of the 64
odd/even combinations gets a probability: the product, over the six stats, of
the share of candidate values with the right parity. The most probable
combination decides the type.
"""
from math import floor
from typing import Dict, List, Optional, Tuple

from ..models.ranges import ConfirmedNature, IVRangeSet
from ..models.tracker import STATS
from ..utils.nature import admissible_regimes

HIDDEN_POWER_TYPES = [
    "Fighting",
    "Flying",
    "Poison",
    "Ground",
    "Rock",
    "Bug",
    "Ghost",
    "Steel",
    "Fire",
    "Water",
    "Grass",
    "Electric",
    "Psychic",
    "Ice",
    "Dragon",
    "Dark",
]

# peso de cada stat en el índice del tipo (orden hp, atk, def, spa, spd, spe)
HIDDEN_POWER_WEIGHTS = {
    "hp": 1,
    "attack": 2,
    "defense": 4,
    "speed": 8,
    "sp_attack": 16,
    "sp_defense": 32,
}

ParityCombination = Tuple[bool, bool, bool, bool, bool, bool]


def admissible_iv_values(range_set: IVRangeSet, stat: str, confirmed_nature: ConfirmedNature) -> List[int]:
    values = set()
    for key in admissible_regimes(stat, confirmed_nature).keys():
        iv_range = range_set.regime(key)
        if iv_range is not None:
            values.update(iv_range.values())
    return sorted(values)


def oddness_probability(values: List[int], odd: bool) -> float:
    if not values:
        return 0.0
    return len([v for v in values if v % 2 == (1 if odd else 0)]) / len(values)


def parity_combinations() -> List[ParityCombination]:
    """Las 64 combinaciones; hp es el bit más bajo y cambia más rápido."""
    return [tuple(bool(n >> i & 1) for i in range(len(STATS))) for n in range(2 ** len(STATS))]


def combination_probability(candidates: Dict[str, List[int]], combination: ParityCombination) -> float:
    probability = 1.0
    for stat, odd in zip(STATS, combination):
        probability *= oddness_probability(candidates[stat], odd)
    return probability


def hidden_power_index(combination: ParityCombination) -> int:
    total = sum(HIDDEN_POWER_WEIGHTS[stat] for stat, odd in zip(STATS, combination) if odd)
    return floor((total * 15) / 63)


def calculate_hidden_power_type(
    iv_ranges: Dict[str, IVRangeSet],
    confirmed_nature: ConfirmedNature,
) -> Optional[str]:
    candidates = {stat: admissible_iv_values(iv_ranges[stat], stat, confirmed_nature) for stat in STATS}

    best: Optional[ParityCombination] = None
    best_probability = 0.0
    for combination in parity_combinations():
        probability = combination_probability(candidates, combination)
        # estrictamente mayor: en empate gana la primera
        if probability > best_probability:
            best, best_probability = combination, probability

    if best is None:
        return None
    return HIDDEN_POWER_TYPES[hidden_power_index(best)]
