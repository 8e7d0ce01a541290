from dataclasses import dataclass, field
from typing import Dict, List, Optional

STATS = ["hp", "attack", "defense", "sp_attack", "sp_defense", "speed"]

StatLine = Dict[str, int]


def empty_stat_line(value: int = 0) -> StatLine:
    return {k: value for k in STATS}


@dataclass
class Tracker:
    name: str
    species: str = ""
    generation: int = 5
    # una fila de base stats por etapa evolutiva
    base_stats: List[StatLine] = field(default_factory=list)
    evolution: int = 0
    starting_level: int = 5
    # {nivel inicial: {nivel: EVs acumulados}}
    ev_segments: Dict[int, Dict[int, StatLine]] = field(default_factory=dict)
    # {etapa evolutiva: {nivel: stats observados}}; 0 / ausente = sin dato
    recorded_stats: Dict[int, Dict[int, StatLine]] = field(default_factory=dict)
    static_ivs: StatLine = field(default_factory=dict)
    static_nature: Optional[str] = None
    direct_input: bool = False
    direct_input_ivs: StatLine = field(default_factory=empty_stat_line)
    manual_positive_nature: Optional[str] = None
    manual_negative_nature: Optional[str] = None

    def base_stat(self, stat: str, evolution: Optional[int] = None) -> int:
        evo = self.evolution if evolution is None else evolution
        if evo < 0 or evo >= len(self.base_stats):
            return 0
        return self.base_stats[evo].get(stat, 0)

    def ev_at(self, stat: str, level: int) -> int:
        return self.ev_segments.get(self.starting_level, {}).get(level, {}).get(stat, 0)


@dataclass
class RouteVariable:
    type: str = "string"
    value: Optional[str] = None


@dataclass
class RouteState:
    trackers: Dict[str, Tracker] = field(default_factory=dict)
    variables: Dict[str, RouteVariable] = field(default_factory=dict)
