import logging
from typing import Dict, NamedTuple, Optional, Tuple

from ..models.ranges import ConfirmedNature

logger = logging.getLogger(__name__)

# nombre: (stat que sube, stat que baja); las neutras suben y bajan el mismo stat
NATURE_EFFECTS: Dict[str, Tuple[str, str]] = {
    "Hardy": ("attack", "attack"),
    "Lonely": ("attack", "defense"),
    "Brave": ("attack", "speed"),
    "Adamant": ("attack", "sp_attack"),
    "Naughty": ("attack", "sp_defense"),
    "Bold": ("defense", "attack"),
    "Docile": ("defense", "defense"),
    "Relaxed": ("defense", "speed"),
    "Impish": ("defense", "sp_attack"),
    "Lax": ("defense", "sp_defense"),
    "Timid": ("speed", "attack"),
    "Hasty": ("speed", "defense"),
    "Serious": ("speed", "speed"),
    "Jolly": ("speed", "sp_attack"),
    "Naive": ("speed", "sp_defense"),
    "Modest": ("sp_attack", "attack"),
    "Mild": ("sp_attack", "defense"),
    "Quiet": ("sp_attack", "speed"),
    "Bashful": ("sp_attack", "sp_attack"),
    "Rash": ("sp_attack", "sp_defense"),
    "Calm": ("sp_defense", "attack"),
    "Gentle": ("sp_defense", "defense"),
    "Sassy": ("sp_defense", "speed"),
    "Careful": ("sp_defense", "sp_attack"),
    "Quirky": ("sp_defense", "sp_defense"),
}

NATURE_MODIFIERS: Dict[str, float] = {
    "negative": 0.9,
    "neutral": 1.0,
    "positive": 1.1,
}

# Generaciones 1 y 2 no tienen naturaleza: se trata como neutra fija
NO_NATURE = ConfirmedNature("attack", "attack")


class AdmissibleRegimes(NamedTuple):
    negative: bool
    neutral: bool
    positive: bool

    def keys(self) -> list[str]:
        return [k for k, allowed in self._asdict().items() if allowed]


def nature_definition(nature: str) -> ConfirmedNature:
    """Devuelve (stat que baja, stat que sube). KeyError si el nombre no existe."""
    up, down = NATURE_EFFECTS[nature.capitalize()]
    return ConfirmedNature(down, up)


def static_nature_of(nature: Optional[str]) -> Optional[ConfirmedNature]:
    if not nature:
        return None
    effects = NATURE_EFFECTS.get(nature.capitalize())
    if effects is None:
        logger.debug("Unknown static nature '%s', treated as not set", nature)
        return None
    up, down = effects
    return ConfirmedNature(down, up)


def nature_multiplier(stat: str, nature: Optional[str]) -> float:
    if not nature or stat == "hp":
        return 1.0
    down, up = nature_definition(nature)
    if up == stat and down != stat:
        return NATURE_MODIFIERS["positive"]
    if down == stat and up != stat:
        return NATURE_MODIFIERS["negative"]
    return NATURE_MODIFIERS["neutral"]


def admissible_regimes(stat: str, confirmed_nature: ConfirmedNature) -> AdmissibleRegimes:
    """
    Qué regímenes (negativo / neutro / positivo) pueden aplicar a un stat
    sabiendo lo confirmado de la naturaleza.
    - HP nunca se ve afectado por la naturaleza.
    - Si el stat es a la vez el que baja y el que sube, la naturaleza es neutra.
    - Si ya se sabe qué stat baja (o sube) y no es este, ese régimen queda descartado.
    """
    decreased, increased = confirmed_nature
    if stat == "hp":
        return AdmissibleRegimes(False, True, False)
    if decreased == stat and increased == stat:
        return AdmissibleRegimes(False, True, False)
    if increased == stat:
        return AdmissibleRegimes(False, False, True)
    if decreased == stat:
        return AdmissibleRegimes(True, False, False)
    return AdmissibleRegimes(decreased is None, True, increased is None)
