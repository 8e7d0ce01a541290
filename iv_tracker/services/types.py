ALL_TYPES = [
    "Normal","Fire","Water","Electric","Grass","Ice",
    "Fighting","Poison","Ground","Flying","Psychic","Bug",
    "Rock","Ghost","Dragon","Dark","Steel","Fairy",
]

# Nombres normalizados (minúsculas) tal como se escriben en las definiciones de la ruta
TYPE_NAMES = [t.lower() for t in ALL_TYPES]


def is_type_name(name: str) -> bool:
    return (name or "").strip().lower() in TYPE_NAMES
