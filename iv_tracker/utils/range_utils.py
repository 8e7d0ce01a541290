from typing import List, Sequence


def int_range(start: int, end: int) -> List[int]:
    """Enteros de start a end, ambos incluidos."""
    return list(range(start, end + 1))


def ranges_overlap(a: Sequence[int], b: Sequence[int]) -> bool:
    return a[0] <= b[1] and b[0] <= a[1]
