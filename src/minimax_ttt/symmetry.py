"""
Dihedral symmetries of the 3x3 grid.
Teaching notes:
- The square has 8 symmetries; a position and its images have the same game value.
- Each symmetry is stored as a permutation: PERMS[kind][i] is where cell i lands.
- The canonical form of a board is the lexicographically smallest serialized image.
"""
from typing import Callable, Dict, List, Tuple

from .game_basics import serialize_board

_COORD_MAPS: Dict[str, Callable[[int, int], Tuple[int, int]]] = {
    'id': lambda r, c: (r, c),
    'rot90': lambda r, c: (c, 2 - r),
    'rot180': lambda r, c: (2 - r, 2 - c),
    'rot270': lambda r, c: (2 - c, r),
    'hflip': lambda r, c: (r, 2 - c),
    'vflip': lambda r, c: (2 - r, c),
    'd1': lambda r, c: (c, r),
    'd2': lambda r, c: (2 - c, 2 - r),
}

ALL_SYMS = list(_COORD_MAPS)


def _perm(kind: str) -> List[int]:
    f = _COORD_MAPS[kind]
    out = []
    for i in range(9):
        r, c = f(i // 3, i % 3)
        out.append(3 * r + c)
    return out


PERMS = {k: _perm(k) for k in ALL_SYMS}


def apply_action_transform(action: int, kind: str) -> int:
    if kind not in PERMS:
        raise ValueError(f"Unknown transformation: {kind}")
    return PERMS[kind][action]


def transform_board(board: List[int], kind: str) -> List[int]:
    if kind not in PERMS:
        raise ValueError(f"Unknown transformation: {kind}")
    out = [0] * 9
    for i, target in enumerate(PERMS[kind]):
        out[target] = board[i]
    return out


def canonical_form(board: List[int]) -> Tuple[str, str]:
    """(smallest serialized image, symmetry that produces it)."""
    images = sorted((serialize_board(transform_board(board, k)), k) for k in ALL_SYMS)
    return images[0]


def orbit_size(board: List[int]) -> int:
    return len({serialize_board(transform_board(board, k)) for k in ALL_SYMS})
