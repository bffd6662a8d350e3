"""
Game basics: board representation, marks, win lines, serialization, validity.
Teaching notes:
- A board is a mutable list of 9 cells: 0=empty, 1=X, 2=O. X always starts.
- Cell i sits at row i // 3, column i % 3.
- The engine mutates boards in place during search, so boards are lists, not tuples.
"""
from typing import List, Optional, Tuple

EMPTY = 0
X = 1
O = 2

MARK_SYMBOLS = {EMPTY: '.', X: 'X', O: 'O'}

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def new_board() -> List[int]:
    return [EMPTY] * 9


def other(mark: int) -> int:
    return O if mark == X else X


def parse_mark(raw: str) -> int:
    """Accept 'X'/'O' (any case) or '1'/'2'."""
    key = raw.strip().upper()
    if key in ('X', '1'):
        return X
    if key in ('O', '2'):
        return O
    raise ValueError(f"Unknown mark: {raw!r}")


def serialize_board(board: List[int]) -> str:
    return ''.join(str(cell) for cell in board)


def deserialize_board(board_str: str) -> List[int]:
    raw = board_str.strip()
    if len(raw) != 9 or any(c not in '012' for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
    return [int(c) for c in raw]


def format_board(board: List[int]) -> str:
    rows = []
    for r in range(3):
        rows.append(' '.join(MARK_SYMBOLS[board[3 * r + c]] for c in range(3)))
    return '\n'.join(rows)


def winning_line(board: List[int]) -> Optional[Tuple[int, int, int]]:
    """First completed line in WIN_LINES order, or None."""
    for line in WIN_LINES:
        a, b, c = line
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return line
    return None


def get_winner(board: List[int]) -> int:
    line = winning_line(board)
    return board[line[0]] if line is not None else EMPTY


def is_full(board: List[int]) -> bool:
    return EMPTY not in board


def is_draw(board: List[int]) -> bool:
    return is_full(board) and get_winner(board) == EMPTY


def empty_cells(board: List[int]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def get_piece_counts(board: List[int]) -> Tuple[int, int]:
    return board.count(X), board.count(O)


def is_valid_state(board: List[int]) -> bool:
    """True for boards reachable by alternating play with X first."""
    if len(board) != 9 or any(v not in (EMPTY, X, O) for v in board):
        return False
    x_count, o_count = get_piece_counts(board)
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def count_wins(p: int) -> int:
        return sum(1 for line in WIN_LINES if all(board[i] == p for i in line))

    x_wins, o_wins = count_wins(X), count_wins(O)
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


def current_player(board: List[int]) -> int:
    x, o = get_piece_counts(board)
    return X if x == o else O
