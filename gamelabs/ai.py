"""A minimax opponent for the Cathedral board game."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from gamelabs.board import Grid
from gamelabs.manager import PieceManager
from gamelabs.pieces import GRID_SIZE, PieceType, shape_matrix

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
MAX_DEPTH = 2

_SHAPE_SIZE = 3
_CELL_OFFSET = 3


def evaluate_board(state: Sequence[bool]) -> int:
    """Score a board: every taken tile counts more the closer it is to the centre."""
    size = math.isqrt(len(state))
    centre = size // 2
    score = 0
    for index, taken in enumerate(state):
        if taken:
            row, col = divmod(index, size)
            score += size - (abs(row - centre) + abs(col - centre))
    return score


class Ai:
    """Chooses a move with a fixed-depth minimax search over taken-tile states."""

    def __init__(self, manager: PieceManager, grid: Grid) -> None:
        self.manager = manager
        self.grid = grid
        self.runs = 0
        self._shape = shape_matrix(PieceType.TOWER)

    def update(self) -> Optional[int]:
        """Run the search when the manager asks for it."""
        if self.manager.start_ai:
            return self.start()
        return None

    def possible_moves(self) -> list[bool]:
        """One True entry for every tile index where the tower shape fits on free tiles."""
        total = len(self.grid)
        moves = []
        for index in range(total):
            fits = True
            for row in range(_SHAPE_SIZE):
                for col in range(_SHAPE_SIZE):
                    if self._shape[row * _SHAPE_SIZE + col] != 1:
                        continue
                    target = index + row * GRID_SIZE + col
                    if target >= total or self.grid[target].taken:
                        fits = False
            if fits:
                moves.append(True)
        return moves

    def place_piece(self, state: Sequence[bool], cell: int) -> list[bool]:
        """A copy of ``state`` with the tower's in-bounds tiles marked taken."""
        result = list(state)
        start = cell - _CELL_OFFSET
        for row in range(_SHAPE_SIZE):
            for col in range(_SHAPE_SIZE):
                if self._shape[row * _SHAPE_SIZE + col] != 1:
                    continue
                target_row = start + row
                target_col = start + col
                if 0 <= target_row < GRID_SIZE and 0 <= target_col < GRID_SIZE:
                    result[target_row * GRID_SIZE + target_col] = True
        return result

    def start(self) -> Optional[int]:
        """Search for the best move; returns its tile index, or None if none exists."""
        print("startAi()")
        state = self.grid.taken_state()
        best_score = INT_MIN
        best_move = -1
        for index, taken in enumerate(state):
            if taken:
                continue
            score = self.minimax(0, False, self.place_piece(state, index))
            if score > best_score:
                best_score = score
                best_move = index
        if best_move != -1:
            self.manager.start_ai = False
        print(self.runs)
        print(f"BEST MOVE: {best_move}")
        return best_move if best_move != -1 else None

    def minimax(self, depth: int, maximising: bool, state: Sequence[bool]) -> int:
        """Best reachable score; the minimising side keeps minimising at every depth."""
        if depth == MAX_DEPTH:
            return evaluate_board(state)
        self.runs += 1
        free = [index for index, taken in enumerate(state) if not taken]
        if maximising:
            best = INT_MIN
            for index in free:
                best = max(
                    best,
                    self.minimax(depth + 1, not maximising, self.place_piece(state, index)),
                )
            return best
        best = INT_MAX
        for index in free:
            best = min(
                best,
                self.minimax(depth + 1, maximising, self.place_piece(state, index)),
            )
        return best