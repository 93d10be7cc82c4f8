"""Selection, preview and placement of pieces on the Cathedral board."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from gamelabs.board import Grid
from gamelabs.pieces import (
    GRID_SIZE,
    PIECE_COLOUR,
    PIECE_MAX,
    PREVIEW_COLOUR,
    TILE_SIZE,
    WHITE_TILE_COLOUR,
    Piece,
    PieceType,
    matrix_dimensions,
    shape_matrix,
)

_FIRST_PLAYING_PIECE = PieceType.TAVERN.value
_PIECES_PER_ROW = 3
_PIECE_BOX = 3 * TILE_SIZE
_VALID_TYPES = {member.value for member in PieceType}


def _in_bounds(row: int, col: int) -> bool:
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


def _footprint(
    piece_type: PieceType, tile_index: int, rows: int, cols: int
) -> Iterator[tuple[int, int]]:
    """Board (row, col) of every filled matrix cell, centred on ``tile_index``."""
    matrix = shape_matrix(piece_type)
    start_row = tile_index // GRID_SIZE - rows // 2
    start_col = tile_index % GRID_SIZE - cols // 2
    for row in range(rows):
        for col in range(cols):
            if matrix[row * cols + col] == 1:
                yield start_row + row, start_col + col


class PieceManager:
    """Holds the pieces on offer, the current selection and places pieces on a grid."""

    def __init__(self, start: tuple[float, float]) -> None:
        self.start = (float(start[0]), float(start[1]))
        self.selected: Optional[PieceType] = None
        self.start_ai = False
        self.pieces: list[Piece] = []
        sx, sy = self.start
        for position in range(PIECE_MAX):
            value = position + _FIRST_PLAYING_PIECE
            # Slots past the last piece kind have no shape and are not offered.
            if value not in _VALID_TYPES:
                continue
            row, col = divmod(position, _PIECES_PER_ROW)
            self.pieces.append(
                Piece(value, (sx + col * _PIECE_BOX, sy + row * _PIECE_BOX))
            )

    def select(self, piece_type: Optional[Union[PieceType, int]]) -> None:
        """Remember the piece kind to place next; None or BORDER clears it."""
        if piece_type is None or PieceType(piece_type) is PieceType.BORDER:
            self.selected = None
        else:
            self.selected = PieceType(piece_type)

    def piece_at(self, x: float, y: float) -> Optional[PieceType]:
        """Kind of the last offered piece whose box contains the point, or None."""
        found = None
        for piece in self.pieces:
            px, py = piece.position
            if px <= x <= px + _PIECE_BOX and py <= y <= py + _PIECE_BOX:
                found = piece.piece_type
        return found

    def click(self, x: float, y: float, pressed: bool) -> Optional[PieceType]:
        """Select the piece under the point when the button is pressed."""
        piece_type = self.piece_at(x, y)
        if pressed and piece_type is not None:
            self.select(piece_type)
        return self.selected

    def tile_click(self, grid: Grid, x: float, y: float, pressed: bool) -> bool:
        """Place the selected piece centred on the tile under the point.

        Returns True when the piece was placed.
        """
        if self.selected is None:
            return False
        index = grid.tile_at(x, y)
        if index is None:
            return False
        rows, cols = matrix_dimensions(self.selected)
        cells = list(_footprint(self.selected, index, rows, cols))
        placeable = all(
            _in_bounds(row, col) and not grid[row * GRID_SIZE + col].taken
            for row, col in cells
        )
        if not (pressed and placeable):
            return False
        for row, col in cells:
            tile = grid[row * GRID_SIZE + col]
            tile.colour = PIECE_COLOUR
            tile.taken = True
            self.start_ai = True
        self.selected = None
        return True

    def preview(self, grid: Grid, x: float, y: float) -> None:
        """Highlight the free tiles the selected piece would cover at the point."""
        if self.selected is None:
            return
        for tile in grid:
            if not tile.taken:
                tile.reset_colour()
        index = grid.tile_at(x, y)
        if index is None:
            return
        rows, cols = matrix_dimensions(self.selected)
        for row, col in _footprint(self.selected, index, rows, cols):
            if _in_bounds(row, col):
                tile = grid[row * GRID_SIZE + col]
                if not tile.taken:
                    tile.colour = PREVIEW_COLOUR

    def can_place(
        self, piece_type: Union[PieceType, int], tile_index: int, grid: Grid
    ) -> bool:
        """Whether the top 3x3 of the piece's shape fits on free tiles at the index."""
        for row, col in _footprint(PieceType(piece_type), tile_index, 3, 3):
            if not _in_bounds(row, col) or grid[row * GRID_SIZE + col].taken:
                return False
        return True

    def place(
        self,
        piece_type: Union[PieceType, int],
        tile_index: int,
        grid: Grid,
        place: bool,
    ) -> None:
        """Mark the piece's in-bounds tiles as taken, or free them again."""
        kind = PieceType(piece_type)
        rows, cols = matrix_dimensions(kind)
        for row, col in _footprint(kind, tile_index, rows, cols):
            if _in_bounds(row, col):
                tile = grid[row * GRID_SIZE + col]
                tile.taken = place
                tile.colour = PIECE_COLOUR if place else WHITE_TILE_COLOUR