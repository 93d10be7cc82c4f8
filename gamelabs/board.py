"""Board tiles and the square grid they form."""

from __future__ import annotations

from typing import Iterator, Optional

from gamelabs.pieces import (
    BLACK_TILE_COLOUR,
    BORDER_COLOUR,
    GRID_SIZE,
    MAX_GRID,
    TILE_SIZE,
    WHITE_TILE_COLOUR,
    Colour,
    PieceType,
)

BOARD_OFFSET = 50
TILE_OUTLINE = 1

_TYPE_COLOURS: dict[PieceType, Colour] = {
    PieceType.BG_WHITE: WHITE_TILE_COLOUR,
    PieceType.BG_BLACK: BLACK_TILE_COLOUR,
    PieceType.BORDER: BORDER_COLOUR,
}


class Tile:
    """One square of the board: border, light or dark, possibly taken."""

    def __init__(self, index: int, grid_size: int = GRID_SIZE, tile_size: int = TILE_SIZE) -> None:
        self.index = index
        self.grid_size = grid_size
        self.tile_size = tile_size
        self.x = float((index % grid_size) * tile_size + BOARD_OFFSET)
        self.y = float((index // grid_size) * tile_size + BOARD_OFFSET)
        self.taken = False

        col = index % grid_size
        if (
            index < grid_size
            or index >= grid_size * (grid_size - 1)
            or col == 0
            or col == grid_size - 1
        ):
            self.type = PieceType.BORDER
        elif (index + index // grid_size) % 2 == 0:
            self.type = PieceType.BG_BLACK
        else:
            self.type = PieceType.BG_WHITE

        self.colour: Colour = WHITE_TILE_COLOUR
        self.reset_colour()

    def reset_colour(self) -> None:
        """Restore the colour for the tile's kind; border tiles are always taken."""
        self.colour = _TYPE_COLOURS.get(self.type, self.colour)
        if self.type is PieceType.BORDER:
            self.taken = True

    def rect(self) -> tuple[float, float, float, float]:
        """The filled area as (left, top, width, height)."""
        return self.x, self.y, float(self.tile_size), float(self.tile_size)

    def contains(self, x: float, y: float) -> bool:
        """Whether a point lies within the tile's bounds, outline included."""
        left = self.x - TILE_OUTLINE
        top = self.y - TILE_OUTLINE
        extent = self.tile_size + 2 * TILE_OUTLINE
        return left <= x < left + extent and top <= y < top + extent


class Grid:
    """The square board of ``MAX_GRID`` tiles in row-major order."""

    def __init__(self) -> None:
        self._tiles = [Tile(index, GRID_SIZE, TILE_SIZE) for index in range(MAX_GRID)]

    def __len__(self) -> int:
        return len(self._tiles)

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def tile_at(self, x: float, y: float) -> Optional[int]:
        """Index of the first tile containing the point, or None."""
        return next(
            (tile.index for tile in self._tiles if tile.contains(x, y)),
            None,
        )

    def taken_state(self) -> list[bool]:
        """Whether each tile is taken, in board order."""
        return [tile.taken for tile in self._tiles]