"""Piece kinds, teams, board constants and piece shapes for the Cathedral board game."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Union

MAX_GRID = 144
TILE_SIZE = 50
GRID_SIZE = 12
PIECE_MAX = 14

Colour = tuple[int, int, int]

WHITE_TILE_COLOUR: Colour = (204, 204, 204)
BLACK_TILE_COLOUR: Colour = (28, 28, 36)
BORDER_COLOUR: Colour = (150, 77, 34)
PIECE_COLOUR: Colour = (238, 220, 151)
CATHEDRAL_COLOUR: Colour = (212, 212, 212)
PREVIEW_COLOUR: Colour = (123, 166, 230)
OUTLINE_COLOUR: Colour = (0, 0, 0)


class PieceType(IntEnum):
    """Board tile kinds followed by the playing pieces."""

    BORDER = 0
    BG_WHITE = 1
    BG_BLACK = 2
    TAVERN = 3
    STABLE = 4
    INN = 5
    BRIDGE = 6
    SQUARE = 7
    MANOR = 8
    ABBEY = 9
    ACADEMY = 10
    INFIRMARY = 11
    CASTLE = 12
    TOWER = 13
    CATHEDRAL = 14


class Team(Enum):
    WHITE = "white"
    BLACK = "black"


_EMPTY_SHAPE = (0, 0, 0, 0, 0, 0, 0, 0, 0)

_SHAPES: dict[PieceType, tuple[int, ...]] = {
    PieceType.TAVERN: (1, 0, 0,
                       0, 0, 0,
                       0, 0, 0),
    PieceType.STABLE: (1, 0, 0,
                       1, 0, 0,
                       0, 0, 0),
    PieceType.INN: (1, 0, 0,
                    1, 1, 0,
                    0, 0, 0),
    PieceType.BRIDGE: (0, 1, 0,
                       0, 1, 0,
                       0, 1, 0),
    PieceType.SQUARE: (1, 1, 0,
                       1, 1, 0,
                       0, 0, 0),
    PieceType.MANOR: (0, 1, 0,
                      1, 1, 1,
                      0, 0, 0),
    PieceType.CASTLE: (1, 0, 1,
                       1, 1, 1,
                       0, 0, 0),
    PieceType.TOWER: (0, 0, 1,
                      0, 1, 1,
                      1, 1, 0),
    PieceType.ABBEY: (1, 0, 0,
                      1, 1, 0,
                      0, 1, 0),
    PieceType.ACADEMY: (0, 1, 0,
                        1, 1, 0,
                        0, 1, 1),
    PieceType.INFIRMARY: (0, 1, 0,
                          1, 1, 1,
                          0, 1, 0),
    PieceType.CATHEDRAL: (0, 1, 0,
                          1, 1, 1,
                          0, 1, 0,
                          0, 1, 0),
}


def shape_matrix(piece_type: Union[PieceType, int]) -> tuple[int, ...]:
    """Row-major occupancy matrix of a piece; board tile kinds have an empty 3x3 matrix."""
    return _SHAPES.get(PieceType(piece_type), _EMPTY_SHAPE)


def matrix_dimensions(piece_type: Union[PieceType, int]) -> tuple[int, int]:
    """Rows and columns of the piece's matrix: 4x3 for the cathedral, 3x3 otherwise."""
    if PieceType(piece_type) is PieceType.CATHEDRAL:
        return 4, 3
    return 3, 3


@dataclass(frozen=True)
class Square:
    """One drawn cell of a piece."""

    x: float
    y: float
    size: float
    colour: Colour
    outline: Colour = OUTLINE_COLOUR
    outline_thickness: float = 2


@dataclass
class Piece:
    """A playing piece at a screen position, made of square cells."""

    piece_type: PieceType = PieceType.BORDER
    position: tuple[float, float] = (0.0, 0.0)
    team: Team = Team.WHITE
    matrix: tuple[int, ...] = field(init=False)

    def __init__(
        self,
        piece_type: Union[PieceType, int] = PieceType.BORDER,
        position: tuple[float, float] = (0.0, 0.0),
        team: Team = Team.WHITE,
    ) -> None:
        self.piece_type = PieceType(piece_type)
        self.position = (float(position[0]), float(position[1]))
        self.team = team
        self.matrix = shape_matrix(self.piece_type)

    def squares(self) -> list[Square]:
        """The cells to draw, laid out on a grid of ``TILE_SIZE`` from the position."""
        rows, cols = matrix_dimensions(self.piece_type)
        colour = CATHEDRAL_COLOUR if self.piece_type is PieceType.CATHEDRAL else PIECE_COLOUR
        px, py = self.position
        return [
            Square(px + col * TILE_SIZE, py + row * TILE_SIZE, TILE_SIZE - 2, colour)
            for row in range(rows)
            for col in range(cols)
            if self.matrix[row * cols + col] == 1
        ]