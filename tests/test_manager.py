import pytest

from gamelabs.board import Grid
from gamelabs.manager import PieceManager
from gamelabs.pieces import (
    GRID_SIZE,
    PIECE_COLOUR,
    PREVIEW_COLOUR,
    TILE_SIZE,
    PieceType,
    shape_matrix,
)

INTERIOR = 5 * GRID_SIZE + 5
OTHER_INTERIOR = 7 * GRID_SIZE + 7


@pytest.fixture
def grid():
    return Grid()


@pytest.fixture
def manager():
    return PieceManager((700, 50))


def centre(grid, index):
    tile = grid[index]
    return tile.x + tile.tile_size / 2, tile.y + tile.tile_size / 2


def taken_count(grid):
    return sum(grid.taken_state())


def test_pieces_offered_in_order(manager):
    kinds = [piece.piece_type for piece in manager.pieces]
    assert kinds == [kind for kind in PieceType if kind >= PieceType.TAVERN]
    assert manager.pieces[0].position == (700.0, 50.0)
    assert manager.pieces[3].position == (700.0, 50.0 + 3 * TILE_SIZE)
    assert manager.pieces[1].position == (700.0 + 3 * TILE_SIZE, 50.0)


def test_initial_state(manager):
    assert manager.selected is None
    assert manager.start_ai is False


def test_piece_at(manager):
    assert manager.piece_at(710, 60) is PieceType.TAVERN
    assert manager.piece_at(0, 0) is None


def test_click_requires_press(manager):
    assert manager.click(710, 60, False) is None
    assert manager.click(710, 60, True) is PieceType.TAVERN
    assert manager.selected is PieceType.TAVERN


def test_select_border_clears(manager):
    manager.select(PieceType.SQUARE)
    assert manager.selected is PieceType.SQUARE
    manager.select(PieceType.BORDER)
    assert manager.selected is None


def test_tile_click_without_selection(manager, grid):
    before = grid.taken_state()
    x, y = centre(grid, INTERIOR)
    assert manager.tile_click(grid, x, y, True) is False
    assert grid.taken_state() == before


def test_tile_click_places_square(manager, grid):
    before = taken_count(grid)
    manager.select(PieceType.SQUARE)
    x, y = centre(grid, INTERIOR)
    assert manager.tile_click(grid, x, y, True) is True
    assert taken_count(grid) - before == sum(shape_matrix(PieceType.SQUARE))
    assert grid[INTERIOR].taken is True
    assert grid[INTERIOR].colour == PIECE_COLOUR
    assert manager.start_ai is True
    assert manager.selected is None


def test_tile_click_not_pressed_keeps_selection(manager, grid):
    manager.select(PieceType.SQUARE)
    x, y = centre(grid, INTERIOR)
    assert manager.tile_click(grid, x, y, False) is False
    assert manager.selected is PieceType.SQUARE
    assert grid[INTERIOR].taken is False


def test_tile_click_on_taken_area_fails(manager, grid):
    x, y = centre(grid, INTERIOR)
    manager.select(PieceType.SQUARE)
    manager.tile_click(grid, x, y, True)
    before = grid.taken_state()
    manager.select(PieceType.SQUARE)
    assert manager.tile_click(grid, x, y, True) is False
    assert grid.taken_state() == before
    assert manager.selected is PieceType.SQUARE


def test_tile_click_next_to_border_fails(manager, grid):
    manager.select(PieceType.INFIRMARY)
    x, y = centre(grid, GRID_SIZE + 1)
    assert manager.tile_click(grid, x, y, True) is False
    assert manager.start_ai is False


def test_tile_click_cathedral(manager, grid):
    before = taken_count(grid)
    manager.select(PieceType.CATHEDRAL)
    x, y = centre(grid, INTERIOR)
    assert manager.tile_click(grid, x, y, True) is True
    assert taken_count(grid) - before == sum(shape_matrix(PieceType.CATHEDRAL))


def test_preview_highlights_footprint(manager, grid):
    manager.select(PieceType.INFIRMARY)
    size = sum(shape_matrix(PieceType.INFIRMARY))
    manager.preview(grid, *centre(grid, INTERIOR))
    assert sum(tile.colour == PREVIEW_COLOUR for tile in grid) == size
    assert grid[INTERIOR].colour == PREVIEW_COLOUR
    manager.preview(grid, *centre(grid, OTHER_INTERIOR))
    assert sum(tile.colour == PREVIEW_COLOUR for tile in grid) == size
    assert grid[INTERIOR].colour != PREVIEW_COLOUR
    assert grid[OTHER_INTERIOR].colour == PREVIEW_COLOUR


def test_preview_cathedral(manager, grid):
    manager.select(PieceType.CATHEDRAL)
    manager.preview(grid, *centre(grid, INTERIOR))
    highlighted = sum(tile.colour == PREVIEW_COLOUR for tile in grid)
    assert highlighted == sum(shape_matrix(PieceType.CATHEDRAL))


def test_preview_without_selection_changes_nothing(manager, grid):
    colours = [tile.colour for tile in grid]
    manager.preview(grid, *centre(grid, INTERIOR))
    assert [tile.colour for tile in grid] == colours


def test_preview_skips_taken_tiles(manager, grid):
    manager.select(PieceType.SQUARE)
    manager.tile_click(grid, *centre(grid, INTERIOR), True)
    manager.select(PieceType.SQUARE)
    manager.preview(grid, *centre(grid, INTERIOR))
    assert grid[INTERIOR].colour == PIECE_COLOUR


def test_can_place(manager, grid):
    assert manager.can_place(PieceType.TAVERN, 0, grid) is False
    assert manager.can_place(PieceType.TAVERN, INTERIOR, grid) is True


def test_place_and_remove(manager, grid):
    original = grid.taken_state()
    manager.place(PieceType.TAVERN, INTERIOR, grid, True)
    assert taken_count(grid) == sum(original) + 1
    assert manager.can_place(PieceType.TAVERN, INTERIOR, grid) is False
    manager.place(PieceType.TAVERN, INTERIOR, grid, False)
    assert grid.taken_state() == original
    assert manager.can_place(PieceType.TAVERN, INTERIOR, grid) is True


def test_invalid_piece_type(manager, grid):
    with pytest.raises(ValueError):
        manager.can_place(99, INTERIOR, grid)