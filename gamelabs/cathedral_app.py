"""The Cathedral board game: a board, the pieces on offer and a minimax opponent."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from gamelabs.ai import Ai
from gamelabs.board import TILE_OUTLINE, Grid
from gamelabs.manager import PieceManager
from gamelabs.pieces import OUTLINE_COLOUR

WINDOW_SIZE = (1200, 800)
PIECES_START = (700.0, 50.0)
FRAME_RATE = 60


class CathedralApp:
    """Game state for one session, advanced one frame at a time."""

    def __init__(self) -> None:
        self.grid = Grid()
        self.manager = PieceManager(PIECES_START)
        self.ai = Ai(self.manager, self.grid)

    def frame(self, mouse: tuple[float, float], pressed: bool) -> Optional[int]:
        """Handle one frame of input at the mouse position.

        Returns the tile index the opponent chose, if it moved this frame.
        """
        x, y = mouse
        self.manager.click(x, y, pressed)
        move = self.ai.update()
        self.manager.tile_click(self.grid, x, y, pressed)
        self.manager.preview(self.grid, x, y)
        return move

    def draw(self, surface) -> None:
        """Draw the board and the pieces on offer onto a pygame surface."""
        import pygame

        for tile in self.grid:
            left, top, width, height = tile.rect()
            rect = pygame.Rect(int(left), int(top), int(width), int(height))
            pygame.draw.rect(surface, tile.colour, rect)
            pygame.draw.rect(
                surface,
                OUTLINE_COLOUR,
                rect.inflate(2 * TILE_OUTLINE, 2 * TILE_OUTLINE),
                TILE_OUTLINE,
            )
        for piece in self.manager.pieces:
            for square in piece.squares():
                rect = pygame.Rect(
                    int(square.x), int(square.y), int(square.size), int(square.size)
                )
                pygame.draw.rect(surface, square.colour, rect)
                thickness = int(square.outline_thickness)
                pygame.draw.rect(
                    surface, square.outline, rect.inflate(2 * thickness, 2 * thickness), thickness
                )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="cathedral", description="Play Cathedral.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Cathedral")
        clock = pygame.time.Clock()
        app = CathedralApp()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if pygame.key.get_pressed()[pygame.K_ESCAPE]:
                running = False
            if not running:
                break
            surface.fill((0, 0, 0))
            app.frame(pygame.mouse.get_pos(), bool(pygame.mouse.get_pressed()[0]))
            app.draw(surface)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0