"""An interactive flocking and swarming simulation."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from gamelabs.boids import Boid, Flock, heading_angle
from gamelabs.pieces import Colour

BOID_SIZE = 3.0
ENEMY_SIZE = 10.0
BOID_COLOUR: Colour = (0, 255, 0)
PREDATOR_COLOUR: Colour = (255, 0, 0)
OUTLINE_COLOUR: Colour = (255, 255, 255)
DEFAULT_COUNT = 500
FRAME_RATE = 60.0
FONT_PATH = "assets/fonts/ariblk.ttf"


@dataclass(frozen=True)
class BoidShape:
    """How one boid is drawn: a triangle at a position, turned by a rotation in degrees."""

    x: float
    y: float
    rotation: float
    radius: float
    colour: Colour
    outline: Colour = OUTLINE_COLOUR

    def points(self) -> list[tuple[float, float]]:
        """Corners of the triangle, rotated about the shape's position."""
        turn = math.radians(self.rotation)
        cos_t, sin_t = math.cos(turn), math.sin(turn)
        corners = []
        for i in range(3):
            angle = i * 2 * math.pi / 3 - math.pi / 2
            lx = self.radius + self.radius * math.cos(angle)
            ly = self.radius + self.radius * math.sin(angle)
            corners.append(
                (self.x + lx * cos_t - ly * sin_t, self.y + lx * sin_t + ly * cos_t)
            )
        return corners


class FlockSimulation:
    """A flock inside a bounded area together with the shapes that display it."""

    def __init__(
        self,
        width: int,
        height: int,
        count: int = DEFAULT_COUNT,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.action = "flock"
        self.flock = Flock()
        self._shapes: list[BoidShape] = []
        for _ in range(count):
            boid = Boid(
                self.rng.randrange(width), self.rng.randrange(height), False, self.rng
            )
            self.flock.add(boid)
            self._shapes.append(
                BoidShape(float(width), float(height), 0.0, BOID_SIZE, BOID_COLOUR)
            )

    def toggle_action(self) -> str:
        """Switch between flocking and swarming; returns the new action."""
        self.action = "swarm" if self.action == "flock" else "flock"
        return self.action

    def add_predator(self, x: float, y: float) -> Boid:
        """Add a predator at the point and return it."""
        boid = Boid(x, y, True, self.rng)
        self.flock.add(boid)
        self._shapes.append(
            BoidShape(float(x), float(y), 0.0, ENEMY_SIZE, PREDATOR_COLOUR)
        )
        return boid

    def step(self) -> None:
        """Match every shape to its boid, then move the flock one step."""
        self._shapes = [
            replace(
                shape,
                x=boid.location.x,
                y=boid.location.y,
                rotation=heading_angle(boid.velocity),
            )
            for shape, boid in zip(self._shapes, self.flock)
        ]
        if self.action == "flock":
            self.flock.flocking(self.width, self.height)
        else:
            self.flock.swarming(self.width, self.height)

    def shapes(self) -> list[BoidShape]:
        """The shapes as they were last matched to the boids."""
        return list(self._shapes)


def _load_font(pygame):
    try:
        font = pygame.font.Font(FONT_PATH, 30)
    except (OSError, FileNotFoundError):
        print("failed loading ariblk.ttf font file")
        return None
    print("successfully loaded ariblk.ttf font file")
    return font


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open a borderless window and run the simulation until Escape or close."""
    parser = argparse.ArgumentParser(prog="flock", description="Watch boids flock.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="number of boids")
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        info = pygame.display.Info()
        desktop_w, desktop_h = info.current_w, info.current_h
        surface = pygame.display.set_mode(
            (max(desktop_w - 100, 1), max(desktop_h - 100, 1)), pygame.NOFRAME
        )
        pygame.display.set_caption("Flocking")
        font = _load_font(pygame)
        sim = FlockSimulation(desktop_w, desktop_h, args.count)
        clock = pygame.time.Clock()
        frame_time = 1.0 / FRAME_RATE
        elapsed = 0.0
        exiting = False

        def process_events() -> bool:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return True
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        return True
                    if event.key == pygame.K_SPACE:
                        sim.toggle_action()
                if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    sim.add_predator(*event.pos)
            return False

        while not exiting:
            exiting = process_events()
            elapsed += clock.tick() / 1000.0
            while elapsed > frame_time and not exiting:
                elapsed -= frame_time
                exiting = process_events()
                sim.step()
            surface.fill((0, 0, 0))
            for shape in sim.shapes():
                corners = shape.points()
                pygame.draw.polygon(surface, shape.colour, corners)
                pygame.draw.polygon(surface, shape.outline, corners, 1)
            if font is not None:
                surface.blit(font.render(sim.action, True, (255, 255, 255)), (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()
    return 0