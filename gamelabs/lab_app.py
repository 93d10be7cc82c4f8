"""A steerable player and a wandering character in a simple window."""

from __future__ import annotations

import argparse
import math
from typing import Collection, Optional, Sequence

WINDOW_SIZE = (1200, 800)
FRAME_RATE = 60
PLAYER_TEXTURE = "ASSETS/ART/playerTexture.png"
NPC_TEXTURE = "ASSETS/ART/npcTexture.png"

_PI = 3.141592
MAX_VELOCITY = 5.0
ACCELERATION = 0.1
FRICTION = 0.01
NPC_SPEED = 2.0

KEY_FORWARD = "w"
KEY_BACK = "s"
KEY_RIGHT = "d"
KEY_LEFT = "a"


class Player:
    """A ship that accelerates along its heading and turns on the spot."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 50.0
        self.scale = 0.20
        self.rotation = 0.0
        self.velocity = 0.0
        self.rotation_speed = 5.0

    def update(self, keys: Collection[str], width: float) -> None:
        """Move one frame with the pressed keys ("w", "a", "s", "d") and wrap at ``width``."""
        radians = self.rotation * (_PI / 180.0)
        self.x += math.cos(radians) * self.velocity
        self.y += math.sin(radians) * self.velocity

        if self.velocity > 0.0:
            self.velocity -= FRICTION

        if self.x > width:
            self.x = 0.0

        if KEY_FORWARD in keys and self.velocity < MAX_VELOCITY:
            self.velocity += ACCELERATION
        if KEY_BACK in keys and self.velocity > 0.0:
            self.velocity -= ACCELERATION
        if KEY_RIGHT in keys:
            self.rotation = (self.rotation + self.rotation_speed) % 360
        if KEY_LEFT in keys:
            self.rotation = (self.rotation - self.rotation_speed) % 360


class Npc:
    """A character that walks right and reappears on the left."""

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 150.0
        self.scale = 0.45

    def update(self, width: float) -> None:
        self.x += NPC_SPEED
        if self.x > width:
            self.x = 0.0


def _load_sprite(pygame, path: str, scale: float):
    try:
        image = pygame.image.load(path)
    except (OSError, FileNotFoundError, pygame.error):
        return None
    w, h = image.get_size()
    return pygame.transform.smoothscale(
        image, (max(int(w * scale), 1), max(int(h * scale), 1))
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="lab", description="Drive the player around.")
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("Lab")
        clock = pygame.time.Clock()
        player = Player()
        npc = Npc()
        player_image = _load_sprite(pygame, PLAYER_TEXTURE, player.scale)
        npc_image = _load_sprite(pygame, NPC_TEXTURE, npc.scale)
        key_map = {
            pygame.K_w: KEY_FORWARD,
            pygame.K_s: KEY_BACK,
            pygame.K_d: KEY_RIGHT,
            pygame.K_a: KEY_LEFT,
        }
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if not running:
                break
            pressed = pygame.key.get_pressed()
            keys = {name for code, name in key_map.items() if pressed[code]}
            width = surface.get_width()
            surface.fill((0, 0, 0))
            player.update(keys, width)
            if player_image is not None:
                turned = pygame.transform.rotate(player_image, -player.rotation)
                surface.blit(turned, turned.get_rect(center=(player.x, player.y)))
            npc.update(width)
            if npc_image is not None:
                surface.blit(npc_image, (npc.x, npc.y))
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()
    return 0