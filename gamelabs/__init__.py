"""Boids flocking, a Cathedral board with a minimax opponent, and a sprite movement lab."""

__version__ = "0.1.0"