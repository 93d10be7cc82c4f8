"""Boids that flock or swarm, and the flock that holds them."""

from __future__ import annotations

import math
import random
from typing import Iterator, Optional, Sequence

from gamelabs.vector import PI, Vector

DESIRED_SEPARATION = 20.0
PREDATOR_MARGIN = 70.0
PREDATOR_REPULSION = 900.0

SEPARATION_WEIGHT = 1.5
ALIGNMENT_WEIGHT = 1.0
COHESION_WEIGHT = 1.0
DAMPING = 0.4

SWARM_REPULSION = 95.0
SWARM_ATTRACTION = 26.0
SWARM_ATTRACT_EXPONENT = 0.74
SWARM_REPEL_EXPONENT = 1.0


class Boid:
    """A single agent with a location, velocity and acceleration."""

    def __init__(
        self,
        x: float,
        y: float,
        predator: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        source = rng if rng is not None else random
        self.predator = predator
        if predator:
            self.max_speed = 7.5
            self.max_force = 0.5
            self.velocity = Vector(source.randrange(3) - 1, source.randrange(3) - 1)
        else:
            self.max_speed = 3.5
            self.max_force = 0.5
            self.velocity = Vector(source.randrange(3) - 2, source.randrange(3) - 2)
        self.acceleration = Vector(0, 0)
        self.location = Vector(x, y)
        self.neighbour_distance = 50

    def apply_force(self, force: Vector) -> None:
        self.acceleration += force

    def separation(self, boids: Sequence[Boid]) -> Vector:
        """Steering away from boids that are too close, strongly from predators."""
        steer = Vector(0, 0)
        count = 0
        for other in boids:
            d = self.location.distance(other.location)
            if d >= self.neighbour_distance:
                continue
            if 0 < d < DESIRED_SEPARATION:
                diff = self.location - other.location
                diff.normalize()
                diff /= d
                steer += diff
                count += 1
            if 0 < d < DESIRED_SEPARATION and self.predator and other.predator:
                diff = self.location - other.location
                diff.normalize()
                diff /= d
                steer += diff
                count += 1
            elif 0 < d < DESIRED_SEPARATION + PREDATOR_MARGIN and other.predator:
                steer += (self.location - other.location) * PREDATOR_REPULSION
                count += 1
        if count > 0:
            steer /= count
        if steer.magnitude() > 0:
            steer.normalize()
            steer *= self.max_speed
            steer -= self.velocity
            steer.limit(self.max_force)
        return steer

    def alignment(self, boids: Sequence[Boid]) -> Vector:
        """Steering towards the average velocity of nearby boids."""
        total = Vector(0, 0)
        count = 0
        for other in boids:
            d = self.location.distance(other.location)
            if 0 < d < self.neighbour_distance:
                total += other.velocity
                count += 1
        if count == 0:
            return Vector(0, 0)
        total /= count
        total.normalize()
        total *= self.max_speed
        steer = total - self.velocity
        steer.limit(self.max_force)
        return steer

    def cohesion(self, boids: Sequence[Boid]) -> Vector:
        """Steering towards the average location of nearby boids."""
        total = Vector(0, 0)
        count = 0
        for other in boids:
            d = self.location.distance(other.location)
            if 0 < d < self.neighbour_distance:
                total += other.location
                count += 1
        if count == 0:
            return Vector(0, 0)
        total /= count
        return self.seek(total)

    def seek(self, target: Vector) -> Vector:
        """Limit the current acceleration to ``max_force`` and return a copy of it.

        The target does not influence the result; the steering it would
        produce is never folded back into the acceleration.
        """
        self.acceleration.limit(self.max_force)
        return self.acceleration.copy()

    def update(self) -> None:
        """Advance one step: damp acceleration, move, and reset acceleration."""
        self.acceleration *= DAMPING
        self.velocity += self.acceleration
        self.velocity.limit(self.max_speed)
        self.location += self.velocity
        self.acceleration *= 0

    def run(self, boids: Sequence[Boid], width: float, height: float) -> None:
        self.flock(boids)
        self.update()
        self.borders(width, height)

    def flock(self, boids: Sequence[Boid]) -> None:
        """Apply the weighted separation, alignment and cohesion forces."""
        sep = self.separation(boids) * SEPARATION_WEIGHT
        ali = self.alignment(boids) * ALIGNMENT_WEIGHT
        coh = self.cohesion(boids) * COHESION_WEIGHT
        self.apply_force(sep)
        self.apply_force(ali)
        self.apply_force(coh)

    def borders(self, width: float, height: float) -> None:
        """Wrap the boid to the opposite side when it leaves the area."""
        loc = self.location
        if loc.x < 0:
            loc.x = width
        if loc.y < 0:
            loc.y += height
        if loc.x > width:
            loc.x = 0
        if loc.y > height:
            loc.y = 0

    def swarm(
        self,
        boids: Sequence[Boid],
        width: float,
        height: float,
        loose: bool = False,
    ) -> None:
        """Move under a Lennard-Jones style potential from every other boid.

        With ``loose`` set the pairwise forces are summed rather than averaged.
        """
        total = Vector(0, 0)
        count = 0
        for other in boids:
            r = self.location - other.location
            mag = r.magnitude()
            if mag > 0:
                u = (
                    -SWARM_ATTRACTION / mag**SWARM_ATTRACT_EXPONENT
                    + SWARM_REPULSION / mag**SWARM_REPEL_EXPONENT
                )
                r.normalize()
                r *= u
                total += r
                count += 1
        if count > 0 and not loose:
            total /= count
        self.apply_force(total)
        self.update()
        self.borders(width, height)


def heading_angle(v: Vector) -> float:
    """Rotation in degrees for a shape pointing along ``v`` (0 is straight up)."""
    return math.atan2(v.x, -v.y) * 180 / PI


class Flock:
    """An ordered collection of boids that are updated together."""

    def __init__(self) -> None:
        self._boids: list[Boid] = []

    def add(self, boid: Boid) -> None:
        self._boids.append(boid)

    def __len__(self) -> int:
        return len(self._boids)

    def __getitem__(self, index: int) -> Boid:
        return self._boids[index]

    def __iter__(self) -> Iterator[Boid]:
        return iter(self._boids)

    def flocking(self, width: float, height: float) -> None:
        for boid in self._boids:
            boid.run(self._boids, width, height)

    def swarming(self, width: float, height: float, loose: bool = False) -> None:
        for boid in self._boids:
            boid.swarm(self._boids, width, height, loose)