"""Projectile motion shared by the chapter demos.

A projectile has a position (point) and a velocity (vector). Each tick
moves the projectile by its velocity, then bends the velocity by gravity
and wind.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rtlib.core.tuple import Tuple


@dataclass
class Projectile:
    """A moving body.

    Attributes:
        position: Current location (a point).
        velocity: Displacement per tick (a vector).
    """

    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    """Constant forces acting on every projectile.

    Attributes:
        gravity: Velocity change per tick due to gravity (a vector).
        wind: Velocity change per tick due to wind (a vector).
    """

    gravity: Tuple
    wind: Tuple


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance a projectile by one time step.

    Args:
        environment: Gravity and wind to apply.
        projectile: The current state (left unmodified).

    Returns:
        The state one tick later.
    """
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + environment.gravity + environment.wind,
    )


def simulate(environment: Environment, projectile: Projectile) -> Iterator[Projectile]:
    """Yield successive states until the projectile reaches the ground.

    The last state yielded is the first one with y <= 0. A projectile that
    starts on or below the ground yields nothing.
    """
    while projectile.position.y > 0.0:
        projectile = tick(environment, projectile)
        yield projectile
