#!/usr/bin/env python3
"""
Position Engine for the Orrery

Responsibilities
- Map physical distances (km) to display distances with a nonlinear scaling law.
- Compute each body's position on an idealized circular orbit at a given day.
- Compose a moon's orbital offset with its parent's position.
- Walk a body tree in parent-before-child order once per tick.

Units and conventions
- Distances going into the scaling law are kilometers [km].
- Time is elapsed earth days since the epoch; angles are radians.
- The output plane is the scaled display plane, centered on the center body.

Scaling law
- scale(x) = (x^(1/2.2) / ln(x) - 100) / 2 compresses the range between Mercury
  (5.8e7 km) and Pluto (5.9e9 km) into a few hundred display units. The orbit
  ring of a body uses scale_orbit(x, 2.2, -100) as its diameter, which is twice
  scale(x), so a body is drawn exactly on its ring.
- Both functions are undefined for x <= 0 and for x == 1 (ln(1) == 0).

Threading
- This module is pure compute. recompute_position mutates only body.position;
  the controller serializes ticks and reads behind a lock.
"""

import logging
import math
from typing import List

from .constants import BODY_SIZE_EXPONENT, SCALE_DIVISOR, SCALE_EXPONENT, SCALE_OFFSET
from .data_models import Body, BodyKind, OrreryError, Position, iter_bodies

logger = logging.getLogger(__name__)


class ScaleDomainError(OrreryError, ValueError):
    """Raised when a distance falls outside the domain of the scaling law."""
    pass


def scale_orbit(x: float, factor: float, offset: float = 0.0) -> float:
    """
    General form of the visual scaling law.

        scale_orbit(x, factor, offset) = x^(1/factor) / ln(x) + offset

    Args:
        x: Physical distance in km (must be > 0 and != 1)
        factor: Root applied to the distance
        offset: Constant added after the logarithmic damping

    Returns:
        Display distance

    Raises:
        ScaleDomainError: if x is outside the domain or the result is not finite
    """
    if x <= 0 or x == 1:
        raise ScaleDomainError(f"scaling law undefined for x={x}")
    value = math.pow(x, 1.0 / factor) / math.log(x) + offset
    if not math.isfinite(value):
        raise ScaleDomainError(f"scaling law produced {value} for x={x}")
    return value


def scale(x: float) -> float:
    """Display distance of a body from its orbital center."""
    return scale_orbit(x, SCALE_EXPONENT, SCALE_OFFSET) / SCALE_DIVISOR


def orbit_ring_diameter(orbital_radius: float) -> float:
    """Diameter of the orbit ring drawn for a body (twice its display distance)."""
    return scale_orbit(orbital_radius, SCALE_EXPONENT, SCALE_OFFSET)


def display_diameter(object_radius: float) -> float:
    """Rendered diameter of a body from its physical radius."""
    return scale_orbit(object_radius, BODY_SIZE_EXPONENT)


def orbital_progress(body: Body, time: float) -> float:
    """
    Fraction of one orbit completed after `time` days.

    Values above 1 mean several completed orbits. The center body does not
    orbit, so its progress is 0.
    """
    if body.is_center:
        return 0.0
    return time / body.orbital_period


def orbital_offset(body: Body, time: float) -> Position:
    """Position of a body relative to its orbital center, without parent composition."""
    if body.is_center:
        return Position(0.0, 0.0)
    angle = orbital_progress(body, time) * math.pi * 2
    r = scale(body.orbital_radius)
    return Position(r * math.cos(angle), r * math.sin(angle))


def recompute_position(body: Body, time: float) -> Position:
    """
    Compute and store a body's position at `time` days.

    Moons are placed relative to the last computed position of their parent,
    so the parent must already have been recomputed for the same time. Other
    kinds orbit the origin regardless of their parent.

    Args:
        body: Body to position (its position field is updated)
        time: Elapsed earth days

    Returns:
        The new position
    """
    position = orbital_offset(body, time)
    parent = body.parent
    if body.kind is BodyKind.MOON and parent is not None:
        position = position + parent.position
    body.position = position
    return position


def recompute_tree(root: Body, time: float) -> List[Body]:
    """
    Recompute every body under root for one tick.

    Bodies are visited parent-first so each moon reads its parent's position
    for the current tick. Returns the bodies in visiting order.
    """
    visited = []
    for body in iter_bodies(root):
        recompute_position(body, time)
        visited.append(body)
    logger.debug("Recomputed %d bodies at day %.2f", len(visited), time)
    return visited
