#!/usr/bin/env python3
"""
Data models for the Orrery.

This module defines the celestial-body hierarchy shared between the position
engine, the simulation controller and the renderer.

Units and usage
- orbital_radius and object_radius are in kilometers [km].
- orbital_period and rotational_period are in earth days.
- position is a point in the scaled display plane; it is written only by
  physics.recompute_position and read by the renderer.
- children own the tree top-down; parent is a lookup-only back-reference set by add_child.
"""
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


class OrreryError(Exception):
    """Base class for errors raised by the orrery core."""
    pass


class CatalogError(OrreryError, ValueError):
    """A body was built with orbital parameters the position engine cannot use."""
    pass


class HierarchyError(OrreryError):
    """An add_child call would break the parent/children invariants of the tree."""
    pass


@dataclass(frozen=True)
class Position:
    """Immutable point in the 2D display plane."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"(x: {self.x}, y: {self.y})"


class BodyKind(Enum):
    STAR = "Star"
    PLANET = "Planet"
    MOON = "Moon"
    COMET = "Comet"
    ASTEROID = "Asteroid"
    ASTEROID_BELT = "Asteroid Belt"
    DWARF_PLANET = "Dwarf Planet"

    @property
    def label(self) -> str:
        """Display prefix used in descriptions, e.g. 'Dwarf Planet'."""
        return self.value

    @property
    def lists_moons(self) -> bool:
        return self in (BodyKind.PLANET, BodyKind.DWARF_PLANET)


@dataclass(eq=False)
class Body:
    """
    A node in the celestial hierarchy.

    Fields:
    - name: Display label
    - kind: Closed variant tag; selects the label and whether parent composition applies
    - orbital_radius: Distance from the orbital center in km
    - orbital_period: Days per revolution (ignored for the center body)
    - object_radius: Physical radius in km, used for rendered size only
    - rotational_period: Length of a day, informational
    - color_tag: Colour name understood by the renderer
    - is_center: True for the single root body, which always sits at the origin
    - children: Owned child bodies in insertion order, filled only by add_child
    - position: Last computed position, written only by physics.recompute_position
    - parent: Body this one orbits; a lookup relation, never an ownership edge
    """
    name: str
    kind: BodyKind
    orbital_radius: float
    orbital_period: float
    object_radius: float
    rotational_period: float = 0.0
    color_tag: str = "white"
    is_center: bool = False
    children: List["Body"] = field(default_factory=list, init=False, repr=False)
    position: Position = field(default_factory=Position, init=False)
    parent: Optional["Body"] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Reject orbital parameters that would make the scaling law or progress undefined."""
        if self.is_center:
            return
        r = self.orbital_radius
        if not math.isfinite(r) or r <= 0 or r == 1:
            raise CatalogError(f"{self.name}: orbital radius must be finite, positive and not 1 (got {r})")
        p = self.orbital_period
        if not math.isfinite(p) or p <= 0:
            raise CatalogError(f"{self.name}: orbiting body needs a positive orbital period (got {p})")

    def set_orbital_radius(self, radius: float) -> None:
        """Adjust the orbital radius, keeping the previous value if the new one is invalid."""
        previous = self.orbital_radius
        self.orbital_radius = radius
        try:
            self.validate()
        except CatalogError:
            logger.warning("Rejected orbital radius %r for %s", radius, self.name)
            self.orbital_radius = previous
            raise

    def ancestors(self) -> List["Body"]:
        """Parents from the nearest one up to the root."""
        chain = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain

    def add_child(self, child: "Body") -> "Body":
        add_child(self, child)
        return child

    def describe(self) -> str:
        """Console counterpart of the info panel, prefixed with the kind label."""
        lines = [
            f"{self.kind.label}: {self.name}",
            f"Position: {self.position}",
            f"Orbital radius: {self.orbital_radius}",
            f"Orbital period: {self.orbital_period}",
            f"Object radius: {self.object_radius}",
            f"Rotational period: {self.rotational_period}",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.name


def add_child(parent: Body, child: Body) -> None:
    """
    Attach child to parent: append it to parent.children and set its back-reference.

    Raises HierarchyError if the child already has a parent, is a center body,
    or is the parent itself or one of its ancestors.
    """
    if child is parent:
        raise HierarchyError(f"{child.name} cannot orbit itself")
    if child.parent is not None:
        logger.warning("Refusing to move %s from %s to %s", child.name, child.parent.name, parent.name)
        raise HierarchyError(f"{child.name} already orbits {child.parent.name}")
    if child.is_center:
        raise HierarchyError(f"{child.name} is a center body and must stay the root")
    if any(a is child for a in parent.ancestors()):
        raise HierarchyError(f"attaching {child.name} under {parent.name} would create a cycle")
    parent.children.append(child)
    child.parent = parent


def iter_bodies(root: Body) -> Iterator[Body]:
    """Yield every body in the tree, each parent before its children."""
    stack = [root]
    while stack:
        body = stack.pop()
        yield body
        stack.extend(reversed(body.children))


def find_body(root: Body, name: str) -> Optional[Body]:
    for body in iter_bodies(root):
        if body.name == name:
            return body
    return None


def _fmt(value: float) -> str:
    return f"{value:,.1f}"


def to_info_string(body: Body) -> str:
    """Multi-line summary shown in the info panel when a body is selected."""
    text = (
        f"Name: {body.name}\n"
        f"Orbital radius: {_fmt(body.orbital_radius)}km\n"
        f"Orbital period: {_fmt(body.orbital_period)} earth days\n"
        f"Polar radius: {_fmt(body.object_radius)}km\n"
        f"Rotational period: {_fmt(body.rotational_period)} earth days\n"
    )
    if body.kind.lists_moons:
        text += "Moons: " + ", ".join(str(c) for c in body.children)
    return text
