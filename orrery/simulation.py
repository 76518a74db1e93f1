#!/usr/bin/env python3
"""
Simulation controller: shared state between the UI thread and the render thread.

The controller owns the body tree and the simulated clock. Each tick advances
the clock by the current speed and recomputes every position parent-first
before releasing the lock, so a frame snapshot never mixes two ticks.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .catalog import build_solar_system
from .constants import DEFAULT_SPEED, MAX_SPEED, MIN_SPEED, SPEED_STEP
from .data_models import Body, BodyKind, Position, find_body, to_info_string
from .physics import orbit_ring_diameter, recompute_tree

logger = logging.getLogger(__name__)


@dataclass
class BodySprite:
    """What the renderer needs to draw one body."""
    name: str
    kind: BodyKind
    position: Position
    object_radius: float
    color_tag: str


@dataclass
class FrameState:
    """Consistent read-only snapshot of one tick."""
    day: float
    speed: float
    focus: Position
    sprites: List[BodySprite] = field(default_factory=list)
    rings: List[float] = field(default_factory=list)
    show_orbits: bool = True
    show_text: bool = True
    info_text: Optional[str] = None


class SimulationController:
    """
    Shared state between the UI thread (Dear PyGui) and the rendering thread (pygame).
    Includes thread-safe operations guarded by a lock.
    """
    def __init__(self, root: Optional[Body] = None):
        self.lock = threading.RLock()
        self.root = root if root is not None else build_solar_system()
        self.focus = self.root
        self.running = True  # app running
        self.playing = True  # clock advancing
        self.days_passed = 0.0
        self.speed = DEFAULT_SPEED  # earth days per tick
        self.show_orbits = True
        self.show_text = True
        self.info_text: Optional[str] = None

        recompute_tree(self.root, self.days_passed)

    def tick(self) -> float:
        """Advance the clock by one step and recompute all positions. Returns the new day."""
        with self.lock:
            if self.playing:
                self.days_passed += self.speed
                recompute_tree(self.root, self.days_passed)
            return self.days_passed

    def set_speed(self, s: float):
        with self.lock:
            self.speed = max(MIN_SPEED, min(MAX_SPEED, float(s)))

    def speed_up(self) -> float:
        with self.lock:
            new_speed = round(self.speed + SPEED_STEP, 6)
            if new_speed <= MAX_SPEED:
                self.speed = new_speed
            return self.speed

    def slow_down(self) -> float:
        with self.lock:
            new_speed = round(self.speed - SPEED_STEP, 6)
            if new_speed >= MIN_SPEED:
                self.speed = new_speed
            return self.speed

    def toggle_play(self) -> bool:
        with self.lock:
            self.playing = not self.playing
            return self.playing

    def toggle_orbits(self) -> bool:
        with self.lock:
            self.show_orbits = not self.show_orbits
            return self.show_orbits

    def toggle_text(self) -> bool:
        with self.lock:
            self.show_text = not self.show_text
            return self.show_text

    def selectable_bodies(self) -> List[Body]:
        """Planets and dwarf planets orbiting the root, in catalog order."""
        with self.lock:
            return [b for b in self.root.children if b.kind.lists_moons]

    def focus_on(self, name: str) -> str:
        """Focus the view on a body by name and return its info text."""
        with self.lock:
            body = find_body(self.root, name)
            if body is None:
                raise KeyError(f"no body named {name!r}")
            self.focus = body
            self.info_text = to_info_string(body)
            logger.info("Focused on %s", body.name)
            return self.info_text

    def zoom_out(self) -> Body:
        """Move the focus one level up the tree and hide the info panel."""
        with self.lock:
            self.info_text = None
            if self.focus.parent is not None:
                self.focus = self.focus.parent
            return self.focus

    def visible_bodies(self) -> List[Body]:
        with self.lock:
            return [self.focus] + list(self.focus.children)

    def orbit_rings(self) -> List[Tuple[Body, float]]:
        """Orbit ring diameters for the non-moon children of the focus."""
        with self.lock:
            return [(b, orbit_ring_diameter(b.orbital_radius))
                    for b in self.focus.children if b.kind is not BodyKind.MOON]

    def frame(self) -> FrameState:
        with self.lock:
            state = FrameState(
                day=self.days_passed,
                speed=self.speed,
                focus=self.focus.position,
                show_orbits=self.show_orbits,
                show_text=self.show_text,
                info_text=self.info_text,
            )
            for b in self.visible_bodies():
                state.sprites.append(BodySprite(b.name, b.kind, b.position, b.object_radius, b.color_tag))
            if self.show_orbits:
                state.rings = [d for _, d in self.orbit_rings()]
            return state
