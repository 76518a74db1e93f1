#!/usr/bin/env python3
"""
Orrery application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- Maintains a shared SimulationController that owns the body tree and the simulated
  clock; all access is guarded by a re-entrant lock.
- Draws orbit rings, bodies, names and the info panel from the controller's frame
  snapshots; it never computes positions itself.

Threading model
- PygameRenderer runs in a background thread and performs: input handling (for the viewport),
  ticking the clock, and drawing. Each tick recomputes all positions under the controller lock
  before the frame snapshot is taken.
- The UI class runs in the main thread via Dear PyGui and calls lock-protected controller
  methods from its callbacks.

Controls
- Up/Right: faster, Down/Left: slower, Space: pause/play
- Right click: zoom out to the parent body, mouse wheel: zoom

Running
1) Install dependencies: `pip install pygame dearpygui`
2) Run this module: `python orrery_app.py`
"""

import logging
import sys
import threading
import time

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from orrery.camera import Camera2D
from orrery.constants import (
    BACKGROUND_COLOR,
    HUD_COLOR,
    MAX_TICKS_PER_FRAME,
    MIN_BODY_DIAMETER,
    ORBIT_COLOR,
    SAFE_COORD_LIMIT,
    TEXT_COLOR,
    TICK_INTERVAL,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from orrery.data_models import OrreryError, Position
from orrery.physics import display_diameter
from orrery.simulation import SimulationController

logger = logging.getLogger(__name__)

# ============================================================
# Pygame Renderer Thread
# ============================================================

class PygameRenderer(threading.Thread):
    """
    Pygame loop: ticks the clock and draws the focused body with its children.
    Handles speed keys, zoom-out on right click and wheel zoom.
    """
    def __init__(self, sim: SimulationController):
        super().__init__(daemon=True)
        self.sim = sim
        self.camera = Camera2D()
        self.surface = None
        self.clock = None
        self.running = True
        self._accumulator = 0.0

    def run(self):
        pygame.init()
        pygame.display.set_caption("Orrery - Viewport")
        self.surface = pygame.display.set_mode((VIEW_WIDTH, VIEW_HEIGHT), pygame.RESIZABLE)
        self.camera.set_viewport_size(VIEW_WIDTH, VIEW_HEIGHT)
        self.clock = pygame.time.Clock()

        last_time = time.perf_counter()
        while self.running and self.sim.running:
            now = time.perf_counter()
            self._accumulator += now - last_time
            last_time = now

            self.handle_events()

            # Fixed-interval ticks; drop the backlog after a stall instead of catching up
            ticks = min(int(self._accumulator / TICK_INTERVAL), MAX_TICKS_PER_FRAME)
            for _ in range(ticks):
                self.sim.tick()
            self._accumulator = 0.0 if ticks == MAX_TICKS_PER_FRAME else self._accumulator - ticks * TICK_INTERVAL

            self.draw()
            self.clock.tick(60)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.sim.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.camera.set_viewport_size(event.w, event.h)
                self.surface = pygame.display.set_mode(self.camera.viewport_size, pygame.RESIZABLE)

            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_UP, pygame.K_RIGHT):
                    self.sim.speed_up()
                elif event.key in (pygame.K_DOWN, pygame.K_LEFT):
                    self.sim.slow_down()
                elif event.key == pygame.K_SPACE:
                    self.sim.toggle_play()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                focus = self.sim.zoom_out()
                logger.info("Zoomed out to %s", focus.name)
                self.camera.reset()

            elif event.type == pygame.MOUSEWHEEL:
                self.camera.zoom(1.1 if event.y > 0 else 1.0 / 1.1)

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)

        state = self.sim.frame()
        self.camera.follow(state.focus)

        # Rings are centered on the root body at the origin
        center = _safe_point(self.camera.world_to_screen(Position(0.0, 0.0)))
        if center:
            for diameter in state.rings:
                r = abs(self.camera.length_to_pixels(diameter / 2))
                if 0 < r < SAFE_COORD_LIMIT:
                    gfxdraw.aacircle(surf, center[0], center[1], r, ORBIT_COLOR)

        for sprite in state.sprites:
            pos = _safe_point(self.camera.world_to_screen(sprite.position))
            if pos is None:
                continue
            r = max(MIN_BODY_DIAMETER, self.camera.length_to_pixels(_body_diameter(sprite.object_radius))) // 2
            color = pygame.Color(sprite.color_tag)
            gfxdraw.filled_circle(surf, pos[0], pos[1], r, color)
            gfxdraw.aacircle(surf, pos[0], pos[1], r, color)
            if state.show_text:
                draw_text(surf, sprite.name, pos[0], pos[1], TEXT_COLOR, centered=True)

        draw_text(surf, f"Day: {int(state.day)}", 10, 10, HUD_COLOR)
        draw_text(surf, f"Speed: {state.speed:.1f} days/tick  (arrows to change, right click: zoom out)",
                  10, 30, HUD_COLOR)
        if state.info_text:
            y = 10
            for line in state.info_text.splitlines():
                draw_text(surf, line, surf.get_width() - 360, y, TEXT_COLOR)
                y += 20

        pygame.display.flip()


def _body_diameter(object_radius: float) -> float:
    if object_radius <= 1:
        return MIN_BODY_DIAMETER
    return display_diameter(object_radius)


_cached_font = None

def draw_text(surface, text, x, y, color, centered=False):
    global _cached_font
    if _cached_font is None:
        _cached_font = pygame.font.SysFont("consolas", 16)
    img = _cached_font.render(text, True, color)
    if centered:
        x -= img.get_width() // 2
        y -= img.get_height() // 2
    surface.blit(img, (x, y))


def _safe_point(pt):
    x, y = int(pt[0]), int(pt[1])
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None

# ============================================================
# Dear PyGui UI
# ============================================================

class UI:
    """
    Dear PyGui interface: planet dropdown, orbit/text toggles, info readout.
    """
    def __init__(self, sim: SimulationController, renderer: PygameRenderer):
        self.sim = sim
        self.renderer = renderer
        self.day_text_id = None
        self.info_text_id = None
        self.orbit_button_id = None
        self.text_button_id = None

        self._build_ui()
        self._schedule_sync()

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title='Orrery - Controls', width=420, height=420)

        names = [b.name for b in self.sim.selectable_bodies()]
        with dpg.window(label="Controls", width=400, height=400, pos=(10, 10), tag="main_window"):
            self.day_text_id = dpg.add_text("Day: 0")
            with dpg.group(horizontal=True):
                dpg.add_text("Planet:")
                dpg.add_combo(names, width=200, callback=lambda s, a, u: self._on_select_body(a),
                              tag="planet_combo")
            with dpg.group(horizontal=True):
                self.orbit_button_id = dpg.add_button(label="Hide Orbits", callback=self._toggle_orbits)
                self.text_button_id = dpg.add_button(label="Hide Text", callback=self._toggle_text)
                dpg.add_button(label="Zoom Out", callback=self._zoom_out)
            dpg.add_separator()
            self.info_text_id = dpg.add_text("")

        dpg.setup_dearpygui()
        dpg.show_viewport()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback using frame callbacks (approx ~10Hz)."""
        dpg.set_frame_callback(dpg.get_frame_count() + 6, self._sync_ui_with_sim)

    def _on_select_body(self, name: str):
        info = self.sim.focus_on(name)
        self.renderer.camera.reset()
        dpg.set_value(self.info_text_id, info)

    def _toggle_orbits(self):
        shown = self.sim.toggle_orbits()
        dpg.configure_item(self.orbit_button_id, label="Hide Orbits" if shown else "Show Orbits")

    def _toggle_text(self):
        shown = self.sim.toggle_text()
        dpg.configure_item(self.text_button_id, label="Hide Text" if shown else "Show Text")

    def _zoom_out(self):
        self.sim.zoom_out()
        self.renderer.camera.reset()

    def _sync_ui_with_sim(self):
        state = self.sim.frame()
        dpg.set_value(self.day_text_id, f"Day: {int(state.day)}")
        dpg.set_value(self.info_text_id, state.info_text or "")
        if not self.sim.running:
            dpg.stop_dearpygui()
            return
        self._schedule_sync()

# ============================================================
# Application Entry
# ============================================================

def main():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(module)s - %(message)s')
    try:
        sim = SimulationController()
    except OrreryError as e:
        logger.critical("Fatal catalog error: %s", e, exc_info=True)
        sys.exit(1)

    renderer = PygameRenderer(sim)
    renderer.start()

    UI(sim, renderer)

    try:
        dpg.start_dearpygui()
    finally:
        sim.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()


if __name__ == "__main__":
    main()
