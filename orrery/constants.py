#!/usr/bin/env python3
"""
Shared constants for the Orrery (km and earth days unless stated otherwise).

Keeping constants in one place helps ensure the scaling law used for body
positions and the one used for orbit rings stay in agreement.
"""

# Visual scaling law: scale(x) = (x^(1/SCALE_EXPONENT) / ln(x) + SCALE_OFFSET) / SCALE_DIVISOR
SCALE_EXPONENT = 2.2
SCALE_OFFSET = -100.0
SCALE_DIVISOR = 2.0

# Rendered body size: diameter = r^(1/BODY_SIZE_EXPONENT) / ln(r)
BODY_SIZE_EXPONENT = 2.0
MIN_BODY_DIAMETER = 2  # pixels

# Time control (earth days advanced per tick)
DEFAULT_SPEED = 0.5
SPEED_STEP = 0.1
MIN_SPEED = 0.1
MAX_SPEED = 5.0
TICK_INTERVAL = 0.015  # seconds of real time per tick
MAX_TICKS_PER_FRAME = 10

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
MIN_VIEW_WIDTH = 800
MIN_VIEW_HEIGHT = 450
BACKGROUND_COLOR = (0, 0, 0)
ORBIT_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 255, 255)
HUD_COLOR = (200, 200, 200)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
