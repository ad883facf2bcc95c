"""
constants.py: Centralized defaults for the game world, physics and front ends.
"""

# -------- Game World Config --------
SCREEN_WIDTH = 80               # Columns
SCREEN_HEIGHT = 24              # Rows
BIRD_X = 25                     # Fixed bird column
BIRD_WIDTH = 5                  # Footprint is a fixed 5x3 block of cells
BIRD_HEIGHT = 3
CEILING_Y = 1                   # Highest row the bird may occupy
FLOOR_OFFSET = 4                # Lowest bird row is SCREEN_HEIGHT - FLOOR_OFFSET

# Screens at or below this height leave no room for obstacle heights
MIN_SCREEN_HEIGHT = 14

# -------- Physics Config (rows / tick) --------
GRAVITY = 1.0                   # Added to the velocity every airborne tick
JUMP_VELOCITY = -3.0            # Negative is upward
UPDATE_INTERVAL = 1.0           # Fixed time step (dt) of one tick
MAX_VELOCITY = 8.0              # Terminal velocity, applied before integrating

# -------- Obstacle Config --------
MAX_OBSTACLE_WIDTH = 10         # Exclusive upper bound for random widths
MIN_OBSTACLE_WIDTH = 2
MIN_OBSTACLE_HEIGHT = 3
OBSTACLE_HEIGHT_MARGIN = 10     # Heights stay below SCREEN_HEIGHT - margin
SPAWN_INTERVAL = 1.0            # Seconds of wall-clock time between spawns
OBSTACLE_COLORS = ("blue", "green", "yellow", "magenta", "cyan")
OBSTACLE_CHAR = "*"

# -------- Progression --------
LEVEL_UP_SCORE = 5              # Level rises every LEVEL_UP_SCORE points

# -------- Front End Config --------
TICK_RATE = 10                  # Frames (and updates) per second
CELL_SIZE = 16                  # Pixels per character cell in the window client
BIRD_COLOR = "yellow"

# Bird shape relative to (x, y); blanks are transparent
BIRD_SHAPE = (
    (3, 0, "|"),
    (4, 0, ">"),
    (0, 1, "|"),
    (1, 1, ":"),
    (2, 1, ":"),
    (3, 1, "|"),
    (1, 2, "^"),
    (2, 2, "^"),
)
