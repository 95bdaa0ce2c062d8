"""Game constants."""

TILE_SIZE = 20
MIN_SIDE = 300
DEFAULT_VIEWPORT = (600, 600)
START_LENGTH = 3

GAME_SPEED_MS = 150
ACCENT_COLOR = "#00ff00"
SNAKE_BODY_COLOR = "#00cc00"
FOOD_COLOR = "#ff4d4d"

BACKGROUND_COLOR = "#0d1117"
BIG_FOOD_COLOR = "#ffff00"
BIG_FOOD_GLOW = "rgba(255, 255, 0, 0.5)"
BIG_FOOD_GLOW_RADIUS = 0.45

FOOD_SCORE = 10
BIG_FOOD_SCORE = 20
BIG_FOOD_DURATION_MS = 5000
FIRST_SCORE_TARGET = 100
SCORE_TARGET_STEP = 100

PLACEMENT_ATTEMPTS = 1000

HOST = "0.0.0.0"
PORT = 8765

DIRECTIONS = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}
OPPOSITES = {"up": "down", "down": "up", "left": "right", "right": "left"}

KEY_DIRECTIONS = {
    "arrowup": "up", "w": "up",
    "arrowdown": "down", "s": "down",
    "arrowleft": "left", "a": "left",
    "arrowright": "right", "d": "right",
}
RESTART_KEY = " "
