from __future__ import annotations

import os
from pathlib import Path

# Grid / timing
GRID_SIZE = 20
TICK_INTERVAL_MS = 150
INPUT_BUFFER = 2
FPS = 60
MESSAGE_TIMEOUT_MS = 1500

# Drawing
BLOCK = 20
CELL_PADDING = 1
HUD_HEIGHT = 32

WHITE = (255, 255, 255)
PUPIL = (26, 26, 26)

# theme -> colours for the board chrome
THEMES = {
    "light": {
        "background": (248, 250, 252),
        "grid": (226, 232, 240),
        "text": (30, 41, 59),
        "food": (239, 68, 68),
    },
    "dark": {
        "background": (15, 23, 42),
        "grid": (42, 58, 90),
        "text": (226, 232, 240),
        "food": (248, 113, 113),
    },
}
DEFAULT_THEME = "light"

# skin -> (head, body)
SKINS = {
    "red": ((220, 38, 38), (248, 113, 113)),
    "blue": ((37, 99, 235), (96, 165, 250)),
    "green": ((16, 185, 129), (110, 231, 183)),
}
DEFAULT_SKIN = "green"

PREFS_PATH = Path(os.environ.get("SNAKE_ARCADE_PREFS", Path.home() / ".snake_arcade.json"))
