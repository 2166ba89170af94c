
import os

CONFIG = {
    "BOARD_W": 10,
    "BOARD_H": 20,
    "CELL_SIZE": 30,
    "PREVIEW_CELL_SIZE": 20,
    "TARGET_FPS": 60,
    "DROP_INTERVAL_MS": 1000.0,
    "DROP_INTERVAL_FLOOR_MS": 0.0,
    "LINE_BONUS": 10,
    "SPEED_FACTOR": 0.98,
    "PREVIEW_COUNT": 3,
    "SEED": None,
    "HIGHSCORE_PATH": os.path.join(os.path.expanduser("~"), ".tetris", "highscore.json"),
}
