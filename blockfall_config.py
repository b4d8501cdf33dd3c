
CONFIG = {
    "COLS": 10,
    "ROWS": 20,
    "CELL_SIZE": 30,
    "LINES_PER_LEVEL": 10,
    "BASE_DROP_INTERVAL": 1000,
    "MIN_DROP_INTERVAL": 100,
    "DROP_INTERVAL_STEP": 80,
    "BAG_SEED": None,
    "TARGET_FPS": 60,
    "LOG_LEVEL": "INFO",
}
