
"""Score, level and fall speed"""
import logging
from dataclasses import dataclass
from blockfall_config import CONFIG

log = logging.getLogger(__name__)

POINTS = [0, 100, 300, 500, 800]


def level_for_lines(lines: int) -> int:
    return lines // CONFIG["LINES_PER_LEVEL"] + 1


def drop_interval_ms(level: int) -> int:
    base, step = CONFIG["BASE_DROP_INTERVAL"], CONFIG["DROP_INTERVAL_STEP"]
    return max(CONFIG["MIN_DROP_INTERVAL"], base - (level - 1) * step)


@dataclass
class Stats:
    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval: int = CONFIG["BASE_DROP_INTERVAL"]

    def apply_clear(self, cleared: int) -> int:
        """Credit a line clear at the current level and return the score delta.

        Level and fall speed are only recomputed when something was cleared.
        """
        if not 0 <= cleared < len(POINTS):
            raise ValueError(f"cannot clear {cleared} lines at once")
        if not cleared:
            return 0
        delta = POINTS[cleared] * self.level
        self.score += delta
        self.lines += cleared
        level = level_for_lines(self.lines)
        if level != self.level:
            log.debug("level %d -> %d", self.level, level)
        self.level = level
        self.drop_interval = drop_interval_ms(level)
        return delta
