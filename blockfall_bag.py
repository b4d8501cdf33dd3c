
"""7-bag piece generator"""
import logging
import random
from typing import List, Optional
from blockfall_piece import Piece, SHAPES, COLS

log = logging.getLogger(__name__)

class PieceBag:
    KINDS = list(SHAPES)

    def __init__(self, seed: Optional[int] = None, cols: int = COLS):
        self.rng = random.Random(seed)
        self.cols = cols
        self.bag: List[str] = []

    def shuffle(self) -> List[str]:
        # random.shuffle is Fisher-Yates, every permutation equally likely
        kinds = self.KINDS[:]
        self.rng.shuffle(kinds)
        self.bag = kinds
        log.debug("bag refilled: %s", "".join(reversed(kinds)))
        return kinds

    def reset(self):
        self.bag = []
        self.shuffle()

    def next_kind(self) -> str:
        if not self.bag:
            self.shuffle()
        return self.bag.pop()

    def next_piece(self) -> Piece:
        return Piece.spawn(self.next_kind(), self.cols)

    def __len__(self):
        return len(self.bag)
