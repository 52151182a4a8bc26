from typing import Optional
from state import Board, Position
import random
from .agent import Agent

class RandomAgent(Agent):

    def __init__(self, seed: Optional[int] = None):
        super().__init__(name="RandomAgent")
        self.rng = random.Random(seed)

    def next_move(self, board: Board) -> Optional[Position]:
        moves = board.available_moves()
        if not moves:
            return None
        return self.rng.choice(moves)
