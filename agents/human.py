from typing import Callable, Optional
from state import Board, Position
from .agent import Agent

class HumanAgent(Agent):
    """ asks for a position until a free one is given; blocks as long as `read` does """

    def __init__(self, read: Optional[Callable[[str], str]] = None, write: Callable[[str], None] = print):
        super().__init__(name="HumanAgent")
        self.read = read if read is not None else input
        self.write = write

    def next_move(self, board: Board) -> Optional[Position]:
        moves = board.available_moves()
        if not moves:
            return None

        while True:
            raw = self.read("Enter a move (1-9): ").strip()
            try:
                pos = Position(int(raw))
            except ValueError:
                self.write(f"Not a position: {raw!r}")
                continue
            if pos in moves:
                return pos
            self.write(f"Cell {pos} is taken, free cells: {' '.join(str(m) for m in moves)}")
