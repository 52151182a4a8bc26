from abc import ABC, abstractmethod
from typing import Optional
from state import Board, Position



class Agent(ABC):

    def __init__(self, name: str = "BaseAgent"):
        self.name = name

    def __repr__(self) -> str: return f"{type(self).__name__}(name={self.name!r})"

    @abstractmethod
    def next_move(self, board: Board) -> Optional[Position]:
        """
        Given a Board, return the position to play, or None if no moves are left.
        Must only return members of board.available_moves().
        """
        raise NotImplementedError
