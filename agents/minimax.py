"""
Exhaustive minimax (negamax form) for tic-tac-toe.

The whole game tree is searched, no depth limit and no heuristics:
a finished game is worth -1 to the side to move if the other side won, 0 on a tie,
and every other position is worth the best negated value of its children.
Ties between equally good moves go to the lowest position.

Positions are cached by their cells, so after the first full search every
later call is a lookup.
"""

from typing import Dict, Optional, Tuple
from state import Board, Cell, ImpossibleStateError, Position, Status
from .agent import Agent


# Cache: board bytes -> (value for side to move, best move or None)
_MINIMAX_CACHE: Dict[bytes, Tuple[int, Optional[Position]]] = {}


class MinimaxAgent(Agent):

    def __init__(self):
        super().__init__("MinimaxAgent")

    def next_move(self, board: Board) -> Optional[Position]:
        _, move = self.evaluate(board)
        return move

    def evaluate(self, board: Board) -> Tuple[int, Optional[Position]]:
        """
        Returns:
            (value, best_move) where value is +1 (win), 0 (tie), -1 (loss)
            for the side to move, and best_move is None on a finished board.
        """
        if board.state().status == Status.IMPOSSIBLE:
            raise ImpossibleStateError(f"cannot search an impossible board:\n{board}")
        return self.negamax(board.copy())

    def negamax(self, board: Board) -> Tuple[int, Optional[Position]]:
        key = board.cells.tobytes()
        if key in _MINIMAX_CACHE:
            return _MINIMAX_CACHE[key]

        state = board.state()
        if state.status == Status.WON:
            result = (-1, None)  # previous mover completed a triplet
        elif state.status == Status.TIE:
            result = (0, None)
        else:
            best_move, best_value = None, -2
            for move in board.available_moves():
                board.turn(move)
                value = -self.negamax(board)[0]
                board.set(move, Cell.EMPTY)
                if value > best_value:
                    best_move = move
                    best_value = value
            result = (best_value, best_move)

        _MINIMAX_CACHE[key] = result
        return result


def clear_cache():
    _MINIMAX_CACHE.clear()


def cache_size() -> int: return len(_MINIMAX_CACHE)
