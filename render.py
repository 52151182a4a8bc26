"""
Console output for a game. The game loop only talks to the Renderer interface,
so anything that can show a board and an outcome can be swapped in.
"""
from abc import ABC, abstractmethod
from typing import Callable
from state import Board, Cell, Position, State, Status


class Renderer(ABC):

    @abstractmethod
    def show_board(self, board: Board, state: State) -> None: ...

    @abstractmethod
    def show_outcome(self, board: Board, state: State) -> None: ...


def format_board(board: Board) -> str:
    """ 3x3 grid, free cells show their position number """
    sep = '\n---+---+---\n'
    def rep(i: int) -> str:
        cell = board.get(Position.from_idx(i))
        return str(i + 1) if cell == Cell.EMPTY else cell.name
    return sep.join("|".join(f" {rep(r * 3 + c)} " for c in range(3)) for r in range(3))


def outcome_message(state: State) -> str:
    if state.status == Status.TIE:
        return "It's a tie!"
    if state.status == Status.WON:
        return f"Player {state.player} won!"
    return str(state)


class TextRenderer(Renderer):

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def show_board(self, board: Board, state: State) -> None:
        self.write(f"\nTurn: {state.player}\n\n{format_board(board)}\n")

    def show_outcome(self, board: Board, state: State) -> None:
        self.write(f"\n{format_board(board)}\n")
        self.write(outcome_message(state))
