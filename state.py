"""
A representation of the tic-tac-toe board. Nothing but the 9 cells is stored;
whose turn it is, the winner and ties are always derived from the cells.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple, Union
import numpy as np


class ContractViolation(RuntimeError):
    """ a component was called outside its preconditions """


class ImpossibleStateError(RuntimeError):
    """ mark counts break X/O alternation, the board was tampered with """


@dataclass(frozen=True, order=True)
class Position:
    """ cell identifier 1..9, row-major, top-left is 1 """
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, np.integer)):
            raise ValueError(f"Position must be an integer, got {self.value!r}")
        if not 1 <= self.value <= 9:
            raise ValueError(f"Position must be in 1..9, got {self.value}")
        object.__setattr__(self, "value", int(self.value))

    def as_idx(self) -> int: return self.value - 1
    def __str__(self) -> str: return str(self.value)

    @classmethod
    def from_idx(cls, idx: int) -> "Position": return cls(int(idx) + 1)


class Player(IntEnum):
    X = 1
    O = 2

    def opponent(self) -> "Player": return Player.O if self is Player.X else Player.X
    def __str__(self) -> str: return self.name


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @classmethod
    def of(cls, player: Player) -> "Cell": return cls(int(player))


def get_rep(x: int) -> str: return {Cell.X: 'X', Cell.O: 'O'}.get(x, '.')


class Status(IntEnum):
    IMPOSSIBLE = 0
    TIE = 1
    WON = 2
    TURN_OF = 3


@dataclass(frozen=True, order=True)
class State:
    status: Status
    player: Optional[Player] = None

    @classmethod
    def impossible(cls) -> "State": return cls(Status.IMPOSSIBLE)
    @classmethod
    def tie(cls) -> "State": return cls(Status.TIE)
    @classmethod
    def won(cls, player: Player) -> "State": return cls(Status.WON, player)
    @classmethod
    def turn_of(cls, player: Player) -> "State": return cls(Status.TURN_OF, player)

    @property
    def is_terminal(self) -> bool: return self.status in (Status.TIE, Status.WON)

    def __str__(self) -> str:
        if self.status == Status.IMPOSSIBLE:
            return "Impossible"
        if self.status == Status.TIE:
            return "Tie"
        if self.status == Status.WON:
            return f"Won({self.player})"
        return f"TurnOf({self.player})"


# rows, columns, diagonals (zero-based indices)
TRIPLETS = np.array([
    [0, 1, 2], [3, 4, 5], [6, 7, 8],
    [0, 3, 6], [1, 4, 7], [2, 5, 8],
    [0, 4, 8], [2, 4, 6],
], dtype=np.intp)
TRIPLETS.setflags(write=False)

PositionLike = Union[Position, int]


def as_position(pos: PositionLike) -> Position:
    return pos if isinstance(pos, Position) else Position(pos)


class Board:

    def __init__(self):
        self.cells = np.zeros(9, dtype=np.int8)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """ parse '.', 'X', 'O' cells (whitespace ignored), e.g. the output of str(board) """
        mapping = {'.': Cell.EMPTY, 'X': Cell.X, 'O': Cell.O}
        chars = [c for c in text if not c.isspace()]
        if len(chars) != 9:
            raise ValueError(f"expected 9 cells, got {len(chars)}")
        board = cls()
        for i, c in enumerate(chars):
            if c.upper() not in mapping:
                raise ValueError(f"invalid cell character: {c!r}")
            board.cells[i] = mapping[c.upper()]
        return board

    def __str__(self) -> str: return "\n".join("".join(get_rep(int(c)) for c in self.cells[r*3:r*3+3]) for r in range(3))
    def __repr__(self) -> str: return f"Board({''.join(get_rep(int(c)) for c in self.cells)!r}, state={self.state()})"
    def __eq__(self, other) -> bool: return isinstance(other, Board) and np.array_equal(self.cells, other.cells)
    __hash__ = None

    def copy(self) -> "Board":
        board = Board()
        board.cells = self.cells.copy()
        return board

    def get(self, pos: PositionLike) -> Cell: return Cell(int(self.cells[as_position(pos).as_idx()]))

    def set(self, pos: PositionLike, cell: Cell) -> None:
        """ raw write with no turn checks """
        self.cells[as_position(pos).as_idx()] = Cell(cell)

    def counts(self) -> Tuple[int, int]:
        return int(np.count_nonzero(self.cells == Cell.X)), int(np.count_nonzero(self.cells == Cell.O))

    def full(self) -> bool: return bool(np.all(self.cells != Cell.EMPTY))

    def state(self) -> State:
        xc, oc = self.counts()
        if xc > oc + 1 or oc > xc:
            return State.impossible()

        lines = self.cells[TRIPLETS]
        for player in (Player.X, Player.O):
            if np.all(lines == Cell.of(player), axis=1).any():
                return State.won(player)

        if self.full():
            return State.tie()
        return State.turn_of(Player.X if xc == oc else Player.O)

    def turn(self, pos: PositionLike) -> bool:
        """ mark pos for the player to move; False (and no change) if the cell is taken """
        state = self.state()
        if state.status == Status.IMPOSSIBLE:
            raise ImpossibleStateError(f"cannot play on an impossible board:\n{self}")
        if state.status != Status.TURN_OF:
            raise ContractViolation(f"trying to perform a turn when state is {state}")

        idx = as_position(pos).as_idx()
        if self.cells[idx] != Cell.EMPTY:
            return False
        self.cells[idx] = Cell.of(state.player)
        return True

    def available_moves(self) -> List[Position]:
        return [Position.from_idx(i) for i in np.flatnonzero(self.cells == Cell.EMPTY)]
