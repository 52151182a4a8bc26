import pytest

from agents import HumanAgent, MinimaxAgent, RandomAgent, make_agent
from agents.minimax import cache_size, clear_cache
from arena import play_game
from state import Board, ImpossibleStateError, Player, Position, State


FULL = "XOX XOO OXX"


def test_random_agent_picks_free_cells():
    agent = RandomAgent(seed=1)
    board = Board.from_string("XO. .X. ..O")
    for _ in range(50):
        assert agent.next_move(board) in board.available_moves()


def test_random_agent_is_reproducible_with_seed():
    board = Board()
    a, b = RandomAgent(seed=7), RandomAgent(seed=7)
    assert [a.next_move(board) for _ in range(20)] == [b.next_move(board) for _ in range(20)]


@pytest.mark.parametrize("agent", [RandomAgent(), MinimaxAgent(), HumanAgent(read=lambda _: "1")])
def test_no_move_on_full_board(agent):
    assert agent.next_move(Board.from_string(FULL)) is None


def test_human_retries_until_legal():
    answers = iter(["abc", "12", "5", " 1 ", "3"])
    messages = []
    agent = HumanAgent(read=lambda _: next(answers), write=messages.append)
    board = Board.from_string("... .X. ...")
    board.turn(2)  # O at 2 -> next X; 5 is taken
    assert agent.next_move(board) == Position(1)
    assert len(messages) == 3


def test_human_eof_propagates():
    def read(_):
        raise EOFError
    with pytest.raises(EOFError):
        HumanAgent(read=read).next_move(Board())


def test_minimax_takes_the_win():
    # X to move, 3 completes the top row
    board = Board.from_string("XX. OO. ...")
    assert MinimaxAgent().next_move(board) == Position(3)


def test_minimax_blocks():
    # O to move, X threatens 3
    board = Board.from_string("XX. .O. ...")
    assert MinimaxAgent().next_move(board) == Position(3)


def test_minimax_values():
    agent = MinimaxAgent()
    assert agent.evaluate(Board()) == (0, Position(1))
    assert agent.evaluate(Board.from_string("XX. OO. ...")) == (1, Position(3))
    assert agent.evaluate(Board.from_string("XXX OO. ...")) == (-1, None)
    assert agent.evaluate(Board.from_string(FULL)) == (0, None)


def test_minimax_tie_break_is_lowest_position():
    # every move of the empty board is a draw, so the first one wins the tie-break
    assert MinimaxAgent().next_move(Board()) == Position(1)


def test_minimax_does_not_touch_the_board():
    board = Board.from_string("X.. .O. ...")
    before = board.cells.tobytes()
    MinimaxAgent().next_move(board)
    assert board.cells.tobytes() == before


def test_minimax_rejects_impossible_board():
    with pytest.raises(ImpossibleStateError):
        MinimaxAgent().next_move(Board.from_string("OO......."))


def test_minimax_cache():
    clear_cache()
    assert cache_size() == 0
    MinimaxAgent().next_move(Board())
    assert cache_size() > 0
    clear_cache()
    assert cache_size() == 0


def test_minimax_self_play_always_ties():
    agent = MinimaxAgent()
    for _ in range(10):
        assert play_game(agent, agent) == State.tie()


@pytest.mark.parametrize("seed", range(20))
def test_minimax_never_loses_to_random(seed):
    assert play_game(MinimaxAgent(), RandomAgent(seed=seed)) != State.won(Player.O)
    assert play_game(RandomAgent(seed=seed), MinimaxAgent()) != State.won(Player.X)


def test_make_agent():
    assert isinstance(make_agent("Random", seed=3), RandomAgent)
    assert isinstance(make_agent("minimax"), MinimaxAgent)
    assert isinstance(make_agent("HUMAN"), HumanAgent)
    with pytest.raises(ValueError):
        make_agent("alphazero")
