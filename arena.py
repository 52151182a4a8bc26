from collections import Counter
from typing import Dict, List, Optional
from tqdm import trange

from agents import Agent
from render import Renderer
from state import Board, ContractViolation, ImpossibleStateError, Player, State, Status


def play_game(x_agent: Agent, o_agent: Agent, board: Optional[Board] = None,
              renderer: Optional[Renderer] = None) -> State:
    """ play one game to the end and return the terminal state; renderer=None plays silently """
    board = Board() if board is None else board
    bots: Dict[Player, Agent] = {Player.X: x_agent, Player.O: o_agent}

    # at most 9 turns, one per cell
    while True:
        state = board.state()
        if state.status == Status.IMPOSSIBLE:
            raise ImpossibleStateError(f"Error: impossible state, quitting\n{board}")

        if state.is_terminal:
            if renderer is not None:
                renderer.show_outcome(board, state)
            return state

        if renderer is not None:
            renderer.show_board(board, state)

        bot = bots[state.player]
        move = bot.next_move(board)
        if move is None:
            raise ContractViolation(f"{bot.name} returned no move while state is {state}")
        if not board.turn(move):
            raise ContractViolation(f"{bot.name} played occupied cell {move}")


def run_stats(x_agent: Agent, o_agent: Agent, n_games: int = 100, verbose: bool = True) -> Counter:
    """ play n_games fresh games with the same agents and count terminal states """
    if n_games < 0:
        raise ValueError(f"n_games must be non-negative, got {n_games}")

    results: Counter = Counter()
    for _ in trange(n_games, desc="Arena Battle", disable=not verbose):
        results[play_game(x_agent, o_agent)] += 1
    return results


def format_report(results: Counter) -> List[str]:
    total = sum(results.values())
    lines = []
    for state in sorted(results):
        pct = results[state] / total * 100 if total else 0.0
        lines.append(f"{state}: {results[state]} ({pct:.2f}%)")
    lines.append(f"Total: {total}")
    return lines
