from argparse import ArgumentParser
from typing import List, Optional

from agents import AGENT_NAMES, make_agent
from arena import format_report, play_game, run_stats
from render import TextRenderer

parser = ArgumentParser("tictactoe", description="Tic-tac-toe between pluggable agents")
subparsers = parser.add_subparsers(dest="command", required=True)

stats_parser = subparsers.add_parser("stats", help="Play many silent games and count the outcomes")
stats_parser.add_argument("--games", "-n", type=int, default=100, help="Number of games to play")
stats_parser.add_argument("-x", type=str.lower, default="random", choices=AGENT_NAMES, help="Agent playing X")
stats_parser.add_argument("-o", type=str.lower, default="random", choices=AGENT_NAMES, help="Agent playing O")
stats_parser.add_argument("--seed", "-s", type=int, default=None, help="Seed for random agents")
stats_parser.add_argument("--quiet", "-q", action='store_true', help="Hide the progress bar")

play_parser = subparsers.add_parser("play", help="Play one game on the console")
play_parser.add_argument("-x", type=str.lower, default="human", choices=AGENT_NAMES, help="Agent playing X")
play_parser.add_argument("-o", type=str.lower, default="minimax", choices=AGENT_NAMES, help="Agent playing O")
play_parser.add_argument("--seed", "-s", type=int, default=None, help="Seed for random agents")


def main(argv: Optional[List[str]] = None) -> None:
    args = parser.parse_args(argv)

    x_seed = args.seed
    o_seed = args.seed + 1 if args.seed is not None else None
    x_agent = make_agent(args.x, seed=x_seed)
    o_agent = make_agent(args.o, seed=o_seed)

    if args.command == "stats":
        if args.games < 0:
            parser.error("--games must be non-negative")
        print(f"Running {args.games} games between X: {args.x} and O: {args.o}")
        results = run_stats(x_agent, o_agent, n_games=args.games, verbose=not args.quiet)
        for line in format_report(results):
            print(line)
        print("-" * 30)
    else:
        play_game(x_agent, o_agent, renderer=TextRenderer())


if __name__ == "__main__":
    main()
