"""
Main CLI for Pallanguzhi.
"""

import argparse
import logging
import random
import sys
from typing import Dict, Optional

from tqdm import tqdm

from ..core import IllegalMoveError, PITS_PER_SIDE, RulesEngine, Side, Winner
from ..ai import DecisionEngine, Difficulty
from ..ai.explain import summarize
from ..utils.rich_display import GameDisplay, setup_rich_logging

MAX_MATCH_MOVES = 500


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_pit_key(key: str) -> Optional[int]:
    """Map a typed key 1-7 to a player pit index, or None."""
    key = key.strip()
    if not key.isdigit():
        return None
    number = int(key)
    if 1 <= number <= PITS_PER_SIDE:
        return number - 1
    return None


def play_ai_turns(engine: RulesEngine, ai: DecisionEngine, display: GameDisplay,
                  show_explanations: bool) -> None:
    """Let the AI move until it is the player's turn or the game ends."""
    explanations = []
    while not engine.finished and engine.turn is Side.AI:
        choice = ai.choose_move(engine)
        if not choice.has_move:
            break
        result = engine.apply_move(choice.pit)
        explanations.append(choice.explanation)
        display.show_board(engine.state, highlight=result.record.last_pit)
        if result.bonus_turn and not result.finished:
            display.log_info("AI gets a bonus turn!")

    if show_explanations and explanations:
        display.show_explanation(summarize(explanations))


def play_command(args):
    """Play an interactive game against the AI."""
    setup_rich_logging(args.log_level)
    logger = logging.getLogger(__name__)

    engine = RulesEngine.new_game()
    ai = DecisionEngine(args.difficulty)
    display = GameDisplay()
    show_explanations = not args.no_explanations

    display.show_header("Pallanguzhi", ai.difficulty.value)
    display.show_board(engine.state)

    while True:
        if engine.finished:
            display.log_success("Game over! Press [bold]n[/bold] for a new game or [bold]q[/bold] to quit.")

        key = display.console.input("[bold]> [/bold]").strip().lower()

        if key == "q":
            break
        if key == "n":
            engine.reset()
            display.log_info("New game started! Make your move.")
            display.show_board(engine.state)
            continue
        if key == "e":
            show_explanations = not show_explanations
            display.log_info(f"AI explanations {'on' if show_explanations else 'off'}")
            continue
        if key == "h":
            display.show_hint(ai.suggest_move(engine).hint.text)
            continue

        pit = parse_pit_key(key)
        if pit is None:
            display.log_warning("Choose a pit 1-7, or h/e/n/q.")
            continue

        try:
            result = engine.apply_move(pit)
        except IllegalMoveError as e:
            logger.debug(str(e))
            display.log_error("Invalid move! Choose a pit with stones.")
            continue

        display.show_board(engine.state, highlight=result.record.last_pit)
        if result.captured > 0:
            display.log_success(f"You captured {result.captured} stones!")
        if result.bonus_turn and not result.finished:
            display.log_info("Bonus turn! Play again.")

        play_ai_turns(engine, ai, display, show_explanations)


def play_match_game(player_ai: DecisionEngine, opponent_ai: DecisionEngine,
                    rng: random.Random, random_openings: int = 0,
                    max_moves: int = MAX_MATCH_MOVES) -> RulesEngine:
    """
    Play one AI vs AI game to the end.

    Args:
        player_ai: Engine playing the player side
        opponent_ai: Engine playing the AI side
        rng: Source for random opening moves
        random_openings: Number of random moves played before the engines take over
        max_moves: Give up after this many moves (the game may be left unfinished)

    Returns:
        The RulesEngine after the last move
    """
    engine = RulesEngine.new_game()

    for _ in range(random_openings):
        if engine.finished:
            break
        engine.apply_move(rng.choice(engine.legal_moves()))

    while not engine.finished and len(engine.history) < max_moves:
        mover = player_ai if engine.turn is Side.PLAYER else opponent_ai
        choice = mover.choose_move(engine)
        if not choice.has_move:
            break
        engine.apply_move(choice.pit)

    return engine


def run_match(games: int, difficulty_player: str, difficulty_ai: str,
              random_openings: int = 0, seed: int = 42,
              max_moves: int = MAX_MATCH_MOVES, progress: bool = True) -> Dict[str, float]:
    """
    Play a series of AI vs AI games.

    Returns:
        Summary counts and averages
    """
    player_ai = DecisionEngine(difficulty_player)
    opponent_ai = DecisionEngine(difficulty_ai)
    rng = random.Random(seed)

    results = {"player_wins": 0, "ai_wins": 0, "ties": 0, "unfinished": 0}
    total_player = 0
    total_ai = 0
    total_moves = 0

    for _ in tqdm(range(games), desc="Match", unit=" game", disable=not progress):
        engine = play_match_game(player_ai, opponent_ai, rng, random_openings, max_moves)

        if not engine.finished:
            results["unfinished"] += 1
        elif engine.winner is Winner.PLAYER:
            results["player_wins"] += 1
        elif engine.winner is Winner.AI:
            results["ai_wins"] += 1
        else:
            results["ties"] += 1

        total_player += engine.score_player
        total_ai += engine.score_ai
        total_moves += len(engine.history)

    results["avg_player_score"] = total_player / games if games else 0.0
    results["avg_ai_score"] = total_ai / games if games else 0.0
    results["avg_moves"] = total_moves / games if games else 0.0
    return results


def match_command(args):
    """Pit two AI difficulties against each other."""
    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    logger.info(
        f"Match: {args.games} games, player={args.difficulty_player} "
        f"vs ai={args.difficulty_ai}"
    )

    results = run_match(
        games=args.games,
        difficulty_player=args.difficulty_player,
        difficulty_ai=args.difficulty_ai,
        random_openings=args.random_openings,
        seed=args.seed,
        max_moves=args.max_moves,
    )

    GameDisplay().show_match_results(results, args.games)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    difficulties = [d.value for d in Difficulty]

    parser = argparse.ArgumentParser(description="Pallanguzhi board game with AI opponent")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play against the AI")
    play_parser.add_argument(
        "--difficulty", choices=difficulties, default=Difficulty.MEDIUM.value,
        help="AI difficulty (search depth 2/4/6)",
    )
    play_parser.add_argument(
        "--no-explanations", action="store_true", help="Hide AI move explanations"
    )
    play_parser.set_defaults(func=play_command)

    # Match command
    match_parser = subparsers.add_parser("match", help="Play AI against AI")
    match_parser.add_argument("--games", type=int, default=10, help="Number of games")
    match_parser.add_argument(
        "--difficulty-player", choices=difficulties, default=Difficulty.EASY.value
    )
    match_parser.add_argument(
        "--difficulty-ai", choices=difficulties, default=Difficulty.MEDIUM.value
    )
    match_parser.add_argument(
        "--random-openings", type=int, default=2,
        help="Random moves played at the start of each game for variety",
    )
    match_parser.add_argument("--seed", type=int, default=42, help="Random seed")
    match_parser.add_argument(
        "--max-moves", type=int, default=MAX_MATCH_MOVES,
        help="Stop a game after this many moves and count it as unfinished",
    )
    match_parser.set_defaults(func=match_command)

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    args.func(args)


if __name__ == "__main__":
    main()
