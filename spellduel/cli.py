"""
Spellduel CLI - Command-line interface for the solver.

Usage:
    spellduel solve <input_file>                    Print both answers
    spellduel solve <input_file> --mode hard        Hard mode only
    spellduel replay <input_file> <spell> [...]     Show a fight round by round
"""

import argparse
import logging
import sys

from .config import Settings
from .engine_core import DEFAULT_CATALOG, CombatState, UnknownSpellError, replay
from .loader import InputParseError, load_boss
from .solver import SearchConfig, find_cheapest_game, find_cheapest_game_parallel


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Spellduel - cheapest winning spell sequence",
        prog="spellduel",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log search progress")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Find the cheapest winning fight")
    solve_parser.add_argument("input_file", help="Boss stats file (Hit Points / Damage)")
    solve_parser.add_argument(
        "--mode", choices=["normal", "hard", "both"], default="both", help="Which difficulty"
    )
    solve_parser.add_argument("--workers", type=int, default=None, help="Parallel search workers")
    solve_parser.add_argument(
        "--show-sequence", action="store_true", help="Also print the winning spells"
    )

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Replay a spell sequence")
    replay_parser.add_argument("input_file", help="Boss stats file (Hit Points / Damage)")
    replay_parser.add_argument("spells", nargs="+", help="Spell names, e.g. poison 'magic missile'")
    replay_parser.add_argument("--hard", action="store_true", help="Hard mode")

    args = parser.parse_args(argv)
    settings = Settings.from_env()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "solve":
        cmd_solve(args, settings)
    elif args.command == "replay":
        cmd_replay(args, settings)
    else:
        parser.print_help()
        sys.exit(1)


def _initial_state(args, settings: Settings) -> CombatState:
    try:
        boss = load_boss(args.input_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.input_file}", file=sys.stderr)
        sys.exit(1)
    except InputParseError as e:
        print(f"Error: Malformed input: {e}", file=sys.stderr)
        sys.exit(1)
    return CombatState.create(
        boss_hit_points=boss.hit_points,
        boss_damage=boss.damage,
        player_hit_points=settings.player_hit_points,
        player_mana=settings.player_mana,
    )


def cmd_solve(args, settings: Settings):
    """Find and print the cheapest winning cost."""
    state = _initial_state(args, settings)
    workers = args.workers if args.workers is not None else settings.workers
    config = SearchConfig(max_depth=settings.max_depth, max_nodes=settings.max_nodes)

    modes = {"normal": [False], "hard": [True], "both": [False, True]}[args.mode]
    for answer, hard_mode in enumerate(modes, start=1):
        if workers > 1:
            result = find_cheapest_game_parallel(state, hard_mode, config=config, workers=workers)
        else:
            result = find_cheapest_game(state, hard_mode, config=config)

        label = f"Answer #{answer}" if args.mode == "both" else "Answer"
        if result.solved:
            print(f"{label} is {int(result.cost)}")
        else:
            print(f"{label}: no winning sequence")
        if args.show_sequence and result.solved:
            print("  " + ", ".join(DEFAULT_CATALOG.names(result.sequence)))


def cmd_replay(args, settings: Settings):
    """Replay a spell sequence and print what happened."""
    state = _initial_state(args, settings)
    try:
        sequence = DEFAULT_CATALOG.resolve(args.spells)
    except UnknownSpellError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    trace = replay(state, sequence, hard_mode=args.hard)
    for record in trace.rounds:
        print(f"-- Round {record.round_number}: {record.spell_name}")
        if record.error:
            print(f"  Illegal: {record.error}")
        for change in record.changes:
            print(f"  {change}")

    final = trace.final_state
    print(f"Result: {trace.result.value}")
    print(f"Mana spent: {trace.mana_spent}")
    print(
        f"Player {final.player.hit_points} hp / {final.player.mana} mana, "
        f"boss {final.boss.hit_points} hp"
    )


if __name__ == "__main__":
    main()
