"""Console entrypoint for the Age of Wars solver.

Modes:

* ``interactive`` (default) prompts for soldier counts per unit class for
  both sides and prints the winning arrangement, if any.
* ``test`` (or ``--test``) runs the bundled sample battle and reports the
  result through the exit code: 0 on a confirmed win, 1 when no arrangement
  exists, 2 when the found arrangement fails an independent recount.
* ``solve`` runs the search on armies given in ``Class#count;...`` form.
* ``serve`` runs the HTTP API under uvicorn on the configured host and port.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

import uvicorn

from ageofwars.api.app import create_app
from ageofwars.config import LOG_LEVELS, Settings, get_settings
from ageofwars.domain.battle import (
    ArmySizeError,
    BattleSimulator,
    Exhausted,
    SearchResult,
    count_wins,
)
from ageofwars.domain.models import Army
from ageofwars.domain.notation import parse_army, parse_count
from ageofwars.domain.rules_config import DEFAULT_RULES

logger = logging.getLogger(__name__)

SAMPLE_ATTACKER = "Spearmen#10;Militia#30;FootArcher#20;LightCavalry#1000;HeavyCavalry#120"
SAMPLE_DEFENDER = "Militia#10;Spearmen#10;FootArcher#1000;LightCavalry#120;CavalryArcher#100"

EXIT_WIN = 0
EXIT_NO_ARRANGEMENT = 1
EXIT_RECOUNT_FAILED = 2

Prompt = Callable[[str], str]


def _ask(prompt: Prompt, question: str) -> int:
    try:
        answer = prompt(question)
    except EOFError:
        # stdin closed mid-prompt; remaining counts are empty
        answer = ""
    return parse_count(answer.strip())


def _report(result: SearchResult, defender: Army, out: TextIO) -> int:
    if isinstance(result, Exhausted):
        print("\nThere is no chance of winning.", file=out)
        return EXIT_NO_ARRANGEMENT
    print(f"\nWinner - {result.arrangement}", file=out)
    print(f"Loser - {defender}", file=out)
    return EXIT_WIN


def _search(
    attacker: Army,
    defender: Army,
    battle_size: int,
    out: TextIO | None,
    err: TextIO | None,
) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    simulator = BattleSimulator(attacker, defender, battle_size)
    try:
        result = simulator.find_winning_arrangement()
    except ArmySizeError as exc:
        print(f"Error: {exc}", file=err)
        return EXIT_NO_ARRANGEMENT
    return _report(result, defender, out)


def run_interactive(
    battle_size: int,
    *,
    prompt: Prompt | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Ask for both sides' counts class by class, then run the search."""

    out = out or sys.stdout
    prompt = prompt or input
    own_parts: list[str] = []
    opponent_parts: list[str] = []
    print("Enter soldier counts for each unit class:", file=out)
    for unit_class in DEFAULT_RULES.prompt_classes:
        own_count = _ask(prompt, f"Enter the {unit_class}: ")
        own_parts.append(f"{unit_class}#{own_count}")
        opponent_count = _ask(prompt, f"Enter opponent {unit_class}: ")
        opponent_parts.append(f"{unit_class}#{opponent_count}")

    attacker = parse_army(";".join(own_parts))
    defender = parse_army(";".join(opponent_parts))
    return _search(attacker, defender, battle_size, out, err)


def run_sample_test(*, out: TextIO | None = None) -> int:
    """Run the bundled sample battle and double-check the reported wins."""

    out = out or sys.stdout
    attacker = parse_army(SAMPLE_ATTACKER)
    defender = parse_army(SAMPLE_DEFENDER)
    simulator = BattleSimulator(attacker, defender, DEFAULT_RULES.battle_size)
    result = simulator.find_winning_arrangement()

    if isinstance(result, Exhausted):
        print("TEST FAIL: expected a winning arrangement but none found.", file=out)
        return EXIT_NO_ARRANGEMENT

    wins = count_wins(result.arrangement, defender)
    if wins >= simulator.threshold:
        print(f"TEST PASS: found arrangement -> {result.arrangement}", file=out)
        return EXIT_WIN

    # Unreachable while the search applies the same threshold.
    print("TEST FAIL: arrangement found but wins < majority", file=out)
    return EXIT_RECOUNT_FAILED


def run_solve(
    attacker_text: str,
    defender_text: str,
    battle_size: int,
    *,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    return _search(parse_army(attacker_text), parse_army(defender_text), battle_size, out, err)


def run_serve(
    settings: Settings,
    *,
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
) -> int:
    """Serve the HTTP API until interrupted."""

    uvicorn.run(
        create_app(settings=settings),
        host=host or settings.host,
        port=port or settings.port,
        log_level=(log_level or settings.log_level).lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ageofwars",
        description="Find a platoon arrangement that wins a majority of pairings",
    )
    parser.add_argument(
        "mode",
        nargs="?",
        choices=("interactive", "test", "solve", "serve"),
        default="interactive",
        help="What to run (default: interactive prompts)",
    )
    parser.add_argument(
        "--test",
        action="store_true",
        help="Alias for the 'test' mode",
    )
    parser.add_argument("--attacker", default="", help="Own army for 'solve', e.g. Militia#10;...")
    parser.add_argument("--defender", default="", help="Opponent army for 'solve'")
    parser.add_argument(
        "--battle-size",
        type=int,
        default=None,
        help="Platoons per army (defaults to the configured battle size)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Override the configured log level",
    )
    parser.add_argument("--host", default=None, help="Bind address for 'serve'")
    parser.add_argument("--port", type=int, default=None, help="TCP port for 'serve'")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    battle_size = args.battle_size if args.battle_size is not None else settings.battle_size
    if battle_size < 1:
        parser.error("--battle-size must be positive")

    mode = "test" if args.test else args.mode
    logger.debug("Running %s mode with battle size %d", mode, battle_size)
    if mode == "test":
        return run_sample_test()
    if mode == "solve":
        return run_solve(args.attacker, args.defender, battle_size)
    if mode == "serve":
        return run_serve(settings, host=args.host, port=args.port, log_level=args.log_level)
    return run_interactive(battle_size)


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    sys.exit(main())
