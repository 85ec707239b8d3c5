#!/usr/bin/env python3
"""
Mines - command line entry point.

Usage:
    mines [-width N] [-height N] [-mines N] [-separator TEXT] [-seed N]
    python -m mines -help
"""
import argparse
import logging
import sys
from typing import List, Optional, TextIO

import numpy as np

from . import __version__
from .commands import HELP_TEXT, MSG_QUIT, CommandInterpreter, Outcome
from .config import (
    DEFAULT_HEIGHT,
    DEFAULT_MINES,
    DEFAULT_SEPARATOR,
    DEFAULT_WIDTH,
    MAX_HEIGHT,
    MAX_WIDTH,
    MIN_HEIGHT,
    MIN_MINES,
    MIN_WIDTH,
    GameConfig,
)
from .errors import ConfigError
from .state import GameState, Status


logger = logging.getLogger(__name__)

PROMPT = "Type a command. For help, type '?' then ENTER."
QUIT_PROMPT = "Are you sure you want to quit? [yN] "


# ============================================================================
# Game Loop
# ============================================================================

def _show(outcome: Outcome, config: GameConfig, out: TextIO) -> None:
    if outcome.show_board:
        print(outcome.snapshot.to_text(config.separator), file=out)
    if outcome.message:
        print(outcome.message, file=out)


def play(
    config: GameConfig,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Play one game, reading commands line by line.

    Args:
        config: Board configuration.
        stdin: Stream of player commands (default: sys.stdin).
        stdout: Stream the board and messages are written to
            (default: sys.stdout).
        rng: Random source for mine placement.

    Returns:
        The final score.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    state = GameState(config, rng)
    interpreter = CommandInterpreter(state)

    def confirm() -> bool:
        print(QUIT_PROMPT, end="", file=stdout, flush=True)
        answer = stdin.readline()
        # End of input counts as yes.
        return not answer or answer.strip().lower().startswith("y")

    print(state.snapshot().to_text(config.separator), file=stdout)
    print(PROMPT, file=stdout)

    while True:
        line = stdin.readline()
        if not line:
            state.quit(confirmed=True)
            print(state.snapshot().to_text(config.separator), file=stdout)
            print(MSG_QUIT, file=stdout)
            break
        outcome = interpreter.handle_line(line, confirm)
        _show(outcome, config, stdout)
        if outcome.status is not Status.CONTINUE:
            break

    logger.debug(
        "Game over: %s, %d/%d mines found",
        state.phase.name, state.found_count, state.mine_count,
    )
    print(f"Score: {state.score}", file=stdout)
    return state.score


# ============================================================================
# Argument Parsing
# ============================================================================

def _non_negative_int(text: str) -> int:
    """argparse type for seeds; numpy only accepts non-negative seeds."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="mines",
        description="A mine finding game.",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-h", "-?", "-help", "--help",
        action="help",
        help="Print this help information and exit.",
    )
    parser.add_argument(
        "-v", "-version", "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print program version information and exit.",
    )
    parser.add_argument(
        "-separator", "--separator",
        default=DEFAULT_SEPARATOR,
        metavar="<text>",
        help="Print <text> between frames. The default is a few newlines. "
             "You can clear the screen between frames with ANSI escape "
             "sequences using separator <ESC>[H<ESC>[J.",
    )
    parser.add_argument(
        "-width", "--width",
        type=int,
        default=DEFAULT_WIDTH,
        metavar="<number>",
        help=f"Set the board width (between {MIN_WIDTH} and {MAX_WIDTH}).",
    )
    parser.add_argument(
        "-height", "--height",
        type=int,
        default=DEFAULT_HEIGHT,
        metavar="<number>",
        help=f"Set the board height (between {MIN_HEIGHT} and {MAX_HEIGHT}).",
    )
    parser.add_argument(
        "-mines", "--mines",
        type=int,
        default=DEFAULT_MINES,
        metavar="<number>",
        help=f"Set the mine count (at least {MIN_MINES}; "
             "capped at the number of tiles).",
    )
    parser.add_argument(
        "-seed", "--seed",
        type=_non_negative_int,
        default=None,
        metavar="<number>",
        help="Seed the mine placement for a reproducible board.",
    )
    parser.add_argument(
        "-verbose", "--verbose",
        action="store_true",
        help="Log game internals to stderr.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run a game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        config = GameConfig(
            width=args.width,
            height=args.height,
            num_mines=args.mines,
            separator=args.separator,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    play(config, rng=np.random.default_rng(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())
