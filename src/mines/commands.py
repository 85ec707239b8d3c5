"""
Player commands.

Parses the short text commands typed by the player and dispatches them
to a GameState, pairing each result with the message to show.

Syntax (surrounding whitespace ignored):
    <nothing>    redisplay the board
    r<position>  reveal <position>
    <position>   same as r<position>
    f<position>  toggle the flag at <position>
    h or ?       help
    q            quit

A position is a column letter followed by a 1-based row number, e.g. "C12".
"""
import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .config import ALPHABET
from .errors import CommandTooLongError, ParseError
from .render import RenderSnapshot
from .state import GameState, Status


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

MAX_COMMAND_LENGTH = 7

HELP_TEXT = """
The purpose of this game is to flag all the mines hidden under tiles on the
board. You must flag the correct tiles, and nothing more, to win. If a tile
has one or more mines adjacent or immediately diagonal, it is displayed as
that number from 1 to 8. Try to reveal tiles which you know to be safe to
isolate the mines.

Commands are used to interact with the program. A command is an optional
lowercase letter followed by an optional position. A position is a capital
letter indicating a column followed by a positive integer indicating a row.
These quantities must fit within the board.

Commands:
  <nothing>    Perform no action and print out the board.
  r<position>  Reveal <position>. If a mine is there, you're dead.
  <position>   Same as r<position>.
  f<position>  Toggle the flag at <position>. Nothing happens if the tile is
               already revealed.
  ?            Print this help information.
  q            Quit the game. You will have to confirm your quitting unless
               you have yet to perform any action.
"""

MSG_INVALID = "Invalid command. Use command '?' for help."
MSG_UNFLAG_FIRST = "Unflag the space before you reveal it."
MSG_NO_FLAGS_LEFT = "No flags left. Unflag a tile first."
MSG_WON = "All mines found! You win!"
MSG_LOST = "You hit a mine! Game over."
MSG_QUIT = "Game quit."

_POSITION_RE = re.compile(r"([A-Za-z])([0-9]+)")


# ============================================================================
# Command Types
# ============================================================================

@dataclass(frozen=True)
class NoOp:
    """Redisplay the board."""


@dataclass(frozen=True)
class Flag:
    """Toggle the flag at (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class Reveal:
    """Reveal the tile at (x, y)."""

    x: int
    y: int


@dataclass(frozen=True)
class Help:
    """Show how to play."""


@dataclass(frozen=True)
class Quit:
    """End the game."""


Command = Union[NoOp, Flag, Reveal, Help, Quit]


# ============================================================================
# Parsing
# ============================================================================

def parse_position(text: str, width: int, height: int) -> Tuple[int, int]:
    """
    Parse a position such as "C12" into zero-based (x, y).

    Raises:
        ParseError: If the text is not a position on the board.
    """
    match = _POSITION_RE.fullmatch(text)
    if match is None:
        raise ParseError(f"Not a position: {text!r}")
    x = ALPHABET.index(match.group(1).upper())
    y = int(match.group(2)) - 1
    if x >= width or not 0 <= y < height:
        raise ParseError(f"Position {text!r} is off the board")
    return x, y


def parse_command(line: str, width: int, height: int) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw input line.
        width: Board width, for validating positions.
        height: Board height, for validating positions.

    Returns:
        The parsed command.

    Raises:
        ParseError: If the line is too long or not a valid command.
    """
    text = line.strip()
    if len(text) > MAX_COMMAND_LENGTH:
        raise CommandTooLongError(
            f"Command too long; characters after {text[MAX_COMMAND_LENGTH - 1]!r} ignored."
        )
    if not text:
        return NoOp()

    head, rest = text[0], text[1:]
    if head == "f":
        return Flag(*parse_position(rest, width, height))
    if head in ("h", "?"):
        return Help()
    if head == "q":
        return Quit()
    if head == "r":
        return Reveal(*parse_position(rest, width, height))
    return Reveal(*parse_position(text, width, height))


# ============================================================================
# Command Interpreter
# ============================================================================

@dataclass(frozen=True)
class Outcome:
    """
    Result of executing one command.

    Attributes:
        snapshot: Board to display.
        status: Whether the game continues or how it ended.
        message: Text to show after the board, if any.
        show_board: False when only the message should be shown.
    """

    snapshot: RenderSnapshot
    status: Status
    message: Optional[str] = None
    show_board: bool = True


class CommandInterpreter:
    """Dispatches parsed commands to a GameState."""

    def __init__(self, state: GameState) -> None:
        self.state = state

    def parse(self, line: str) -> Command:
        """Parse a line against the current board size."""
        return parse_command(
            line, self.state.config.width, self.state.config.height
        )

    def handle_line(
        self,
        line: str,
        confirm: Optional[Callable[[], bool]] = None,
    ) -> Outcome:
        """
        Parse and execute one line of input.

        Unparseable input leaves the game unchanged and yields an error
        message.

        Args:
            line: Raw input line.
            confirm: Asks the player whether to really quit; only called
                when quitting needs confirmation. Without it, such a quit
                is declined.
        """
        try:
            command = self.parse(line)
        except CommandTooLongError as exc:
            return self._outcome(Status.CONTINUE, str(exc), show_board=False)
        except ParseError as exc:
            logger.debug("Rejected input %r: %s", line, exc)
            return self._outcome(Status.CONTINUE, MSG_INVALID, show_board=False)
        confirm_quit = False
        if isinstance(command, Quit) and self.state.requires_quit_confirmation:
            confirm_quit = confirm is not None and confirm()
        return self.execute(command, confirm_quit)

    def execute(self, command: Command, confirm_quit: bool = False) -> Outcome:
        """
        Apply a command to the game.

        Args:
            command: Parsed command.
            confirm_quit: Player's answer to the quit prompt; ignored
                unless the game requires confirmation.
        """
        state = self.state
        if isinstance(command, NoOp):
            return self._outcome(state.status)
        if isinstance(command, Help):
            return self._outcome(state.status, HELP_TEXT, show_board=False)
        if isinstance(command, Flag):
            return self._flag(command)
        if isinstance(command, Reveal):
            return self._reveal(command)
        if isinstance(command, Quit):
            status = state.quit(confirmed=confirm_quit)
            if status is Status.QUIT:
                return self._outcome(status, MSG_QUIT)
            return self._outcome(status, show_board=status is not Status.CONTINUE)
        raise TypeError(f"Unknown command: {command!r}")

    def _flag(self, command: Flag) -> Outcome:
        state = self.state
        refused = (
            not state.is_over
            and not state.grid.is_revealed(command.x, command.y)
            and not state.grid.is_flagged(command.x, command.y)
            and state.flags_left == 0
        )
        status = state.flag(command.x, command.y)
        if status is Status.WON:
            return self._outcome(status, MSG_WON)
        if refused and status is Status.CONTINUE:
            return self._outcome(status, MSG_NO_FLAGS_LEFT)
        return self._outcome(status)

    def _reveal(self, command: Reveal) -> Outcome:
        state = self.state
        if not state.is_over and state.grid.is_flagged(command.x, command.y):
            return self._outcome(Status.CONTINUE, MSG_UNFLAG_FIRST, show_board=False)
        status = state.reveal(command.x, command.y)
        if status is Status.LOST:
            return self._outcome(status, MSG_LOST)
        return self._outcome(status)

    def _outcome(
        self,
        status: Status,
        message: Optional[str] = None,
        show_board: bool = True,
    ) -> Outcome:
        return Outcome(self.state.snapshot(), status, message, show_board)


def apply_command(
    state: GameState, command: Command, confirm_quit: bool = False
) -> Tuple[RenderSnapshot, Status]:
    """
    Apply a command to a game.

    Returns:
        Tuple of (snapshot to display, status).
    """
    outcome = CommandInterpreter(state).execute(command, confirm_quit)
    return outcome.snapshot, outcome.status
