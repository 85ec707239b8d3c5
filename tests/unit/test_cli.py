"""
Tests for the command line game loop and argument parsing.
"""
import io

import pytest
from conftest import ScriptedRng
from mines import GameConfig
from mines.cli import PROMPT, QUIT_PROMPT, build_parser, main, play
from mines.commands import MSG_INVALID, MSG_LOST, MSG_QUIT, MSG_WON


def run(config: GameConfig, script: str, rng=None) -> tuple:
    out = io.StringIO()
    score = play(config, io.StringIO(script), out, rng or ScriptedRng([]))
    return score, out.getvalue()


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestPlay:
    """Test playing whole games from scripted input."""

    def test_initial_board_and_prompt(self) -> None:
        _, output = run(GameConfig(3, 3, 1, separator=""), "q\n")
        assert output.startswith("     A B C\n")
        assert PROMPT in output

    def test_quit_before_moving(self) -> None:
        score, output = run(GameConfig(3, 3, 1, separator=""), "q\n")
        assert QUIT_PROMPT not in output
        assert MSG_QUIT in output
        assert output.rstrip().endswith("Score: 0")
        assert score == 0

    def test_confirmed_quit(self) -> None:
        _, output = run(GameConfig(3, 3, 0, separator=""), "A1\nq\ny\n")
        assert QUIT_PROMPT in output
        assert output.count(MSG_QUIT) == 1

    def test_declined_quit_then_end_of_input(self) -> None:
        _, output = run(GameConfig(3, 3, 0, separator=""), "A1\nq\nn\n")
        assert output.count(QUIT_PROMPT) == 1
        # End of input still ends the game.
        assert output.count(MSG_QUIT) == 1

    def test_end_of_input_at_quit_prompt_confirms(self) -> None:
        _, output = run(GameConfig(3, 3, 0, separator=""), "A1\nq\n")
        assert output.count(MSG_QUIT) == 1

    def test_win(self) -> None:
        score, output = run(
            GameConfig(5, 5, 1, separator=""), "fC4\nA1\n", ScriptedRng([2, 3])
        )
        assert MSG_WON in output
        assert score == 40
        assert "Score: 40" in output

    def test_loss(self) -> None:
        score, output = run(
            GameConfig(5, 5, 1, separator=""), "A1\nC4\nB2\n", ScriptedRng([2, 3])
        )
        assert MSG_LOST in output
        assert score == 0
        # Input after the game ended is not read.
        assert output.count("Flags: 0/1") == 3

    def test_invalid_command(self) -> None:
        _, output = run(GameConfig(3, 3, 1, separator=""), "zz\n")
        assert MSG_INVALID in output

    def test_separator_before_each_frame(self) -> None:
        _, output = run(GameConfig(2, 2, 1, separator="<>\n"), "\n\nq\n")
        assert output.count("<>\n") == 4


# ============================================================================
# Argument Parsing Tests
# ============================================================================

class TestArguments:
    """Test command line options."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert (args.width, args.height, args.mines) == (20, 20, 40)
        assert args.seed is None
        assert args.verbose is False

    def test_single_dash_options(self) -> None:
        args = build_parser().parse_args(
            ["-width", "9", "-height", "8", "-mines", "7", "-separator", "::"]
        )
        assert (args.width, args.height, args.mines) == (9, 8, 7)
        assert args.separator == "::"

    def test_double_dash_options(self) -> None:
        args = build_parser().parse_args(["--width", "5", "--seed", "3"])
        assert args.width == 5
        assert args.seed == 3

    def test_version(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["-version"])
        assert excinfo.value.code == 0
        assert capsys.readouterr().out.strip() == "mines 0.4.7"

    def test_help(self, capsys: pytest.CaptureFixture) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["-help"])
        assert excinfo.value.code == 0
        assert "A mine finding game." in capsys.readouterr().out

    @pytest.mark.parametrize("argv", [
        ["-width", "27"],
        ["-height", "0"],
        ["-mines", "-1"],
        ["-width", "ten"],
        ["-seed", "-1"],
        ["-seed", "abc"],
        ["-bogus"],
    ])
    def test_bad_options_exit(
        self, argv: list, capsys: pytest.CaptureFixture
    ) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
        assert "mines: error:" in capsys.readouterr().err

    def test_main_plays_a_game(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("A1\nq\ny\n"))
        assert main(["-width", "4", "-height", "4", "-mines", "2", "-seed", "1"]) == 0
        output = capsys.readouterr().out
        assert "Flags: 0/2" in output
        assert "Score: 0" in output
