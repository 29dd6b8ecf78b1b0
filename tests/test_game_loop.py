# Area: Game Loop Tests
"""Tests for the game loop."""

import io
from unittest.mock import patch

import pytest
from guessing_game.game_loop import GameLoop, BANNER, PROMPT
from guessing_game.enums import GameState
from guessing_game.errors import InputStreamError
from guessing_game.outcome import Outcome


def make_game(fixed_rng, secret, lines, **kwargs):
    """Create a GameLoop with a fixed secret and in-memory streams."""
    stdin = io.StringIO("".join(lines))
    stdout = io.StringIO()
    game = GameLoop(rng=fixed_rng(secret), stdin=stdin, stdout=stdout, **kwargs)
    return game, stdin, stdout


def output_lines(stdout):
    return stdout.getvalue().splitlines()


class TestGameLoopScenarios:
    """End-to-end runs against in-memory streams."""

    def test_low_high_win(self, fixed_rng):
        """Secret 42 with 7, 99, 42: small, big, win, no fourth prompt."""
        game, _, stdout = make_game(fixed_rng, 42, ["7\n", "99\n", "42\n"])

        assert game.run() == GameState.WON

        assert output_lines(stdout) == [
            BANNER,
            PROMPT, "You guessed: 7", "Too small!",
            PROMPT, "You guessed: 99", "Too big!",
            PROMPT, "You guessed: 42", "You win!",
        ]

    def test_malformed_line_is_silent(self, fixed_rng):
        """Secret 10 with abc, 10: no outcome for abc, then a win."""
        game, _, stdout = make_game(fixed_rng, 10, ["abc\n", "10\n"])

        game.run()

        assert output_lines(stdout) == [
            BANNER,
            PROMPT,
            PROMPT, "You guessed: 10", "You win!",
        ]

    def test_prompt_identical_after_many_bad_lines(self, fixed_rng):
        bad = ["abc\n", "\n", "-5\n", "3.14\n"]
        game, _, stdout = make_game(fixed_rng, 3, bad + ["3\n"])

        game.run()

        lines = output_lines(stdout)
        assert lines[1:6] == [PROMPT] * 5
        assert lines[6:] == ["You guessed: 3", "You win!"]

    def test_stops_reading_after_win(self, fixed_rng):
        """Lines after the winning guess are left unread."""
        game, stdin, _ = make_game(fixed_rng, 5, ["5\n", "6\n"])
        game.run()
        assert stdin.read() == "6\n"

    def test_crlf_and_whitespace_input(self, fixed_rng):
        game, _, stdout = make_game(fixed_rng, 50, ["  50 \r\n"])
        game.run()
        assert output_lines(stdout)[-2:] == ["You guessed: 50", "You win!"]

    def test_echo_uses_parsed_value(self, fixed_rng):
        game, _, stdout = make_game(fixed_rng, 7, ["+007\n"])
        game.run()
        assert "You guessed: 7" in output_lines(stdout)

    def test_end_of_input_before_win_raises(self, fixed_rng):
        game, _, stdout = make_game(fixed_rng, 42, ["1\n"])

        with pytest.raises(InputStreamError):
            game.run()

        assert game.state == GameState.PLAYING
        assert output_lines(stdout)[-1] == PROMPT

    def test_reveal_secret(self, fixed_rng):
        game, _, stdout = make_game(fixed_rng, 42, ["42\n"], reveal_secret=True)
        game.run()
        assert output_lines(stdout)[:2] == [BANNER, "The secret number is: 42"]

    def test_secret_hidden_by_default(self, fixed_rng):
        game, _, stdout = make_game(fixed_rng, 42, ["42\n"])
        game.run()
        assert "The secret number is: 42" not in stdout.getvalue()


class TestGameLoopStep:
    """Tests for processing single lines."""

    def test_step_less(self, fixed_rng):
        game, _, stdout = make_game(fixed_rng, 42, [])
        assert game.step("7\n") is Outcome.LESS
        assert game.state == GameState.PLAYING
        assert output_lines(stdout) == ["You guessed: 7", "Too small!"]

    def test_step_greater(self, fixed_rng):
        game, _, _ = make_game(fixed_rng, 42, [])
        assert game.step("4294967295\n") is Outcome.GREATER
        assert game.state == GameState.PLAYING

    def test_step_equal_wins(self, fixed_rng):
        game, _, _ = make_game(fixed_rng, 42, [])
        assert game.step("42\n") is Outcome.EQUAL
        assert game.state == GameState.WON

    @pytest.mark.parametrize("raw", ["abc\n", "", "-5\n", "3.14\n", "4294967296\n"])
    def test_step_rejected_line(self, fixed_rng, raw):
        game, _, stdout = make_game(fixed_rng, 42, [])
        assert game.step(raw) is None
        assert game.state == GameState.PLAYING
        assert stdout.getvalue() == ""

    def test_step_after_win_raises(self, fixed_rng):
        game, _, _ = make_game(fixed_rng, 42, [])
        game.step("42\n")
        with pytest.raises(ValueError):
            game.step("42\n")

    def test_rejected_line_logged_at_debug(self, fixed_rng):
        game, _, _ = make_game(fixed_rng, 42, [])
        with patch("guessing_game.game_loop.logger") as mock_logger:
            game.step("abc\n")
            mock_logger.debug.assert_called_once()
            mock_logger.info.assert_not_called()


class TestGameLoopInit:
    """Tests for construction."""

    def test_secret_fixed_for_game(self, fixed_rng):
        rng = fixed_rng(42)
        game = GameLoop(rng=rng, stdin=io.StringIO(), stdout=io.StringIO())
        for line in ["1\n", "2\n", "100\n"]:
            game.step(line)
        assert game.secret == 42
        assert len(rng.calls) == 1

    def test_secret_is_read_only(self, fixed_rng):
        game = GameLoop(rng=fixed_rng(42), stdin=io.StringIO(), stdout=io.StringIO())
        with pytest.raises(AttributeError):
            game.secret = 1

    def test_default_rng_draws_in_range(self):
        game = GameLoop(stdin=io.StringIO(), stdout=io.StringIO())
        assert 1 <= game.secret <= 100

    def test_default_streams(self, fixed_rng):
        with patch("guessing_game.game_loop.sys") as mock_sys:
            game = GameLoop(rng=fixed_rng(1))
        assert game.stdin is mock_sys.stdin
        assert game.stdout is mock_sys.stdout
