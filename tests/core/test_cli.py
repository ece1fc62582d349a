"""End-to-end tests for the terminal round."""

import io
import os
import subprocess
import sys
from pathlib import Path
from random import Random
from unittest.mock import patch

from conftest import stacked_deck
from cmdblackjack.cli import main, run
from cmdblackjack.hand import GameResult
from cmdblackjack.render import banner, deck_dump

ROOT = Path(__file__).resolve().parents[2]


class TestRun:
    """Tests for the full round output."""

    def test_output_sections(self):
        """Test banner, both deck dumps and the round appear in order."""
        out = io.StringIO()
        result = run(out, rng=Random(42))
        text = out.getvalue()

        assert text.startswith(banner())
        rest = text[len(banner()):]
        before, after, round_text = rest.split("\n\n", 2)

        assert before + "\n" == deck_dump(stacked_deck())
        assert sorted(after.split()) == sorted(before.split())
        assert after.split() != before.split()
        assert "PLAYER TOTAL: " in round_text
        assert "DEALER TOTAL: " in round_text
        assert text.endswith(str(result))

    def test_stacked_round_player_wins(self):
        """Test a player A-K against a dealer 9-8."""
        out = io.StringIO()
        deck = stacked_deck("AH", "9C", "KS", "8D")

        with patch("cmdblackjack.cards.shuffle_deck"):
            with patch("cmdblackjack.cli.Deck", return_value=deck):
                result = run(out)

        text = out.getvalue()
        assert result is GameResult.PLAYER_WIN
        assert "\t\t\t AH KS\t\t\t\t\t9C ▓\n" in text
        assert "PLAYER TOTAL: 21\nDEALER TOTAL: 17\n" in text
        assert text.endswith("YOU WIN!!!")


class TestMain:
    """Tests for the console entry point."""

    def test_exit_code_zero(self, capsys):
        assert main() == 0
        captured = capsys.readouterr()
        assert captured.out.rstrip().endswith(("YOU WIN!!!", "DEALER WIN", "TIE"))

    def test_ascii_stdout_exits_zero(self):
        """Test a stdout that cannot encode the hidden-card glyph still succeeds."""
        env = {**os.environ, "PYTHONIOENCODING": "ascii"}
        proc = subprocess.run(
            [sys.executable, "-m", "cmdblackjack"],
            cwd=ROOT,
            env=env,
            capture_output=True,
        )

        assert proc.returncode == 0, proc.stderr.decode(errors="replace")
        text = proc.stdout.decode("ascii")
        assert "PLAYER TOTAL: " in text
        assert text.endswith(("YOU WIN!!!", "DEALER WIN", "TIE"))


class TestAsciiStream:
    """Tests for a full round over an ASCII-only stream."""

    def test_run_on_ascii_stream(self):
        raw = io.BytesIO()
        out = io.TextIOWrapper(raw, encoding="ascii")
        deck = stacked_deck("AH", "9C", "KS", "8D")

        with patch("cmdblackjack.cards.shuffle_deck"):
            with patch("cmdblackjack.cli.Deck", return_value=deck):
                result = run(out)
        out.flush()

        text = raw.getvalue().decode("ascii")
        assert result is GameResult.PLAYER_WIN
        assert "9C #\n" in text
        assert text.endswith("YOU WIN!!!")
