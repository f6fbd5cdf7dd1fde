"""Tests for the command line interface."""

from typer.testing import CliRunner

from holdem_agent.cli import app

runner = CliRunner()


class TestEvaluate:
    """Tests for the evaluate command."""

    def test_royal_flush(self):
        """A royal flush is named as such."""
        result = runner.invoke(app, ["evaluate", "As", "Ks", "Qs", "Js", "Ts"])
        assert result.exit_code == 0
        assert "Royal Flush" in result.output

    def test_seven_cards(self):
        result = runner.invoke(app, ["evaluate", "Ah", "Ad", "Kc", "Ks", "2d", "3c", "7h"])
        assert result.exit_code == 0
        assert "Two Pair" in result.output

    def test_invalid_card(self):
        """Unparseable cards exit with status 1."""
        result = runner.invoke(app, ["evaluate", "Xx", "Ks", "Qs", "Js", "Ts"])
        assert result.exit_code == 1
        assert "Invalid card" in result.output

    def test_too_few_cards(self):
        result = runner.invoke(app, ["evaluate", "As", "Ks", "Qs"])
        assert result.exit_code == 1


class TestEquity:
    """Tests for the equity command."""

    def test_preflop_equity(self):
        result = runner.invoke(app, ["equity", "As", "Ah", "--simulations", "50", "--seed", "1"])
        assert result.exit_code == 0
        assert "Equity vs Random Hand" in result.output

    def test_nut_river(self):
        """An unbeatable river reports full equity."""
        args = ["equity", "As", "Ks"]
        for card in ("Qs", "Js", "Ts", "2h", "3d"):
            args += ["-b", card]
        result = runner.invoke(app, args + ["--simulations", "20", "--seed", "3"])
        assert result.exit_code == 0
        assert "100.0%" in result.output

    def test_overlapping_board(self):
        result = runner.invoke(app, ["equity", "As", "Ah", "-b", "As", "-b", "2c", "-b", "3d"])
        assert result.exit_code == 1


class TestPreflop:
    """Tests for the preflop command."""

    def test_aces_on_button(self):
        result = runner.invoke(app, ["preflop", "As", "Ah", "--position", "BTN"])
        assert result.exit_code == 0
        assert "premium" in result.output
        assert "raise" in result.output

    def test_big_blind_check(self):
        """Seat labels other than the button play as the big blind."""
        result = runner.invoke(app, ["preflop", "Ks", "Jd", "--position", "UTG"])
        assert result.exit_code == 0
        assert "check" in result.output

    def test_unknown_position(self):
        result = runner.invoke(app, ["preflop", "As", "Ah", "--position", "ROOF"])
        assert result.exit_code == 1


class TestDecide:
    """Tests for the decide command."""

    def test_preflop_raise(self):
        result = runner.invoke(app, ["decide", "As", "Ah", "--pot", "30", "--chips", "1000", "--seed", "1"])
        assert result.exit_code == 0
        assert "RAISE 30" in result.output

    def test_river_value_bet(self):
        """The nuts on the river bets two thirds of the pot."""
        args = ["decide", "As", "Ks", "--pot", "1000", "--chips", "5000", "--seed", "2"]
        for card in ("Qs", "Js", "Ts", "2h", "3d"):
            args += ["-b", card]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "RAISE 660" in result.output

    def test_bad_board_size(self):
        result = runner.invoke(
            app, ["decide", "As", "Ah", "-b", "2c", "-b", "3d", "--pot", "30", "--chips", "1000"]
        )
        assert result.exit_code == 1
        assert "Board must have" in result.output


class TestKelly:
    """Tests for the kelly command."""

    def test_suggested_wager(self):
        result = runner.invoke(app, ["kelly", "--balance", "10000", "--win-prob", "0.6"])
        assert result.exit_code == 0
        assert "Suggested wager: 500 of 10000" in result.output
        assert "Conditions favorable" in result.output

    def test_no_edge(self):
        result = runner.invoke(app, ["kelly", "--balance", "10000", "--win-prob", "0.4"])
        assert result.exit_code == 0
        assert "Suggested wager: 0 of 10000" in result.output

    def test_invalid_payout(self):
        result = runner.invoke(
            app, ["kelly", "--balance", "10000", "--win-prob", "0.6", "--payout", "0"]
        )
        assert result.exit_code == 1
