"""Tests for bankroll management."""

import threading

import pytest

from holdem_agent.bankroll import BankrollManager, MatchVerdict


@pytest.fixture
def manager():
    return BankrollManager(10000, kelly_fraction=0.25, max_risk_percent=5)


class TestKelly:
    """Tests for fractional Kelly wager sizing."""

    def test_edge_gives_quarter_kelly(self, manager):
        # full Kelly 0.2, quarter Kelly 0.05
        assert manager.calculate_optimal_wager(0.6) == 500

    def test_smaller_edge(self, manager):
        assert manager.calculate_optimal_wager(0.55) == 250

    def test_no_edge(self, manager):
        assert manager.calculate_optimal_wager(0.5) == 0
        assert manager.calculate_optimal_wager(0.4) == 0

    def test_capped_at_max_risk(self, manager):
        assert manager.calculate_optimal_wager(0.95) == 500

    def test_payout_ratio(self, manager):
        # (2 * 0.4 - 0.6) / 2 = 0.1, quarter Kelly 0.025
        assert manager.calculate_optimal_wager(0.4, payout_ratio=2) == 250

    def test_monotone_in_probability(self, manager):
        wagers = [manager.calculate_optimal_wager(p / 100) for p in range(0, 101, 5)]
        assert all(a <= b for a, b in zip(wagers, wagers[1:]))
        assert all(0 <= w <= 500 for w in wagers)

    def test_uses_available_balance(self, manager):
        manager.reserve_for_match(5000)
        assert manager.calculate_optimal_wager(0.6) == 250

    def test_invalid_inputs(self, manager):
        with pytest.raises(ValueError):
            manager.calculate_optimal_wager(1.5)
        with pytest.raises(ValueError):
            manager.calculate_optimal_wager(0.6, payout_ratio=0)


class TestShouldPlayMatch:
    """The match gate checks run in order and return a verdict."""

    def test_favorable(self, manager):
        verdict = manager.should_play_match(300, 0.6, opponent_unknown=False)
        assert verdict == MatchVerdict(True, "Conditions favorable")
        assert verdict

    def test_insufficient_balance(self, manager):
        verdict = manager.should_play_match(20000, 0.9, opponent_unknown=False)
        assert not verdict
        assert verdict.reason.startswith("Insufficient balance")

    def test_exceeds_max_risk(self, manager):
        verdict = manager.should_play_match(600, 0.6, opponent_unknown=False)
        assert not verdict
        assert verdict.reason.startswith("Wager exceeds max risk")

    def test_joining_allows_triple_risk(self, manager):
        assert manager.should_play_match(1500, 0.6, opponent_unknown=False, is_joining=True)
        assert not manager.should_play_match(1600, 0.6, opponent_unknown=False, is_joining=True)

    def test_negative_ev_declined(self, manager):
        verdict = manager.should_play_match(100, 0.4, opponent_unknown=False)
        assert not verdict
        assert verdict.reason.startswith("Negative expected value")

    def test_unknown_opponent_skips_ev_check(self, manager):
        assert manager.should_play_match(100, 0.4, opponent_unknown=True)

    def test_unknown_opponent_joining_cap(self, manager):
        verdict = manager.should_play_match(1000, 0.6, opponent_unknown=True, is_joining=True)
        assert verdict == MatchVerdict(False, "High wager against unknown opponent")
        assert manager.should_play_match(500, 0.6, opponent_unknown=True, is_joining=True)

    def test_stop_loss_blocks_creating_not_joining(self, manager):
        assert manager.reserve_for_match(2500)
        manager.record_result(2500, won=False, pot=5000)
        assert manager.is_stop_loss_hit()

        creating = manager.should_play_match(300, 0.55, opponent_unknown=False)
        joining = manager.should_play_match(300, 0.55, opponent_unknown=False, is_joining=True)
        assert creating == MatchVerdict(False, "Session stop-loss reached")
        assert joining

    def test_gate_does_not_change_state(self, manager):
        before = manager.get_state()
        manager.should_play_match(300, 0.6, opponent_unknown=False)
        assert manager.get_state() == before

    def test_invalid_inputs(self, manager):
        with pytest.raises(ValueError):
            manager.should_play_match(-1, 0.6, opponent_unknown=False)
        with pytest.raises(ValueError):
            manager.should_play_match(100, -0.1, opponent_unknown=False)
        with pytest.raises(TypeError):
            manager.should_play_match(100.0, 0.6, opponent_unknown=False)


class TestExpectedValue:
    """Tests for heads-up match EV."""

    def test_values(self):
        assert BankrollManager.calculate_expected_value(100, 0.6) == pytest.approx(20.0)
        assert BankrollManager.calculate_expected_value(100, 0.5) == pytest.approx(0.0)
        assert BankrollManager.calculate_expected_value(100, 0.25) == pytest.approx(-50.0)


class TestLedger:
    """Reservations, results and balance updates."""

    def test_reserve(self, manager):
        assert manager.reserve_for_match(1000)
        state = manager.get_state()
        assert state.available_balance == 9000
        assert state.in_play == 1000
        assert state.total_balance == 10000
        assert state.is_consistent

    def test_reserve_failure_leaves_state(self, manager):
        before = manager.get_state()
        assert not manager.reserve_for_match(10001)
        assert manager.get_state() == before

    def test_win(self, manager):
        manager.reserve_for_match(500)
        manager.record_result(500, won=True, pot=1000)
        state = manager.get_state()
        assert state.available_balance == 10500
        assert state.total_balance == 10500
        assert state.in_play == 0
        assert state.session_profit == 500
        assert state.all_time_profit == 500
        stats = manager.get_session_stats()
        assert stats.wins == 1
        assert stats.biggest_win == 500
        assert stats.current_balance == 10500

    def test_loss(self, manager):
        manager.reserve_for_match(500)
        manager.record_result(500, won=False, pot=1000)
        state = manager.get_state()
        assert state.total_balance == 9500
        assert state.session_profit == -500
        stats = manager.get_session_stats()
        assert stats.losses == 1
        assert stats.biggest_loss == 500
        assert stats.games_played == 1

    def test_settling_more_than_in_play(self, manager):
        manager.reserve_for_match(100)
        with pytest.raises(ValueError):
            manager.record_result(200, won=True, pot=400)
        assert manager.get_state().in_play == 100

    def test_update_balance_keeps_in_play(self, manager):
        manager.reserve_for_match(200)
        manager.update_balance(5000)
        state = manager.get_state()
        assert state.available_balance == 5000
        assert state.in_play == 200
        assert state.total_balance == 5200

    def test_invariant_over_sequence(self, manager):
        steps = [
            lambda: manager.reserve_for_match(400),
            lambda: manager.record_result(400, won=True, pot=800),
            lambda: manager.reserve_for_match(300),
            lambda: manager.update_balance(9000),
            lambda: manager.record_result(300, won=False, pot=600),
            lambda: manager.reserve_for_match(50),
        ]
        for step in steps:
            step()
            assert manager.get_state().is_consistent

    def test_get_state_returns_copy(self, manager):
        state = manager.get_state()
        state.available_balance = 0
        assert manager.get_state().available_balance == 10000

    def test_concurrent_reservations(self):
        manager = BankrollManager(500)
        results = []
        barrier = threading.Barrier(10)

        def worker():
            barrier.wait()
            results.append(manager.reserve_for_match(100))

        threads = [threading.Thread(target=worker) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 5
        state = manager.get_state()
        assert state.available_balance == 0
        assert state.in_play == 500


class TestSession:
    """Session tracking and reporting."""

    def test_stop_loss_threshold(self, manager):
        manager.reserve_for_match(2000)
        manager.record_result(2000, won=False, pot=4000)
        assert not manager.is_stop_loss_hit()
        manager.reserve_for_match(1)
        manager.record_result(1, won=False, pot=2)
        assert manager.is_stop_loss_hit()

    def test_reset_session(self, manager):
        manager.reserve_for_match(2500)
        manager.record_result(2500, won=False, pot=5000)
        manager.reset_session()
        assert not manager.is_stop_loss_hit()
        assert manager.get_state().session_profit == 0
        assert manager.get_state().all_time_profit == -2500
        assert manager.get_session_stats().start_balance == 7500

    def test_win_rate(self, manager):
        assert manager.get_win_rate() == 0.0
        for won in (True, False, True, True):
            manager.reserve_for_match(10)
            manager.record_result(10, won=won, pot=20)
        assert manager.get_win_rate() == pytest.approx(0.75)

    def test_summary(self, manager):
        manager.reserve_for_match(100)
        manager.record_result(100, won=True, pot=200)
        summary = manager.get_summary()
        assert summary.startswith("Bankroll Summary")
        assert "Games Played: 1" in summary
        assert "Win Rate: 100.0%" in summary


class TestConstruction:
    """Constructor validation."""

    def test_defaults_from_config(self):
        manager = BankrollManager(1000)
        assert manager.kelly_fraction == 0.25

    def test_invalid(self):
        with pytest.raises(ValueError):
            BankrollManager(-1)
        with pytest.raises(TypeError):
            BankrollManager(100.5)
        with pytest.raises(ValueError):
            BankrollManager(100, max_risk_percent=150)
        with pytest.raises(ValueError):
            BankrollManager(100, kelly_fraction=-0.1)
