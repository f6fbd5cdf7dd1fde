"""Bankroll management: match eligibility, Kelly sizing and session tracking."""

import logging
import math
import threading
import time
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Optional

from holdem_agent import config
from holdem_agent.models.bankroll import BankrollState, SessionStats
from holdem_agent.models.context import require_amount

logger = logging.getLogger(__name__)

# Stop-loss triggers once the session is down more than 1/STOP_LOSS_DIVISOR of its start
STOP_LOSS_DIVISOR = 5
# Joining an existing game allows this multiple of the usual max risk
JOINING_RISK_MULTIPLIER = 3
# Against unknown opponents the wager must stay within total // divisor
UNKNOWN_OPPONENT_DIVISOR_JOINING = 20
UNKNOWN_OPPONENT_DIVISOR_CREATING = 5


@dataclass(frozen=True)
class MatchVerdict:
    """Outcome of the match eligibility gate."""
    should_play: bool
    reason: str

    def __bool__(self) -> bool:
        return self.should_play


def _require_probability(name: str, value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")
    return value


class BankrollManager:
    """Manages bankroll and risk for the agent.

    Balances are integers in the ledger's smallest unit. All state changes go
    through one re-entrant lock, so a reservation always completes before
    the matching result can be recorded.
    """

    def __init__(
        self,
        initial_balance: int,
        kelly_fraction: Optional[float] = None,
        max_risk_percent: Optional[float] = None,
    ):
        """Initialize the manager.

        Args:
            initial_balance: Starting wallet balance.
            kelly_fraction: Multiplier applied to the full Kelly stake;
                defaults to ``config.KELLY_FRACTION``.
            max_risk_percent: Largest share of the bankroll one match may
                risk, in percent; defaults to ``config.MAX_WAGER_PERCENT``.
        """
        require_amount("initial_balance", initial_balance)
        self.kelly_fraction = config.KELLY_FRACTION if kelly_fraction is None else kelly_fraction
        percent = config.MAX_WAGER_PERCENT if max_risk_percent is None else max_risk_percent
        if self.kelly_fraction < 0:
            raise ValueError(f"kelly_fraction cannot be negative: {self.kelly_fraction}")
        if not 0 <= percent <= 100:
            raise ValueError(f"max_risk_percent must be within [0, 100], got {percent}")
        self.max_risk = Fraction(str(percent)) / 100

        self._lock = threading.RLock()
        self._state = BankrollState(
            total_balance=initial_balance,
            available_balance=initial_balance,
        )
        self._session = SessionStats(
            start_balance=initial_balance,
            current_balance=initial_balance,
        )

        logger.info(
            "Bankroll manager initialized balance=%d kelly_fraction=%s max_risk=%s",
            initial_balance, self.kelly_fraction, float(self.max_risk),
        )

    def calculate_optimal_wager(self, win_probability: float, payout_ratio: float = 1) -> int:
        """Fractional Kelly stake for a match.

        Args:
            win_probability: Estimated probability of winning.
            payout_ratio: Net units won per unit staked.

        Returns:
            ``floor(available * fraction)`` where fraction is the Kelly
            fraction scaled down, floored at 0 and capped at the max risk.
        """
        _require_probability("win_probability", win_probability)
        if payout_ratio <= 0:
            raise ValueError(f"payout_ratio must be positive, got {payout_ratio}")

        # Kelly: f* = (b*p - q) / b, in exact decimal arithmetic
        b = Fraction(str(payout_ratio))
        p = Fraction(str(win_probability))
        q = 1 - p
        fraction = max(Fraction(0), (b * p - q) / b * Fraction(str(self.kelly_fraction)))
        capped = min(fraction, self.max_risk)

        with self._lock:
            wager = math.floor(self._state.available_balance * capped)

        logger.debug("Calculated optimal wager win_prob=%.3f kelly=%.4f wager=%d",
                     win_probability, float(capped), wager)
        return wager

    def should_play_match(
        self,
        wager_amount: int,
        estimated_win_prob: float,
        opponent_unknown: bool,
        is_joining: bool = False,
    ) -> MatchVerdict:
        """Decide whether to create or join a match at this wager.

        Args:
            wager_amount: Stake for the match.
            estimated_win_prob: Our estimated chance of winning it.
            opponent_unknown: No history on the opponent; skips the EV check
                but caps the stake.
            is_joining: Joining an existing game rather than creating one.

        Returns:
            MatchVerdict; declines are ordinary results, never exceptions.
        """
        require_amount("wager_amount", wager_amount)
        _require_probability("estimated_win_prob", estimated_win_prob)

        with self._lock:
            state = self._state

            if wager_amount > state.available_balance:
                return MatchVerdict(
                    False,
                    f"Insufficient balance ({wager_amount} > {state.available_balance} available)",
                )

            max_risk = self.max_risk * (JOINING_RISK_MULTIPLIER if is_joining else 1)
            risk = Fraction(wager_amount, state.total_balance) if state.total_balance else Fraction(0)
            if risk > max_risk:
                return MatchVerdict(
                    False,
                    f"Wager exceeds max risk ({float(risk) * 100:.1f}% > {float(max_risk) * 100:.1f}%)",
                )

            ev = self.calculate_expected_value(wager_amount, estimated_win_prob)
            if ev < 0 and not opponent_unknown:
                return MatchVerdict(False, f"Negative expected value: {ev:.4f}")

            if not is_joining and self.is_stop_loss_hit():
                return MatchVerdict(False, "Session stop-loss reached")

            divisor = (UNKNOWN_OPPONENT_DIVISOR_JOINING if is_joining
                       else UNKNOWN_OPPONENT_DIVISOR_CREATING)
            if opponent_unknown and wager_amount > state.total_balance // divisor:
                return MatchVerdict(False, "High wager against unknown opponent")

        return MatchVerdict(True, "Conditions favorable")

    @staticmethod
    def calculate_expected_value(wager_amount: int, win_probability: float) -> float:
        """Heads-up EV: win the opponent's matching wager or lose ours."""
        return win_probability * wager_amount - (1 - win_probability) * wager_amount

    def reserve_for_match(self, wager_amount: int) -> bool:
        """Move ``wager_amount`` from available to in-play.

        Returns:
            False, leaving the state untouched, when funds are insufficient.
        """
        require_amount("wager_amount", wager_amount)
        with self._lock:
            if self._state.available_balance < wager_amount:
                logger.info("Cannot reserve %d, only %d available",
                            wager_amount, self._state.available_balance)
                return False

            self._state.available_balance -= wager_amount
            self._state.in_play += wager_amount

            logger.info("Reserved funds for match reserved=%d in_play=%d available=%d",
                        wager_amount, self._state.in_play, self._state.available_balance)
        return True

    def record_result(self, wager_amount: int, won: bool, pot: int) -> None:
        """Settle a reserved wager.

        A win credits the whole pot to the available balance; a loss only
        books the wager against the profit trackers.

        Raises:
            ValueError: If more is settled than is currently in play.
        """
        require_amount("wager_amount", wager_amount)
        require_amount("pot", pot)

        with self._lock:
            state, session = self._state, self._session
            if wager_amount > state.in_play:
                raise ValueError(
                    f"Cannot settle {wager_amount}, only {state.in_play} is in play"
                )

            state.in_play -= wager_amount

            if won:
                profit = pot - wager_amount
                state.available_balance += pot
                state.session_profit += profit
                state.all_time_profit += profit
                session.wins += 1
                session.biggest_win = max(session.biggest_win, profit)
            else:
                state.session_profit -= wager_amount
                state.all_time_profit -= wager_amount
                session.losses += 1
                session.biggest_loss = max(session.biggest_loss, wager_amount)

            state.total_balance = state.available_balance + state.in_play
            session.current_balance = state.total_balance
            session.games_played += 1

            logger.info("Match result recorded won=%s pot=%d session_profit=%d total=%d",
                        won, pot, state.session_profit, state.total_balance)

    def update_balance(self, new_balance: int) -> None:
        """Resync the available balance from an authoritative source.

        Funds in play are kept as they are.
        """
        require_amount("new_balance", new_balance)
        with self._lock:
            self._state.available_balance = new_balance
            self._state.total_balance = new_balance + self._state.in_play
            self._session.current_balance = self._state.total_balance

            logger.info("Balance updated available=%d total=%d",
                        new_balance, self._state.total_balance)

    def is_stop_loss_hit(self) -> bool:
        """Session profit has fallen below -20% of the session's start balance."""
        with self._lock:
            threshold = self._session.start_balance // STOP_LOSS_DIVISOR
            return self._state.session_profit < -threshold

    def reset_session(self) -> None:
        """Start a new session from the current total balance."""
        with self._lock:
            total = self._state.total_balance
            self._state.session_profit = 0
            self._session = SessionStats(start_balance=total, current_balance=total)
            logger.info("Session reset start_balance=%d", total)

    def get_state(self) -> BankrollState:
        with self._lock:
            return replace(self._state)

    def get_session_stats(self) -> SessionStats:
        with self._lock:
            return replace(self._session)

    def get_win_rate(self) -> float:
        with self._lock:
            total = self._session.wins + self._session.losses
            return self._session.wins / total if total > 0 else 0.0

    def get_summary(self) -> str:
        """Multi-line bankroll report."""
        with self._lock:
            state, session = self._state, self._session
            minutes = (time.time() - session.start_time) / 60
            lines = [
                "Bankroll Summary",
                "================",
                f"Total Balance: {state.total_balance}",
                f"Session Profit: {state.session_profit}",
                f"Games Played: {session.games_played}",
                f"Win Rate: {self.get_win_rate() * 100:.1f}%",
                f"Biggest Win: {session.biggest_win}",
                f"Biggest Loss: {session.biggest_loss}",
                f"Session Duration: {minutes:.1f} minutes",
            ]
        return "\n".join(lines)
