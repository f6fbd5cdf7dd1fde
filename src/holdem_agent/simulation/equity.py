"""Monte Carlo equity and pot odds calculations."""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from holdem_agent.models.card import Card, validate_hole_cards
from holdem_agent.simulation.deck import Deck
from holdem_agent.simulation.evaluator import HandEvaluator

logger = logging.getLogger(__name__)


@dataclass
class SimulationTally:
    """Win/tie counts of a batch of trials; batches merge by addition."""
    wins: int = 0
    ties: int = 0
    trials: int = 0

    def __add__(self, other: "SimulationTally") -> "SimulationTally":
        return SimulationTally(
            self.wins + other.wins, self.ties + other.ties, self.trials + other.trials
        )

    @property
    def equity(self) -> float:
        if self.trials == 0:
            return 0.0
        return (self.wins + self.ties / 2) / self.trials


class EquityCalculator:
    """Estimates hand equity by simulating the unseen cards."""

    def __init__(self, evaluator: Optional[HandEvaluator] = None,
                 rng: Optional[random.Random] = None):
        """Initialize the calculator.

        Args:
            evaluator: Hand evaluator used at showdown.
            rng: Random source for the simulated deals. Seed it for
                reproducible estimates.
        """
        self.evaluator = evaluator or HandEvaluator()
        self.rng = rng or random.Random()

    def calculate_equity(
        self,
        hole_cards: Sequence[Card],
        community_cards: Sequence[Card],
        num_simulations: int = 1000,
    ) -> float:
        """Equity against one opponent holding a random hand.

        Args:
            hole_cards: Our two hole cards.
            community_cards: 0-5 community cards dealt so far.
            num_simulations: Number of random deals to play out.

        Returns:
            Equity in [0, 1]; ties count half.
        """
        hole, board = self._check_inputs(hole_cards, community_cards, num_simulations)
        tally = self.simulate(hole, board, num_simulations)
        logger.debug("Equity %s vs random over %d trials: %.3f",
                     hole, num_simulations, tally.equity)
        return tally.equity

    def simulate(
        self,
        hole: Tuple[Card, Card],
        board: Tuple[Card, ...],
        num_simulations: int,
    ) -> SimulationTally:
        """Run ``num_simulations`` trials against a random opponent hand."""
        deck = Deck(self.rng, exclude=hole + board)
        needed = 5 - len(board)
        evaluate = self.evaluator.evaluate
        tally = SimulationTally()

        for _ in range(num_simulations):
            drawn = deck.sample(2 + needed)
            full_board = list(board) + drawn[2:]
            mine = evaluate(list(hole) + full_board)
            theirs = evaluate(drawn[:2] + full_board)
            if mine > theirs:
                tally.wins += 1
            elif mine == theirs:
                tally.ties += 1
            tally.trials += 1

        return tally

    def calculate_equity_vs_range(
        self,
        hole_cards: Sequence[Card],
        community_cards: Sequence[Card],
        opponent_range: Sequence[Sequence[Card]],
        num_simulations: int = 100,
    ) -> float:
        """Average equity against each candidate hand of an opponent range.

        Candidates sharing a card with our hand or the board are skipped. An
        empty range, or one where every candidate is skipped, falls back to a
        random-hand simulation with ten times the sample count.
        """
        hole, board = self._check_inputs(hole_cards, community_cards, num_simulations)
        known = set(hole) | set(board)

        total = 0.0
        counted = 0
        for candidate in opponent_range:
            opp = validate_hole_cards(tuple(candidate))
            if known.intersection(opp):
                continue
            total += self._equity_vs_hand(hole, opp, board, num_simulations).equity
            counted += 1

        if counted == 0:
            logger.debug("No usable hands in opponent range, simulating vs random")
            return self.simulate(hole, board, num_simulations * 10).equity

        return total / counted

    def _equity_vs_hand(
        self,
        hole: Tuple[Card, Card],
        opponent: Tuple[Card, Card],
        board: Tuple[Card, ...],
        num_simulations: int,
    ) -> SimulationTally:
        deck = Deck(self.rng, exclude=hole + opponent + board)
        needed = 5 - len(board)
        evaluate = self.evaluator.evaluate
        tally = SimulationTally()

        for _ in range(num_simulations):
            full_board = list(board) + deck.sample(needed)
            mine = evaluate(list(hole) + full_board)
            theirs = evaluate(list(opponent) + full_board)
            if mine > theirs:
                tally.wins += 1
            elif mine == theirs:
                tally.ties += 1
            tally.trials += 1

        return tally

    @staticmethod
    def _check_inputs(
        hole_cards: Sequence[Card],
        community_cards: Sequence[Card],
        num_simulations: int,
    ) -> Tuple[Tuple[Card, Card], Tuple[Card, ...]]:
        if num_simulations <= 0:
            raise ValueError(f"num_simulations must be positive, got {num_simulations}")
        hole = validate_hole_cards(tuple(hole_cards))
        board = tuple(community_cards)
        if len(board) > 5:
            raise ValueError(f"At most 5 community cards, got {len(board)}")
        if len(set(board) | set(hole)) != len(board) + 2:
            raise ValueError(f"Duplicate cards between hole {hole} and board {board}")
        return hole, board

    @staticmethod
    def calculate_pot_odds(to_call: int, pot_size: int) -> float:
        """Share of the final pot our call represents; 1.0 when checking is free."""
        if to_call == 0:
            return 1.0
        return to_call / (pot_size + to_call)

    @staticmethod
    def is_profitable_call(equity: float, pot_odds: float) -> bool:
        return equity > pot_odds

    @staticmethod
    def calculate_call_ev(equity: float, pot_size: int, to_call: int) -> float:
        """EV = (equity * pot) - ((1 - equity) * call)."""
        return equity * pot_size - (1 - equity) * to_call
