"""Strategy engine: turns a betting context into a single decision."""

import logging
import math
import random
from fractions import Fraction
from typing import Dict, Optional

from holdem_agent import config
from holdem_agent.models.action import ActionType, Decision, GamePhase
from holdem_agent.models.context import DecisionContext, PostflopContext, PreflopContext
from holdem_agent.simulation.equity import EquityCalculator
from holdem_agent.simulation.evaluator import HandEvaluator
from holdem_agent.strategy import constants as C
from holdem_agent.strategy.preflop import PreflopRecommendation, PreflopStrategy

logger = logging.getLogger(__name__)


def default_simulations() -> Dict[GamePhase, int]:
    return {
        GamePhase.FLOP: config.FLOP_SIMULATIONS,
        GamePhase.TURN: config.TURN_SIMULATIONS,
        GamePhase.RIVER: config.RIVER_SIMULATIONS,
    }


class StrategyEngine:
    """Combines preflop tables, equity and pot odds into one action.

    The engine, its preflop strategy and its equity calculator share the
    same random source unless components are passed in explicitly, so a
    seeded ``random.Random`` makes every decision reproducible.
    """

    def __init__(
        self,
        hand_evaluator: Optional[HandEvaluator] = None,
        equity_calculator: Optional[EquityCalculator] = None,
        preflop_strategy: Optional[PreflopStrategy] = None,
        rng: Optional[random.Random] = None,
        simulations: Optional[Dict[GamePhase, int]] = None,
    ):
        self.rng = rng or random.Random()
        self.hand_evaluator = hand_evaluator or HandEvaluator()
        self.equity_calculator = equity_calculator or EquityCalculator(self.hand_evaluator, self.rng)
        self.preflop_strategy = preflop_strategy or PreflopStrategy(self.rng)
        self.simulations = default_simulations()
        if simulations:
            self.simulations.update(simulations)

    def decide(self, context: DecisionContext) -> Decision:
        """Make a decision based on the current game state.

        Raises:
            TypeError: If ``context`` is not a PreflopContext or PostflopContext.
        """
        if not isinstance(context, (PreflopContext, PostflopContext)):
            raise TypeError(f"Unsupported context type: {type(context).__name__}")

        logger.info(
            "Making decision game=%s phase=%s position=%s pot=%d to_call=%d",
            context.game_id, context.phase.value, context.position.value,
            context.pot_size, context.to_call,
        )

        if isinstance(context, PreflopContext):
            return self._decide_preflop(context)
        return self._decide_postflop(context)

    def _decide_preflop(self, context: PreflopContext) -> Decision:
        recommendation = self.preflop_strategy.get_recommendation(
            context.hole_cards,
            context.position,
            context.facing_bet,
            context.to_call,
            context.pot_size,
        )
        logger.info(
            "Preflop recommendation tier=%s strength=%.0f action=%s (%s)",
            recommendation.tier.value, recommendation.strength,
            recommendation.action.value, recommendation.reasoning,
        )
        return self._convert_recommendation(recommendation, context)

    def _convert_recommendation(self, rec: PreflopRecommendation,
                                context: PreflopContext) -> Decision:
        confidence = rec.strength / 100

        if rec.action == ActionType.RAISE and rec.raise_multiplier:
            target = math.floor(context.effective_big_blind * Fraction(rec.raise_multiplier))
            return self._aggressive(context, target, confidence, rec.reasoning)
        if rec.action == ActionType.CALL:
            return self._call(context, confidence, rec.reasoning)
        return Decision(rec.action, None, confidence, rec.reasoning)

    def _decide_postflop(self, context: PostflopContext) -> Decision:
        equity = self.equity_calculator.calculate_equity(
            context.hole_cards,
            context.community_cards,
            self.simulations[context.phase],
        )
        pot_odds = self.equity_calculator.calculate_pot_odds(context.to_call, context.pot_size)
        current_hand = self.hand_evaluator.evaluate(
            list(context.hole_cards) + list(context.community_cards)
        )

        logger.info(
            "Postflop analysis phase=%s equity=%.3f pot_odds=%.3f hand=%s",
            context.phase.value, equity, pot_odds, current_hand.name,
        )

        return self._postflop_decision(context, equity, pot_odds)

    def _postflop_decision(self, context: PostflopContext, equity: float,
                           pot_odds: float) -> Decision:
        pot = context.pot_size
        pct = f"{equity * 100:.1f}%"
        unopposed = context.to_call == 0

        if equity >= C.PREMIUM_HAND_EQUITY:
            if unopposed:
                return self._aggressive(
                    context, math.floor(pot * C.VALUE_BET_RATIO), 0.9,
                    f"Strong hand (equity: {pct}), betting for value",
                )
            raise_to = context.current_bet * C.RAISE_BET_MULTIPLIER
            if raise_to <= context.my_chips:
                return self._aggressive(context, raise_to, 0.85, "Strong hand, raising for value")
            return self._call(context, 0.9, "Strong hand, calling (not enough to raise)")

        if equity >= C.STRONG_HAND_EQUITY:
            if unopposed:
                return self._aggressive(
                    context, math.floor(pot * C.POT_BET_RATIO * C.STRONG_BET_SCALE), 0.75,
                    f"Good hand (equity: {pct}), betting",
                )
            if self.equity_calculator.is_profitable_call(equity, pot_odds):
                return self._call(context, 0.7, "Good equity vs pot odds, calling")

        if equity >= C.MIN_PLAYABLE_EQUITY:
            if unopposed:
                if self.rng.random() < C.SEMI_BLUFF_FREQUENCY:
                    return self._aggressive(
                        context, math.floor(pot * C.SEMI_BLUFF_RATIO), 0.5,
                        "Semi-bluff with marginal hand",
                    )
                return Decision(ActionType.CHECK, None, 0.6, "Marginal hand, checking")
            if self.equity_calculator.is_profitable_call(equity, pot_odds):
                return self._call(context, 0.55, "Pot odds favorable, calling with marginal hand")

        if unopposed:
            if context.phase != GamePhase.RIVER and self.rng.random() < C.BLUFF_FREQUENCY:
                return self._aggressive(
                    context, math.floor(pot * C.POT_BET_RATIO), 0.3, "Bluffing with weak hand",
                )
            return Decision(ActionType.CHECK, None, 0.7, "Weak hand, checking")

        if (self.rng.random() < C.BLUFF_RAISE_FREQUENCY
                and context.to_call < context.my_chips * C.BLUFF_RAISE_MAX_STACK_SHARE):
            return self._aggressive(
                context, context.current_bet * C.RAISE_BET_MULTIPLIER, 0.2, "Bluff raise attempt",
            )

        return Decision(
            ActionType.FOLD, None, 0.8,
            f"Weak hand facing bet, folding (equity: {pct})",
        )

    def _aggressive(self, context: DecisionContext, target: int, confidence: float,
                    reasoning: str) -> Decision:
        """Size a bet or raise: at least twice the current bet, at most our stack."""
        amount = max(target, context.current_bet * 2)
        if amount >= context.my_chips:
            amount = context.my_chips
            if amount > 0:
                return Decision(ActionType.ALL_IN, amount, confidence, f"{reasoning} (all-in)")
        if amount <= 0:
            if context.to_call > 0:
                return self._call(context, confidence, reasoning)
            return Decision(ActionType.CHECK, None, confidence, reasoning)
        return Decision(ActionType.RAISE, amount, confidence, reasoning)

    @staticmethod
    def _call(context: DecisionContext, confidence: float, reasoning: str) -> Decision:
        return Decision(ActionType.CALL, min(context.to_call, context.my_chips), confidence, reasoning)
