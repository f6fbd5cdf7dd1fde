"""Preflop and postflop decision making."""

from holdem_agent.strategy.preflop import HandTier, PreflopRecommendation, PreflopStrategy
from holdem_agent.strategy.engine import StrategyEngine

__all__ = ["HandTier", "PreflopRecommendation", "PreflopStrategy", "StrategyEngine"]
