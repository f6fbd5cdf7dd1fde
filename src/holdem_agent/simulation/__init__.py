"""Hand evaluation and Monte Carlo simulation."""

from holdem_agent.simulation.deck import Deck
from holdem_agent.simulation.evaluator import HandCategory, HandEvaluator, HandRank
from holdem_agent.simulation.equity import EquityCalculator, SimulationTally

__all__ = ["Deck", "HandCategory", "HandEvaluator", "HandRank",
           "EquityCalculator", "SimulationTally"]
