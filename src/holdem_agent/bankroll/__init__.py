"""Bankroll and risk management."""

from holdem_agent.bankroll.manager import BankrollManager, MatchVerdict

__all__ = ["BankrollManager", "MatchVerdict"]
