"""Output formatting for the terminal."""

from holdem_agent.formatters.table import TableFormatter, format_cards

__all__ = ["TableFormatter", "format_cards"]
