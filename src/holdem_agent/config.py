"""Configuration loading from environment variables and defaults."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env file if it exists
env_path = Path(os.getenv("DOTENV_CONFIG_PATH", Path(__file__).parent.parent.parent / ".env"))
if env_path.exists():
    load_dotenv(dotenv_path=env_path)

# Logging
LOG_LEVEL = os.getenv("HOLDEM_LOG_LEVEL", "INFO")

# Bankroll risk
# Fractional Kelly multiplier applied to the full Kelly stake
KELLY_FRACTION = float(os.getenv("KELLY_FRACTION", "0.25"))
# Largest share of the bankroll a single match may risk, in percent
MAX_WAGER_PERCENT = float(os.getenv("MAX_WAGER_PERCENT", "5"))

# Monte Carlo sample counts per postflop street
FLOP_SIMULATIONS = int(os.getenv("HOLDEM_FLOP_SIMULATIONS", "500"))
TURN_SIMULATIONS = int(os.getenv("HOLDEM_TURN_SIMULATIONS", "750"))
RIVER_SIMULATIONS = int(os.getenv("HOLDEM_RIVER_SIMULATIONS", "1000"))

# Cheap estimate for display purposes only
DISPLAY_SIMULATIONS = int(os.getenv("HOLDEM_DISPLAY_SIMULATIONS", "200"))
