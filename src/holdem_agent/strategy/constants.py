"""Strategy thresholds, bet sizing ratios and mixed-strategy frequencies."""

# Postflop equity thresholds
MIN_PLAYABLE_EQUITY = 0.35
STRONG_HAND_EQUITY = 0.65
PREMIUM_HAND_EQUITY = 0.80

# Bet sizing, as a share of the pot
POT_BET_RATIO = 0.75
VALUE_BET_RATIO = 0.66
STRONG_BET_SCALE = 0.7
SEMI_BLUFF_RATIO = 0.4

# Mixed-strategy frequencies
BLUFF_FREQUENCY = 0.33
SEMI_BLUFF_FREQUENCY = 0.3
BLUFF_RAISE_FREQUENCY = 0.1
# Bluff-raises only happen when the call costs less than this share of our stack
BLUFF_RAISE_MAX_STACK_SHARE = 0.1

# Facing a bet, value raises and bluff-raises go to this multiple of the bet
RAISE_BET_MULTIPLIER = 3

# Preflop tier floors (strength 0-100)
PREMIUM_STRENGTH = 90
STRONG_STRENGTH = 75
PLAYABLE_STRENGTH = 55
MARGINAL_STRENGTH = 35

# Preflop mixed strategies
BUTTON_MARGINAL_STEAL_FREQUENCY = 0.5
BUTTON_STRONG_3BET_FREQUENCY = 0.4
BIG_BLIND_STRONG_3BET_FREQUENCY = 0.3

# Big blind defence: largest pot odds still worth a call
BIG_BLIND_PLAYABLE_CALL_ODDS = 0.25
BIG_BLIND_MARGINAL_CALL_ODDS = 0.15
