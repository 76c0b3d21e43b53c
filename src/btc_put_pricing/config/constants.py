DAYS_PER_YEAR = 365

# Expiry presets offered to users (days)
EXPIRY_PERIODS = (30, 90, 180, 360)
DEFAULT_EXPIRY_DAYS = 30

# Reference annualized volatility by lookback period (days -> percent).
# Static estimates, not computed from price history.
REFERENCE_VOLATILITY = {
    30: 42.5,
    60: 48.2,
    90: 52.7,
    180: 65.3,
    360: 78.9,
}

DEFAULT_RISK_FREE_RATE = 4.5  # percent
DEFAULT_STRIKE_PCT = 100.0  # percent of spot
DEFAULT_AMOUNT = 1.0  # BTC
