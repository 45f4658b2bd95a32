"""Scoring curve constants.

Kept apart from the scoring logic so every scorer reads from one place.
These values define how scores compare and are not meant to be tuned per run.
"""

# Upper-bound curves (price, location distance)
WITHIN_BOUND_FLOOR = 0.5   # share of the weight earned exactly at the bound
WITHIN_BOUND_BONUS = 0.5   # extra share earned linearly as the value falls to 0
OVER_BOUND_CEILING = 0.3   # share earned just past the bound, decaying to 0
OVER_BOUND_CAP = 1.0       # overage ratio at which nothing is earned

# Lower-bound curves (bedrooms, bathrooms)
MIN_COUNT_BASELINE = 0.8   # share earned at exactly the minimum
MIN_COUNT_SHORTFALL = 0.4  # share of the weight available below the minimum
BEDROOM_SURPLUS_STEP = 0.1
BATHROOM_SURPLUS_STEP = 0.2

# Haversine
EARTH_RADIUS_KM = 6371.0
