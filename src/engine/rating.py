"""Categorical solar potential rating from average GHI."""

# (lower bound in kWh/m2/day, rating), checked top-down
RATING_THRESHOLDS: list[tuple[float, str]] = [
    (5.5, "Excellent"),
    (4.5, "Good"),
    (3.5, "Moderate"),
]
LOWEST_RATING = "Low"


def rate(avg_ghi: float) -> str:
    """Rate a location's solar potential; 0 (no provider data) rates Low."""
    for lower_bound, rating in RATING_THRESHOLDS:
        if avg_ghi >= lower_bound:
            return rating
    return LOWEST_RATING
