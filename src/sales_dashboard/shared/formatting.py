"""
Display formatting for the presentation boundary.

Records keep raw numeric values; these helpers turn them into the strings
shown on KPI cards, chart tooltips and the product table.
"""


def format_currency(value: float, digits: int = 0) -> str:
    """Format as dollars with thousands separators, e.g. "$12,345"."""
    if value < 0:
        return f"-${abs(value):,.{digits}f}"
    return f"${value:,.{digits}f}"


def format_count(value: float) -> str:
    """Format a count rounded to a whole number, e.g. "1,234"."""
    return f"{value:,.0f}"


def format_growth(value: float) -> str:
    """Format a growth percentage to one decimal place, e.g. "12.3%"."""
    # round() keeps the sign of small negatives; avoid rendering "-0.0%"
    if round(value, 1) == 0:
        value = 0.0
    return f"{value:.1f}%"
