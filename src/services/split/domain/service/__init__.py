from .cost_calculator import (
    PersonCost,
    calculate_costs,
    calculate_nights,
    get_night_dates,
)

__all__ = ["PersonCost", "calculate_costs", "calculate_nights", "get_night_dates"]
