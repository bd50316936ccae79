import math
from typing import List

# Growth applied to savings while accumulating. Kept apart from the
# return/withdrawal rates, which only describe the retired phase.
SAVINGS_GROWTH_RATE = 0.04


def yearly_savings(annual_income: float, annual_expense: float) -> float:
    return annual_income - annual_expense


def years_to_goal(target: float, annual_savings: float, growth_rate: float = SAVINGS_GROWTH_RATE) -> float:
    """
    Years of end-of-year contributions needed for an ordinary annuity to reach target.

    Inverts target = savings * ((1 + g) ** n - 1) / g, so
    n = ln(target * g / savings + 1) / ln(1 + g). growth_rate must be > 0.
    Returns 0 for a non-positive target and math.inf when nothing is saved.
    """
    if target <= 0:
        return 0.0
    if annual_savings <= 0:
        return math.inf
    return math.log((target * growth_rate / annual_savings) + 1) / math.log(1 + growth_rate)


def future_value(annual_savings: float, years: float, growth_rate: float = SAVINGS_GROWTH_RATE) -> float:
    return annual_savings * ((1 + growth_rate) ** years - 1) / growth_rate


def accumulation_timeline(annual_savings: float, years: int, growth_rate: float = SAVINGS_GROWTH_RATE) -> List[float]:
    timeline = []
    for year in range(max(years, 0) + 1):
        if annual_savings <= 0:
            timeline.append(0.0)
            continue
        timeline.append(round(future_value(annual_savings, year, growth_rate), 2))
    return timeline
