# Returned when there is nothing to spend; no real horizon gets near it.
UNBOUNDED_YEARS = 999.0


def years_sustainable(capital: float, annual_expense: float) -> float:
    if annual_expense <= 0:
        return UNBOUNDED_YEARS
    return capital / annual_expense
