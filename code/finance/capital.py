FIRE_MULTIPLE = 25


def base_fire_number(annual_expense: float) -> float:
    return annual_expense * FIRE_MULTIPLE


def rate_is_defined(rate_pct: float) -> bool:
    return rate_pct > 0


def _capital_for_rate(annual_expense: float, rate_pct: float) -> float:
    # 0 stands in for "infinite capital"; callers check the rate, not the result
    if not rate_is_defined(rate_pct):
        return 0.0
    return annual_expense / (rate_pct / 100.0)


def return_based_number(annual_expense: float, return_rate_pct: float) -> float:
    """Capital whose yield alone covers the annual expense."""
    return _capital_for_rate(annual_expense, return_rate_pct)


def withdrawal_based_number(annual_expense: float, withdrawal_rate_pct: float) -> float:
    """Capital drawn down at a flat nominal rate to cover the annual expense."""
    return _capital_for_rate(annual_expense, withdrawal_rate_pct)
