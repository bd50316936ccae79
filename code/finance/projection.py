import math
from dataclasses import asdict
from typing import Any, Dict, Optional

import structlog

from .schemas import ExpenseProfile, IncomeProfile, RateAssumptions, GoalInput, ProjectionResult
from .expenses import total_periodic, annual_expense, expense_breakdown
from .capital import base_fire_number, return_based_number, withdrawal_based_number, rate_is_defined
from .sustainability import years_sustainable
from .accumulation import SAVINGS_GROWTH_RATE, yearly_savings, years_to_goal

logger = structlog.get_logger(__name__)


def run_projection(
    expenses: ExpenseProfile,
    income: IncomeProfile,
    rates: RateAssumptions,
    goal: Optional[GoalInput] = None,
    growth_rate: float = SAVINGS_GROWTH_RATE,
) -> ProjectionResult:
    """
    Derive every planning figure from one input snapshot.

    Each field is computed from the inputs directly, so recomputing on any
    change never leaves a stale value behind.
    """
    periodic = total_periodic(expenses)
    annual = annual_expense(expenses)
    base = base_fire_number(annual)
    by_return = return_based_number(annual, rates.return_rate)
    by_withdrawal = withdrawal_based_number(annual, rates.withdrawal_rate)
    savings = yearly_savings(income.annual_income, annual)

    fire_years = years_to_goal(by_withdrawal, savings, growth_rate)
    custom_years = None
    if goal is not None and goal.target is not None:
        custom_years = years_to_goal(goal.target, savings, growth_rate)

    result = ProjectionResult(
        total_periodic_expense=periodic,
        total_annual_expense=annual,
        base_fire_number=base,
        return_based_number=by_return,
        withdrawal_based_number=by_withdrawal,
        years_sustainable_by_return=years_sustainable(by_return, annual),
        years_sustainable_by_withdrawal=years_sustainable(by_withdrawal, annual),
        years_to_reach_fire_goal=fire_years,
        years_to_reach_custom_goal=custom_years,
        yearly_savings=savings,
        return_rate_defined=rate_is_defined(rates.return_rate),
        withdrawal_rate_defined=rate_is_defined(rates.withdrawal_rate),
        fire_goal_reachable=rate_is_defined(rates.withdrawal_rate) and not math.isinf(fire_years),
        custom_goal_reachable=None if custom_years is None else not math.isinf(custom_years),
        breakdown=expense_breakdown(expenses),
    )
    logger.debug(
        "projection.computed",
        period=expenses.period,
        annual_expense=annual,
        yearly_savings=savings,
        fire_goal_reachable=result.fire_goal_reachable,
    )
    return result


def projection_to_dict(result: ProjectionResult) -> Dict[str, Any]:
    return asdict(result)
