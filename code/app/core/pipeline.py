import math
from datetime import date
from typing import Optional, Tuple

from finance.accumulation import accumulation_timeline, years_to_goal
from finance.projection import run_projection
from finance.schemas import ExpenseProfile, IncomeProfile, RateAssumptions, GoalInput
from finance.utils import finite_or_none
from finance.whatif import run_scenarios

from .config import Settings
from .log_config import get_logger
from .models import (
    CategoryBreakdown,
    ProjectionRequest,
    ProjectionResponse,
    ScenarioRequest,
    ScenarioResponse,
    TimelineRequest,
    TimelineResponse,
)

logger = get_logger(__name__)


def _goal_year(years: Optional[float], reachable: Optional[bool]) -> Optional[int]:
    # calendar year the goal is met, counting whole years from today
    if years is None or not reachable:
        return None
    return date.today().year + int(math.ceil(years))


def _engine_inputs(
    payload: ProjectionRequest, settings: Settings
) -> Tuple[ExpenseProfile, IncomeProfile, RateAssumptions, Optional[GoalInput]]:
    period = payload.period or settings.expense_period
    expenses = ExpenseProfile(period=period, **payload.expenses.model_dump())
    income = IncomeProfile(annual_income=payload.annual_income)
    rates = RateAssumptions(return_rate=payload.return_rate, withdrawal_rate=payload.withdrawal_rate)
    goal = GoalInput(target=payload.custom_goal) if payload.custom_goal is not None else None
    return expenses, income, rates, goal


def run_projection_request(payload: ProjectionRequest, settings: Settings) -> ProjectionResponse:
    expenses, income, rates, goal = _engine_inputs(payload, settings)
    result = run_projection(expenses, income, rates, goal, settings.savings_growth_rate)
    logger.info(
        "projection.request",
        period=expenses.period,
        withdrawal_based_number=round(result.withdrawal_based_number, 2),
        years_to_reach_fire_goal=finite_or_none(result.years_to_reach_fire_goal),
    )
    return ProjectionResponse(
        period=expenses.period,
        growth_rate=settings.savings_growth_rate,
        total_periodic_expense=result.total_periodic_expense,
        total_annual_expense=result.total_annual_expense,
        base_fire_number=result.base_fire_number,
        return_based_number=result.return_based_number,
        withdrawal_based_number=result.withdrawal_based_number,
        years_sustainable_by_return=result.years_sustainable_by_return,
        years_sustainable_by_withdrawal=result.years_sustainable_by_withdrawal,
        years_to_reach_fire_goal=finite_or_none(result.years_to_reach_fire_goal),
        years_to_reach_custom_goal=finite_or_none(result.years_to_reach_custom_goal),
        yearly_savings=result.yearly_savings,
        return_rate_defined=result.return_rate_defined,
        withdrawal_rate_defined=result.withdrawal_rate_defined,
        fire_goal_reachable=result.fire_goal_reachable,
        custom_goal_reachable=result.custom_goal_reachable,
        fire_goal_year=_goal_year(result.years_to_reach_fire_goal, result.fire_goal_reachable),
        custom_goal_year=_goal_year(result.years_to_reach_custom_goal, result.custom_goal_reachable),
        breakdown=[CategoryBreakdown(name=c.name, value=c.value, share=c.share) for c in result.breakdown],
    )


def run_scenario_request(payload: ScenarioRequest, settings: Settings) -> ScenarioResponse:
    expenses, income, rates, goal = _engine_inputs(payload, settings)
    overrides = [s.model_dump() for s in payload.custom_scenarios]
    out = run_scenarios(expenses, income, rates, goal, overrides, settings.savings_growth_rate)
    logger.info("scenarios.request", count=out["metadata"]["count"])
    return ScenarioResponse(**out)


def run_timeline_request(payload: TimelineRequest, settings: Settings) -> TimelineResponse:
    expenses, income, rates, goal = _engine_inputs(payload, settings)
    result = run_projection(expenses, income, rates, goal, settings.savings_growth_rate)
    if payload.target == "custom":
        target = goal.target
    else:
        target = result.withdrawal_based_number
    years = years_to_goal(target, result.yearly_savings, settings.savings_growth_rate)
    if math.isinf(years):
        horizon = settings.timeline_years_max
    else:
        horizon = min(int(math.ceil(years)), settings.timeline_years_max)
    timeline = accumulation_timeline(result.yearly_savings, horizon, settings.savings_growth_rate)
    logger.info("timeline.request", target=round(target, 2), horizon=horizon)
    return TimelineResponse(
        growth_rate=settings.savings_growth_rate,
        yearly_savings=result.yearly_savings,
        target=target,
        years_to_target=finite_or_none(years),
        timeline=timeline,
    )
