from typing import List, Dict, Any, Optional
from .schemas import ExpenseProfile, IncomeProfile, RateAssumptions, GoalInput
from .projection import run_projection
from .accumulation import SAVINGS_GROWTH_RATE
from .utils import round_or_none


def generate_default_scenarios() -> List[Dict[str, Any]]:
    return [
        {"name": "baseline", "income_factor": 1.0, "expense_factor": 1.0},
        {"name": "expense_plus_20", "income_factor": 1.0, "expense_factor": 1.2},
        {"name": "income_minus_20", "income_factor": 0.8, "expense_factor": 1.0},
        {"name": "combined_shock", "income_factor": 0.8, "expense_factor": 1.2},
        {"name": "lean_fire", "income_factor": 1.0, "expense_factor": 0.8},
        {"name": "fat_fire", "income_factor": 1.0, "expense_factor": 1.5},
    ]


def _summarize(expenses: ExpenseProfile, income: IncomeProfile, rates: RateAssumptions,
               goal: Optional[GoalInput], growth_rate: float) -> Dict[str, Any]:
    result = run_projection(expenses, income, rates, goal, growth_rate)
    return {
        "total_annual_expense": round(result.total_annual_expense, 2),
        "yearly_savings": round(result.yearly_savings, 2),
        "withdrawal_based_number": round(result.withdrawal_based_number, 2),
        "years_to_reach_fire_goal": round_or_none(result.years_to_reach_fire_goal, 3),
        "years_to_reach_custom_goal": round_or_none(result.years_to_reach_custom_goal, 3),
        "fire_goal_reachable": result.fire_goal_reachable,
    }


def run_scenarios(expenses: ExpenseProfile, income: IncomeProfile, rates: RateAssumptions,
                  goal: Optional[GoalInput] = None,
                  custom_scenarios: Optional[List[Dict[str, Any]]] = None,
                  growth_rate: float = SAVINGS_GROWTH_RATE) -> Dict[str, Any]:
    defs = generate_default_scenarios()
    if custom_scenarios:
        defs.extend(custom_scenarios)
    baseline = _summarize(expenses, income, rates, goal, growth_rate)
    base_years = baseline["years_to_reach_fire_goal"]
    scenarios_out = []
    for d in defs:
        income_factor = d.get("income_factor", 1.0)
        expense_factor = d.get("expense_factor", 1.0)
        sc_income = IncomeProfile(annual_income=income.annual_income * income_factor)
        metrics = _summarize(expenses.scaled(expense_factor), sc_income, rates, goal, growth_rate)
        sc_years = metrics["years_to_reach_fire_goal"]
        delta = None
        if base_years is not None and sc_years is not None:
            delta = round(sc_years - base_years, 3)
        scenarios_out.append({
            "name": d.get("name", "unnamed"),
            "params": {"income_factor": income_factor, "expense_factor": expense_factor},
            "metrics": metrics,
            "delta": {"years_to_fire_change": delta},
        })
    return {"baseline": baseline, "scenarios": scenarios_out, "metadata": {"count": len(scenarios_out)}}
