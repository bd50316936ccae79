from dataclasses import dataclass, field
from typing import Optional, List, Dict, Literal

ExpensePeriod = Literal["monthly", "annual"]

EXPENSE_CATEGORIES = ("housing", "food", "consumables", "medical", "transport", "hobbies")

PERIODS_PER_YEAR: Dict[str, int] = {"monthly": 12, "annual": 1}

DEFAULT_MONTHLY_EXPENSES: Dict[str, float] = {
    "housing": 3000.0,
    "food": 2000.0,
    "consumables": 1000.0,
    "medical": 500.0,
    "transport": 500.0,
    "hobbies": 1000.0,
}


@dataclass
class ExpenseProfile:
    housing: float = 0.0
    food: float = 0.0
    consumables: float = 0.0
    medical: float = 0.0
    transport: float = 0.0
    hobbies: float = 0.0
    period: ExpensePeriod = "monthly"

    def amounts(self) -> Dict[str, float]:
        # category order is the chart order
        return {name: getattr(self, name) for name in EXPENSE_CATEGORIES}

    def scaled(self, factor: float) -> "ExpenseProfile":
        values = {name: amount * factor for name, amount in self.amounts().items()}
        return ExpenseProfile(period=self.period, **values)


@dataclass
class RateAssumptions:
    return_rate: float = 4.0
    withdrawal_rate: float = 4.0


@dataclass
class IncomeProfile:
    annual_income: float = 200000.0


@dataclass
class GoalInput:
    target: Optional[float] = None


@dataclass
class CategoryShare:
    name: str
    value: float
    share: float


@dataclass
class ProjectionResult:
    total_periodic_expense: float
    total_annual_expense: float
    base_fire_number: float
    return_based_number: float
    withdrawal_based_number: float
    years_sustainable_by_return: float
    years_sustainable_by_withdrawal: float
    years_to_reach_fire_goal: float
    years_to_reach_custom_goal: Optional[float]
    yearly_savings: float
    return_rate_defined: bool
    withdrawal_rate_defined: bool
    fire_goal_reachable: bool
    custom_goal_reachable: Optional[bool]
    breakdown: List[CategoryShare] = field(default_factory=list)
