from typing import Any, Dict, List, Optional, Literal

from pydantic import BaseModel, Field, model_validator

from finance.schemas import DEFAULT_MONTHLY_EXPENSES

# Largest accepted values per field; inputs outside them are rejected with 422.
EXPENSE_MAX = 10_000_000.0
INCOME_MAX = 100_000_000.0
GOAL_MAX = 1_000_000_000.0


class Expenses(BaseModel):
    housing: float = Field(ge=0, le=EXPENSE_MAX, default=DEFAULT_MONTHLY_EXPENSES["housing"])
    food: float = Field(ge=0, le=EXPENSE_MAX, default=DEFAULT_MONTHLY_EXPENSES["food"])
    consumables: float = Field(ge=0, le=EXPENSE_MAX, default=DEFAULT_MONTHLY_EXPENSES["consumables"])
    medical: float = Field(ge=0, le=EXPENSE_MAX, default=DEFAULT_MONTHLY_EXPENSES["medical"])
    transport: float = Field(ge=0, le=EXPENSE_MAX, default=DEFAULT_MONTHLY_EXPENSES["transport"])
    hobbies: float = Field(ge=0, le=EXPENSE_MAX, default=DEFAULT_MONTHLY_EXPENSES["hobbies"])


class ProjectionRequest(BaseModel):
    expenses: Expenses = Field(default_factory=Expenses)
    period: Optional[Literal["monthly", "annual"]] = None
    annual_income: float = Field(ge=0, le=INCOME_MAX, default=200000.0)
    return_rate: float = Field(gt=0, le=100, default=4.0)
    withdrawal_rate: float = Field(gt=0, le=100, default=4.0)
    custom_goal: Optional[float] = Field(ge=0, le=GOAL_MAX, default=5000000.0)


class ScenarioOverride(BaseModel):
    name: str
    income_factor: float = Field(ge=0, le=10, default=1.0)
    expense_factor: float = Field(ge=0, le=10, default=1.0)


class ScenarioRequest(ProjectionRequest):
    custom_scenarios: List[ScenarioOverride] = []


class TimelineRequest(ProjectionRequest):
    target: Literal["fire", "custom"] = "fire"

    @model_validator(mode="after")
    def _custom_target_needs_goal(self):
        if self.target == "custom" and self.custom_goal is None:
            raise ValueError("target 'custom' requires custom_goal")
        return self


class CategoryBreakdown(BaseModel):
    name: str
    value: float
    share: float


class ProjectionResponse(BaseModel):
    period: Literal["monthly", "annual"]
    growth_rate: float
    total_periodic_expense: float
    total_annual_expense: float
    base_fire_number: float
    return_based_number: float
    withdrawal_based_number: float
    years_sustainable_by_return: float
    years_sustainable_by_withdrawal: float
    years_to_reach_fire_goal: Optional[float]
    years_to_reach_custom_goal: Optional[float]
    yearly_savings: float
    return_rate_defined: bool
    withdrawal_rate_defined: bool
    fire_goal_reachable: bool
    custom_goal_reachable: Optional[bool]
    fire_goal_year: Optional[int] = None
    custom_goal_year: Optional[int] = None
    breakdown: List[CategoryBreakdown]


class ScenarioResponse(BaseModel):
    baseline: Dict[str, Any]
    scenarios: List[Dict[str, Any]]
    metadata: Dict[str, int]


class TimelineResponse(BaseModel):
    growth_rate: float
    yearly_savings: float
    target: float
    years_to_target: Optional[float]
    timeline: List[float]
