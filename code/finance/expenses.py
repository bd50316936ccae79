from typing import List
from .schemas import ExpenseProfile, CategoryShare, PERIODS_PER_YEAR


def total_periodic(profile: ExpenseProfile) -> float:
    return float(sum(profile.amounts().values()))


def annualize(total: float, periods_per_year: int) -> float:
    return total * periods_per_year


def annual_expense(profile: ExpenseProfile) -> float:
    return annualize(total_periodic(profile), PERIODS_PER_YEAR[profile.period])


def expense_breakdown(profile: ExpenseProfile) -> List[CategoryShare]:
    total = total_periodic(profile)
    out: List[CategoryShare] = []
    for name, value in profile.amounts().items():
        share = value / total if total > 0 else 0.0
        out.append(CategoryShare(name=name, value=value, share=share))
    return out
