"""Budget roll-up models."""

from pydantic import Field

from tripcal.models.common import BudgetHealth, CamelModel


class BudgetSummary(CamelModel):
    """Spent / remaining figures for a trip."""

    cost_by_currency: dict[str, float] = Field(default_factory=dict)
    total: float  # in `currency`
    currency: str
    budget: float
    remaining: float
    percent_used: float
    total_unbooked: int = 0
    health: BudgetHealth = BudgetHealth.ON_TRACK
