"""Budget roll-up over projected days plus user-added activities."""

import logging
import time
from collections.abc import Mapping, Sequence

from tripcal.config import get_settings
from tripcal.models.budget import BudgetSummary
from tripcal.models.common import BudgetHealth
from tripcal.models.day import ActivityItem, DayEntry, ShelterInfo
from tripcal.models.document import Budget
from tripcal.utils.logging import StructuredPassLogger

logger = logging.getLogger(__name__)


class FxIndex:
    """Helper for currency conversion using a fixed USD rate table."""

    def __init__(self, rates_to_usd: Mapping[str, float], base_currency: str = "USD"):
        """Initialize FX index with rates.

        Args:
            rates_to_usd: USD value of one unit of each currency
            base_currency: Currency conversions land in (default: USD)
        """
        self.base_currency = base_currency
        self._rates = dict(rates_to_usd)

    def rate_to_usd(self, currency: str) -> float:
        """USD per unit; unknown currencies count 1:1."""
        return self._rates.get(currency, 1.0)

    def convert_to_base(self, amount: float, from_currency: str) -> float:
        """Convert amount from given currency to base currency.

        Args:
            amount: Amount in source currency
            from_currency: Source currency code

        Returns:
            Amount in base currency
        """
        if from_currency == self.base_currency:
            return amount
        return amount * self.rate_to_usd(from_currency) / self.rate_to_usd(self.base_currency)


def shelter_identity(shelter: ShelterInfo) -> str:
    """Key identifying one stay's cost across the nights it spans."""
    return f"shelter-{shelter.name}-{shelter.estimated_cost}"


def activity_identity(activity: ActivityItem, date_key: str) -> str:
    """Activity id, or a date+name key when it has none."""
    return activity.id or f"activity-{date_key}-{activity.name}"


class _CostLedger:
    """Per-currency totals with identity-based de-duplication."""

    def __init__(self, fx: FxIndex):
        self.fx = fx
        self.by_currency: dict[str, float] = {}
        self.total = 0.0
        self.counted: set[str] = set()
        self.items = 0

    def add(self, amount: float, currency: str, identity: str | None = None) -> None:
        if identity is not None:
            if identity in self.counted:
                return
            self.counted.add(identity)
        self.by_currency[currency] = self.by_currency.get(currency, 0) + amount
        self.total += self.fx.convert_to_base(amount, currency)
        self.items += 1


def budget_health(percent_used: float, warning_percent: float) -> BudgetHealth:
    """Classify budget usage."""
    if percent_used > 100:
        return BudgetHealth.OVER_BUDGET
    if percent_used > warning_percent:
        return BudgetHealth.NEAR_LIMIT
    return BudgetHealth.ON_TRACK


def roll_up_budget(
    days: Sequence[DayEntry],
    budget: Budget | None = None,
    user_activities: Mapping[str, Sequence[ActivityItem]] | None = None,
    deleted_activity_ids: Mapping[str, Sequence[str]] | None = None,
    *,
    rates_to_usd: Mapping[str, float] | None = None,
) -> BudgetSummary:
    """Total trip spending, counting each booking exactly once.

    Travel items count once per id, a stay once per (name, cost) on its first
    night, itinerary activities once per id unless soft-deleted for that date,
    and user-added activities unconditionally.

    Args:
        days: Projected day entries
        budget: Trip budget; total 0 or absent falls back to Settings.default_budget_total
        user_activities: User-added activities keyed by date
        deleted_activity_ids: Soft-deleted itinerary activity ids keyed by date
        rates_to_usd: Conversion table override; defaults to Settings.fx_rates_to_usd

    Returns:
        BudgetSummary with totals in the budget's currency
    """
    settings = get_settings()
    started = time.perf_counter()

    currency = budget.currency if budget and budget.currency else settings.default_currency
    total_budget = budget.total if budget and budget.total else settings.default_budget_total
    fx = FxIndex(rates_to_usd if rates_to_usd is not None else settings.fx_rates_to_usd, base_currency=currency)

    user_activities = user_activities or {}
    deleted_activity_ids = deleted_activity_ids or {}

    ledger = _CostLedger(fx)
    total_unbooked = 0

    for day in days:
        for item in day.travel:
            if item.estimated_cost and item.currency and item.id:
                ledger.add(item.estimated_cost, item.currency, item.id)

        shelter = day.shelter
        if shelter is not None and shelter.estimated_cost and shelter.currency:
            if not shelter.is_multi_day_stay or shelter.day_of_stay == 1:
                ledger.add(shelter.estimated_cost, shelter.currency, shelter_identity(shelter))

        deleted = deleted_activity_ids.get(day.date_key, ())
        for activity in day.activities:
            if not (activity.estimated_cost and activity.currency):
                continue
            identity = activity_identity(activity, day.date_key)
            if identity in deleted:
                logger.debug(f"[roll_up_budget] {identity} deleted on {day.date_key}, not counted")
                continue
            ledger.add(activity.estimated_cost, activity.currency, identity)

        total_unbooked += day.metadata.unbooted_count

    for activities in user_activities.values():
        for activity in activities:
            if activity.estimated_cost and activity.currency:
                ledger.add(activity.estimated_cost, activity.currency)

    remaining = total_budget - ledger.total
    percent_used = ledger.total * 100 / total_budget if total_budget > 0 else 0.0

    StructuredPassLogger().log_pass(
        "budget",
        inputs=len(days),
        outputs=ledger.items,
        latency_ms=(time.perf_counter() - started) * 1000,
        currency=currency,
    )

    return BudgetSummary(
        cost_by_currency=ledger.by_currency,
        total=ledger.total,
        currency=currency,
        budget=total_budget,
        remaining=remaining,
        percent_used=percent_used,
        total_unbooked=total_unbooked,
        health=budget_health(percent_used, settings.budget_warning_percent),
    )
