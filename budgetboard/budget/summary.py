"""Mini README: Derived totals for the dashboard summary panel.

Structure:
    * BudgetSummary - frozen result with totals and the remaining balance.
    * summarise - fold a ``BudgetState`` into a ``BudgetSummary``.

Pending costs and card balances are reported for visibility only. The
remaining figure is income minus recurring costs minus extras already spent.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .state import BudgetState


@dataclass(frozen=True, slots=True)
class BudgetSummary:
    """Totals derived from a budget state."""

    income: float
    total_recurring: float
    total_pending: float
    total_extras: float
    total_card_balances: float
    discretionary_remaining: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "income": self.income,
            "total_recurring": self.total_recurring,
            "total_pending": self.total_pending,
            "total_extras": self.total_extras,
            "total_card_balances": self.total_card_balances,
            "discretionary_remaining": self.discretionary_remaining,
        }


def summarise(state: BudgetState) -> BudgetSummary:
    total_recurring = sum(state.recurring.values(), 0.0)
    total_pending = sum(state.pending.values(), 0.0)
    total_extras = sum((entry.amount for entry in state.extras), 0.0)
    total_cards = sum((card.balance for card in state.credit_cards.values()), 0.0)
    return BudgetSummary(
        income=state.income,
        total_recurring=total_recurring,
        total_pending=total_pending,
        total_extras=total_extras,
        total_card_balances=total_cards,
        discretionary_remaining=state.income - total_recurring - total_extras,
    )
