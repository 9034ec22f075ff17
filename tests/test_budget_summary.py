"""Mini README: Tests for the derived budget summary.

Checks the bootstrap totals and that pending costs never reduce the remaining
discretionary balance.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from budgetboard.budget import BudgetState, ExtraEntry, default_state, summarise


def test_default_budget_totals() -> None:
    """The seed budget leaves 674.03 after 1525.97 of recurring costs."""

    summary = summarise(default_state())

    assert summary.total_recurring == pytest.approx(1525.97)
    assert summary.total_pending == pytest.approx(1542.49)
    assert summary.total_extras == 0.0
    assert summary.total_card_balances == pytest.approx(12.00)
    assert summary.discretionary_remaining == pytest.approx(674.03)


def test_remaining_ignores_pending_costs() -> None:
    """Pending costs are reported but do not reduce the remaining balance."""

    state = BudgetState(
        income=1000.0,
        recurring={"Rent": 400.0},
        pending={"Taxes": 250.0},
        extras=(ExtraEntry(date=date(2025, 1, 1), description="Dinner", amount=60.0),),
    )
    with_more_pending = replace(state, pending={"Taxes": 250.0, "Laptop": 1800.0})

    summary = summarise(state)
    summary_more_pending = summarise(with_more_pending)

    assert summary.discretionary_remaining == pytest.approx(1000.0 - 400.0 - 60.0)
    assert summary.discretionary_remaining == pytest.approx(
        summary.income - summary.total_recurring - summary.total_extras
    )
    assert summary_more_pending.total_pending == pytest.approx(2050.0)
    assert summary_more_pending.discretionary_remaining == summary.discretionary_remaining


def test_empty_budget_summary() -> None:
    summary = summarise(BudgetState())

    assert summary.as_dict() == {
        "income": 0.0,
        "total_recurring": 0.0,
        "total_pending": 0.0,
        "total_extras": 0.0,
        "total_card_balances": 0.0,
        "discretionary_remaining": 0.0,
    }
