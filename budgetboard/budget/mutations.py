"""Mini README: Pure operations that produce a new budget from an old one.

Structure:
    * parse_amount / parse_label / parse_date - turn raw form input into values.
    * set_income, set_checking_balance, set_card_balance - scalar edits.
    * add_or_update_* / remove_* - upsert and delete for recurring and pending.
    * append_extra - record a discretionary purchase.

Every function leaves its input untouched and returns a fresh ``BudgetState``.
Rejected input raises before anything is built, so a failed call never
produces a partially edited budget. Adding a label that already exists
overwrites its amount in place; removing a missing label returns an equal
state.
"""

from __future__ import annotations

import math
from dataclasses import replace
from datetime import date, datetime
from typing import Dict, Mapping, Optional

from ..logging_utils import get_logger
from .errors import InvalidInputError, UnknownCardError
from .state import BudgetState, ExtraEntry

LOGGER = get_logger(__name__)


def parse_amount(value: object) -> float:
    """Coerce numbers or numeric strings into a finite, non-negative float."""

    if isinstance(value, bool):
        raise InvalidInputError(f"Amount must be numeric, got {value!r}")
    try:
        amount = float(value.strip()) if isinstance(value, str) else float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as error:
        raise InvalidInputError(f"Amount must be numeric, got {value!r}") from error
    if not math.isfinite(amount):
        raise InvalidInputError(f"Amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidInputError(f"Amount must not be negative, got {value!r}")
    return amount


def parse_label(value: Optional[str], *, field_name: str = "label") -> str:
    """Reject empty or whitespace-only labels."""

    if value is None or not str(value).strip():
        raise InvalidInputError(f"A {field_name} is required")
    return str(value)


def parse_date(value: object = None) -> date:
    """Parse ISO strings or date objects, defaulting to today."""

    if value is None or value == "":
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as error:
            raise InvalidInputError(f"Dates must be ISO formatted, got {value!r}") from error
    raise InvalidInputError("Dates must be provided as ISO strings or date instances.")


def set_income(state: BudgetState, amount: object) -> BudgetState:
    return replace(state, income=parse_amount(amount))


def set_checking_balance(state: BudgetState, amount: object) -> BudgetState:
    return replace(state, checking_balance=parse_amount(amount))


def set_card_balance(state: BudgetState, card_name: str, amount: object) -> BudgetState:
    """Replace a card's balance while keeping its due date."""

    balance = parse_amount(amount)
    if card_name not in state.credit_cards:
        raise UnknownCardError(card_name)
    cards = dict(state.credit_cards)
    cards[card_name] = replace(cards[card_name], balance=balance)
    return replace(state, credit_cards=cards)


def _upsert(entries: Mapping[str, float], label: str, amount: float) -> Dict[str, float]:
    updated = dict(entries)
    updated[label] = amount
    return updated


def _without(entries: Mapping[str, float], label: str) -> Dict[str, float]:
    return {key: value for key, value in entries.items() if key != label}


def add_or_update_recurring(state: BudgetState, label: str, amount: object) -> BudgetState:
    label = parse_label(label)
    return replace(state, recurring=_upsert(state.recurring, label, parse_amount(amount)))


def remove_recurring(state: BudgetState, label: str) -> BudgetState:
    if label not in state.recurring:
        LOGGER.debug("Recurring cost '%s' not present; nothing to remove", label)
    return replace(state, recurring=_without(state.recurring, label))


def add_or_update_pending(state: BudgetState, label: str, amount: object) -> BudgetState:
    label = parse_label(label)
    return replace(state, pending=_upsert(state.pending, label, parse_amount(amount)))


def remove_pending(state: BudgetState, label: str) -> BudgetState:
    if label not in state.pending:
        LOGGER.debug("Pending cost '%s' not present; nothing to remove", label)
    return replace(state, pending=_without(state.pending, label))


def append_extra(
    state: BudgetState,
    description: str,
    amount: object,
    on: object = None,
) -> BudgetState:
    """Append a discretionary entry dated ``on`` (today when omitted)."""

    entry = ExtraEntry(
        date=parse_date(on),
        description=parse_label(description, field_name="description"),
        amount=parse_amount(amount),
    )
    return replace(state, extras=state.extras + (entry,))
