"""Mini README: Budget data model and its JSON form.

Structure:
    * CreditCard - balance plus the next due date.
    * ExtraEntry - one dated discretionary purchase.
    * BudgetState - the single persisted record, immutable.
    * default_state - the bootstrap budget used on first run.
    * dumps_state / loads_state - text codec used by the storage layer.

The JSON field names (``checkingBalance``, ``creditCards`` and ``due``) match
the snapshots written by the browser version of the dashboard so an exported
local-storage value can be loaded as-is. Keyed collections keep insertion
order, which is also the display and export order, and are held as read-only
mapping proxies so a state cannot be edited in place.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

from .errors import StateDecodeError


@dataclass(frozen=True, slots=True)
class CreditCard:
    """Outstanding balance on a card and when it is due."""

    balance: float
    due_date: date

    def as_dict(self) -> Dict[str, object]:
        return {"balance": self.balance, "due": self.due_date.isoformat()}


@dataclass(frozen=True, slots=True)
class ExtraEntry:
    """Discretionary spending that has already happened."""

    date: date
    description: str
    amount: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": self.amount,
        }


@dataclass(frozen=True, slots=True)
class BudgetState:
    """Everything the dashboard knows about the current month."""

    income: float = 0.0
    checking_balance: float = 0.0
    recurring: Mapping[str, float] = field(default_factory=dict)
    pending: Mapping[str, float] = field(default_factory=dict)
    credit_cards: Mapping[str, CreditCard] = field(default_factory=dict)
    extras: Tuple[ExtraEntry, ...] = ()

    def __post_init__(self) -> None:
        # Read-only views over private copies; edits go through the mutations.
        for name in ("recurring", "pending", "credit_cards"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "extras", tuple(self.extras))

    def as_dict(self) -> Dict[str, object]:
        """Export the state with JSON-serialisable values."""

        return {
            "income": self.income,
            "checkingBalance": self.checking_balance,
            "recurring": dict(self.recurring),
            "pending": dict(self.pending),
            "creditCards": {name: card.as_dict() for name, card in self.credit_cards.items()},
            "extras": [entry.as_dict() for entry in self.extras],
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "BudgetState":
        """Rebuild a state from its JSON form, raising ``StateDecodeError`` on bad data."""

        if not isinstance(payload, dict):
            raise StateDecodeError("Budget payload must be a JSON object")
        try:
            cards = _require(payload, "creditCards", dict)
            extras = _require(payload, "extras", list)
            return cls(
                income=_number(payload.get("income"), "income"),
                checking_balance=_number(payload.get("checkingBalance"), "checkingBalance"),
                recurring=_amount_map(_require(payload, "recurring", dict), "recurring"),
                pending=_amount_map(_require(payload, "pending", dict), "pending"),
                credit_cards={
                    str(name): CreditCard(
                        balance=_number(card.get("balance"), f"creditCards.{name}.balance"),
                        due_date=_date(card.get("due"), f"creditCards.{name}.due"),
                    )
                    for name, card in cards.items()
                },
                extras=tuple(
                    ExtraEntry(
                        date=_date(entry.get("date"), "extras.date"),
                        description=str(entry.get("description", "")),
                        amount=_number(entry.get("amount"), "extras.amount"),
                    )
                    for entry in extras
                ),
            )
        except AttributeError as error:
            raise StateDecodeError(f"Malformed nested record: {error}") from error


def _require(payload: Dict[str, Any], key: str, expected: type) -> Any:
    value = payload.get(key)
    if not isinstance(value, expected):
        raise StateDecodeError(f"Field '{key}' must be a {expected.__name__}")
    return value


def _number(value: Any, label: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise StateDecodeError(f"Field '{label}' must be numeric, got {value!r}")
    try:
        number = float(value)
    except OverflowError as error:
        raise StateDecodeError(f"Field '{label}' is too large") from error
    if not math.isfinite(number):
        raise StateDecodeError(f"Field '{label}' must be finite")
    return number


def _amount_map(values: Dict[str, Any], label: str) -> Dict[str, float]:
    return {str(key): _number(value, f"{label}.{key}") for key, value in values.items()}


def _date(value: Any, label: str) -> date:
    if not isinstance(value, str):
        raise StateDecodeError(f"Field '{label}' must be an ISO date string")
    try:
        return date.fromisoformat(value)
    except ValueError as error:
        raise StateDecodeError(f"Field '{label}' is not an ISO date: {value!r}") from error


def dumps_state(state: BudgetState) -> str:
    """Serialise a state to the text stored by the persistence backend."""

    return json.dumps(state.as_dict())


def loads_state(text: str) -> BudgetState:
    """Parse stored text back into a state."""

    try:
        payload = json.loads(text)
    except (TypeError, RecursionError, json.JSONDecodeError) as error:
        raise StateDecodeError("Stored budget is not valid JSON") from error
    return BudgetState.from_dict(payload)


def default_state() -> BudgetState:
    """Return the bootstrap budget used when nothing has been stored yet."""

    return BudgetState(
        income=2200.00,
        checking_balance=0.00,
        recurring={
            "Health Insurance": 123.75,
            "Slack": 18.26,
            "Apple Digital": 42.98,
            "HackChinese": 12.00,
            "Squarespace": 36.00,
            "LinkedIn": 59.99,
            "ChatGPT": 200.00,
            "Gas": 100.00,
            "Lattes": 420.00,
            "UCI Patent Debt": 500.00,
            "Spotify": 12.99,
        },
        pending={
            "Taxes": 167.49,
            "Tax Accountant": 375.00,
            "Guitar Completion": 1000.00,
        },
        credit_cards={
            "Chase": CreditCard(balance=12.00, due_date=date(2025, 8, 24)),
            "SchoolsFirstFCU": CreditCard(balance=0.00, due_date=date(2025, 8, 27)),
        },
        extras=(),
    )
