"""Mini README: The budget model, its mutations and derived summary.

Everything here is pure: states go in, new states or summaries come out.
Persistence lives in ``budgetboard.storage`` and CSV output in
``budgetboard.export``.
"""

from .errors import BudgetError, InvalidInputError, StateDecodeError, UnknownCardError
from .mutations import (
    add_or_update_pending,
    add_or_update_recurring,
    append_extra,
    parse_amount,
    parse_date,
    parse_label,
    remove_pending,
    remove_recurring,
    set_card_balance,
    set_checking_balance,
    set_income,
)
from .state import BudgetState, CreditCard, ExtraEntry, default_state, dumps_state, loads_state
from .summary import BudgetSummary, summarise

__all__ = [
    "BudgetError",
    "BudgetState",
    "BudgetSummary",
    "CreditCard",
    "ExtraEntry",
    "InvalidInputError",
    "StateDecodeError",
    "UnknownCardError",
    "add_or_update_pending",
    "add_or_update_recurring",
    "append_extra",
    "default_state",
    "dumps_state",
    "loads_state",
    "parse_amount",
    "parse_date",
    "parse_label",
    "remove_pending",
    "remove_recurring",
    "set_card_balance",
    "set_checking_balance",
    "set_income",
    "summarise",
]
