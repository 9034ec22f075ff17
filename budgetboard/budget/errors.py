"""Mini README: Error types raised by the budget model.

Structure:
    * BudgetError - common base so callers can catch everything budget related.
    * InvalidInputError - rejected user input (empty label, bad amount or date).
    * UnknownCardError - a balance update named a card that does not exist.
    * StateDecodeError - a persisted snapshot could not be turned into a state.
"""

from __future__ import annotations


class BudgetError(Exception):
    """Base class for budget model failures."""


class InvalidInputError(BudgetError, ValueError):
    """Raised when user input is rejected before a mutation is applied."""


class UnknownCardError(BudgetError, KeyError):
    """Raised when a credit card lookup fails."""

    def __init__(self, card_name: str) -> None:
        super().__init__(card_name)
        self.card_name = card_name

    def __str__(self) -> str:
        return f"Credit card '{self.card_name}' not found"


class StateDecodeError(BudgetError, ValueError):
    """Raised when a stored payload does not describe a valid budget."""
