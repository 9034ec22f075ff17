"""Mini README: The budget state store.

Structure:
    * STORAGE_KEY - the one key the budget is stored under.
    * BudgetStore - owns the current ``BudgetState`` and persists it.

The store loads once, falling back to the bootstrap budget when nothing valid
is stored. Each accepted mutation replaces the current state and writes the
full record back straight away. Rejected mutations leave both the in-memory
state and the stored copy alone and re-raise so the caller can report them.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..budget import mutations
from ..budget.errors import BudgetError, StateDecodeError
from ..budget.state import BudgetState, default_state, dumps_state, loads_state
from ..budget.summary import BudgetSummary, summarise
from ..logging_utils import get_logger
from .backends import KeyValueBackend

LOGGER = get_logger(__name__)

STORAGE_KEY = "budgetState_v1"


class BudgetStore:
    """Hold the live budget and write it through to a key-value backend."""

    def __init__(self, backend: KeyValueBackend, *, key: str = STORAGE_KEY) -> None:
        self.backend = backend
        self.key = key
        self._state: Optional[BudgetState] = None

    def load(self) -> Optional[BudgetState]:
        """Return the stored budget, or ``None`` when absent or corrupt."""

        raw = self.backend.get(self.key)
        if raw is None:
            LOGGER.debug("No stored budget under key '%s'", self.key)
            return None
        try:
            return loads_state(raw)
        except StateDecodeError as error:
            LOGGER.warning("Ignoring stored budget under '%s': %s", self.key, error)
            return None

    def save(self, state: BudgetState) -> None:
        self.backend.set(self.key, dumps_state(state))

    def initialize(self) -> BudgetState:
        """Load the stored budget or fall back to the bootstrap default."""

        stored = self.load()
        if stored is None:
            LOGGER.info("Starting from the default budget")
            stored = default_state()
        self._state = stored
        return stored

    @property
    def state(self) -> BudgetState:
        if self._state is None:
            return self.initialize()
        return self._state

    def update(self, mutation: Callable[..., BudgetState], *args: object, **kwargs: object) -> BudgetState:
        """Apply ``mutation(state, *args, **kwargs)`` and persist the result."""

        name = getattr(mutation, "__name__", repr(mutation))
        try:
            updated = mutation(self.state, *args, **kwargs)
        except BudgetError as error:
            LOGGER.info("Rejected %s: %s", name, error)
            raise
        self._state = updated
        self.save(updated)
        LOGGER.info("Applied %s and saved budget under '%s'", name, self.key)
        return updated

    def summary(self) -> BudgetSummary:
        return summarise(self.state)

    def set_income(self, amount: object) -> BudgetState:
        return self.update(mutations.set_income, amount)

    def set_checking_balance(self, amount: object) -> BudgetState:
        return self.update(mutations.set_checking_balance, amount)

    def set_card_balance(self, card_name: str, amount: object) -> BudgetState:
        return self.update(mutations.set_card_balance, card_name, amount)

    def add_or_update_recurring(self, label: str, amount: object) -> BudgetState:
        return self.update(mutations.add_or_update_recurring, label, amount)

    def remove_recurring(self, label: str) -> BudgetState:
        return self.update(mutations.remove_recurring, label)

    def add_or_update_pending(self, label: str, amount: object) -> BudgetState:
        return self.update(mutations.add_or_update_pending, label, amount)

    def remove_pending(self, label: str) -> BudgetState:
        return self.update(mutations.remove_pending, label)

    def append_extra(self, description: str, amount: object, on: object = None) -> BudgetState:
        return self.update(mutations.append_extra, description, amount, on)
