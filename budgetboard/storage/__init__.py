"""Mini README: Persistence for the budget.

Exposes the key-value backends and the ``BudgetStore`` that sits on top of
them. Swap the backend to move the budget somewhere else; the store's
behaviour does not change.
"""

from .backends import InMemoryBackend, JsonFileBackend, KeyValueBackend
from .store import STORAGE_KEY, BudgetStore

__all__ = ["BudgetStore", "InMemoryBackend", "JsonFileBackend", "KeyValueBackend", "STORAGE_KEY"]
