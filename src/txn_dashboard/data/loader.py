"""
Load (and reload) the transaction collection.

Every load gets a generation number. A result is only applied when it
belongs to the newest generation, so a slow earlier fetch finishing after a
Retry can't overwrite the newer data.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Tuple

from txn_dashboard.domain.models import Transaction
from txn_dashboard.errors import FetchError
from txn_dashboard.logging_setup import get_logger

logger = get_logger("txn_dashboard.data.loader")

Fetcher = Callable[[], Iterable[Transaction]]

LOADING = "loading"
READY = "ready"
ERROR = "error"


@dataclass(frozen=True)
class LoadState:
    status: str = LOADING
    transactions: Tuple[Transaction, ...] = ()
    error: Optional[str] = None
    generation: int = 0


class TransactionLoader:
    def __init__(self, fetch: Fetcher):
        self._fetch = fetch
        self._generation = 0
        self.state = LoadState()

    def begin(self) -> int:
        self._generation += 1
        # Data from the previous load is dropped, as a full reload does
        self.state = LoadState(status=LOADING, generation=self._generation)
        return self._generation

    def _is_current(self, generation: int) -> bool:
        if generation != self._generation:
            logger.debug("Dropping stale load result (generation %d, current %d)", generation, self._generation)
            return False
        return True

    def complete(self, generation: int, transactions: Iterable[Transaction]) -> bool:
        if not self._is_current(generation):
            return False
        self.state = replace(self.state, status=READY, transactions=tuple(transactions), error=None)
        return True

    def fail(self, generation: int, error: Exception) -> bool:
        if not self._is_current(generation):
            return False
        message = error.message if isinstance(error, FetchError) else "Failed to fetch transactions"
        logger.error("Error fetching transactions: %s", error)
        self.state = replace(self.state, status=ERROR, transactions=(), error=message)
        return True

    def reload(self) -> LoadState:
        generation = self.begin()
        try:
            rows = self._fetch()
        except Exception as e:
            # Any fetch failure is shown with Retry; only FetchError carries a readable message
            self.fail(generation, e)
        else:
            self.complete(generation, rows)
        return self.state
