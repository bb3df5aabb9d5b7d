"""
Filter predicates over transactions.

Every active key of a FilterSpec must match (AND). A transaction whose
transfer time can't be read is excluded whenever a month or date filter is
active: we fail closed rather than show rows we can't place in time.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from txn_dashboard.domain.models import CanonicalDate, FilterSpec, Transaction
from txn_dashboard.tools.transfer_time import normalize


def _contains(haystack: Optional[str], needle: str) -> bool:
    if haystack is None:
        return False
    return needle.casefold() in haystack.casefold()


def matches(transaction: Transaction, spec: FilterSpec) -> bool:
    month = spec.month.strip()
    day = spec.date.strip()
    sender = spec.sender.strip()
    receiver = spec.receiver.strip()

    if month or day:
        when = normalize(transaction.transfer_time)
        if not isinstance(when, CanonicalDate):
            return False
        if month and when.month_key() != month:
            return False
        if day and when.day_key() != day:
            return False

    if sender and not _contains(transaction.sender, sender):
        return False

    # No receiver on the row never satisfies an active receiver filter
    if receiver and not _contains(transaction.receiver, receiver):
        return False

    return True


def filter_collection(transactions: Iterable[Transaction], spec: FilterSpec) -> List[Transaction]:
    """Matching transactions, in their original order."""
    if not spec.is_active:
        return list(transactions)
    return [t for t in transactions if matches(t, spec)]
