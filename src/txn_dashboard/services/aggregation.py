from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, List

from txn_dashboard.domain.models import FilterSpec, Transaction
from txn_dashboard.services.filtering import filter_collection
from txn_dashboard.tools.money import ZERO, parse_amount


@dataclass(frozen=True)
class CardStatistics:
    count: int
    total: Decimal
    average: Decimal


def _amounts(transactions: Iterable[Transaction]) -> List[Decimal]:
    # Malformed amounts are 0 but still count towards the average
    return [parse_amount(t.amount) for t in transactions]


def sum_amounts(transactions: Iterable[Transaction]) -> Decimal:
    return sum(_amounts(transactions), ZERO)


def average_amount(transactions: Iterable[Transaction]) -> Decimal:
    """Mean amount; 0 for an empty collection so the display never sees NaN."""
    amounts = _amounts(transactions)
    if not amounts:
        return ZERO
    return sum(amounts, ZERO) / len(amounts)


def card_statistics(transactions: Iterable[Transaction], spec: FilterSpec) -> CardStatistics:
    amounts = _amounts(filter_collection(transactions, spec))
    total = sum(amounts, ZERO)
    average = total / len(amounts) if amounts else ZERO
    return CardStatistics(count=len(amounts), total=total, average=average)
