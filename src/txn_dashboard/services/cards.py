"""
Stat cards and their filters.

Each card owns one FilterSpec. An edit replaces the card's spec wholesale;
the table reads the merge of all cards (see services.combinator).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from txn_dashboard.domain.models import FilterSpec
from txn_dashboard.services.combinator import AVERAGE, TABLE_PRIORITY, TOTAL, PriorityTable, combine


@dataclass(frozen=True)
class FilterField:
    key: str
    label: str
    type: str  # "month" | "date" | "text"
    placeholder: str = ""


@dataclass(frozen=True)
class CardConfig:
    name: str
    label: str
    fields: Tuple[FilterField, ...]

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(f.key for f in self.fields)


TOTAL_CARD = CardConfig(
    name=TOTAL,
    label="Total Amount",
    fields=(
        FilterField("month", "Filter by Month", "month"),
        FilterField("date", "Filter by Date", "date"),
    ),
)

AVERAGE_CARD = CardConfig(
    name=AVERAGE,
    label="Average Amount",
    fields=(FilterField("sender", "Filter by Sender", "text", placeholder="Search sender..."),),
)

CARDS: Tuple[CardConfig, ...] = (TOTAL_CARD, AVERAGE_CARD)


class DashboardFilters:
    def __init__(
        self,
        cards: Tuple[CardConfig, ...] = CARDS,
        priority: PriorityTable = TABLE_PRIORITY,
        specs: Optional[Mapping[str, FilterSpec]] = None,
    ):
        self.cards: Dict[str, CardConfig] = {c.name: c for c in cards}
        self.priority = priority
        self._specs: Dict[str, FilterSpec] = {c.name: FilterSpec() for c in cards}
        if specs:
            self._specs.update(specs)

    def spec(self, card: str) -> FilterSpec:
        return self._specs[card]

    def on_filter_change(self, card: str, key: str, value: Optional[str]) -> FilterSpec:
        config = self.cards[card]
        if key not in config.keys:
            raise KeyError(f"Card {card!r} has no {key!r} filter")
        self._specs[card] = self._specs[card].with_value(key, value)
        return self._specs[card]

    def clear_all(self, card: str) -> FilterSpec:
        for key in self.cards[card].keys:
            self.on_filter_change(card, key, "")
        return self._specs[card]

    def has_active_filter(self, card: str) -> bool:
        spec = self._specs[card]
        return any(getattr(spec, key).strip() for key in self.cards[card].keys)

    def effective(self) -> FilterSpec:
        return combine(self._specs, self.priority)
