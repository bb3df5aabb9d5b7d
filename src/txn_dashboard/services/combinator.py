"""
Merge the filter specs of several cards into the one the table uses.

For each filter key the priority table lists the cards to look at, in order;
the first card with a non-empty value for that key wins. A key mapped to no
cards is never set. The table is explicit so two cards can't clobber each
other depending on which one the UI happened to render last.
"""

from __future__ import annotations

from typing import Dict, Mapping, Tuple

from txn_dashboard.domain.models import FILTER_KEYS, FilterSpec

PriorityTable = Mapping[str, Tuple[str, ...]]

TOTAL = "total"
AVERAGE = "average"

# Card-to-field wiring of the dashboard:
# - month/date: the "Total Amount" card wins, "Average Amount" is the fallback
# - sender: only the "Average Amount" card
# - receiver: no card exposes it, so the table never filters on it
TABLE_PRIORITY: PriorityTable = {
    "month": (TOTAL, AVERAGE),
    "date": (TOTAL, AVERAGE),
    "sender": (AVERAGE,),
    "receiver": (),
}


def combine(cards: Mapping[str, FilterSpec], priority: PriorityTable = TABLE_PRIORITY) -> FilterSpec:
    missing = [k for k in FILTER_KEYS if k not in priority]
    if missing:
        raise ValueError(f"Priority table has no entry for: {', '.join(missing)}")

    for key in FILTER_KEYS:
        for card in priority[key]:
            if card not in cards:
                raise KeyError(f"Priority table names unknown card: {card!r}")

    merged: Dict[str, str] = {}
    for key in FILTER_KEYS:
        value = ""
        for card in priority[key]:
            candidate = getattr(cards[card], key)
            if candidate.strip():
                value = candidate
                break
        merged[key] = value

    return FilterSpec(**merged)
