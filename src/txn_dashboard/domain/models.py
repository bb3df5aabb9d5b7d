from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

FILTER_KEYS = ("month", "date", "sender", "receiver")


# Represents a single transaction row from the data store
@dataclass(frozen=True)
class Transaction:
    id: int
    sender: str
    txn_hash: str = ""
    bank_name: Optional[str] = None
    receiver: Optional[str] = None
    transfer_time: Optional[str] = None  # e.g. "15/01/2024 10:00:00"
    amount: Optional[str] = None  # decimal as text, may be malformed

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Transaction":
        """
        Build a Transaction from a `transactions` table row.

        Numeric amounts (numeric column) are kept as their text form so the
        aggregator sees one representation.
        """
        try:
            tx_id = int(row["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Transaction row has no usable id: {row!r}") from e

        amount = row.get("amount")
        return cls(
            id=tx_id,
            sender=str(row.get("sender") or ""),
            txn_hash=str(row.get("txn_hash") or ""),
            bank_name=_optional_str(row.get("bank_name")),
            receiver=_optional_str(row.get("receiver")),
            transfer_time=_optional_str(row.get("transfer_time")),
            amount=None if amount is None else str(amount),
        )


def _optional_str(value: Any) -> Optional[str]:
    return None if value is None else str(value)


@dataclass(frozen=True)
class FilterSpec:
    """Filter values owned by one card. Empty string means the key is inactive."""

    month: str = ""  # YYYY-MM
    date: str = ""  # YYYY-MM-DD
    sender: str = ""
    receiver: str = ""

    def with_value(self, key: str, value: Optional[str]) -> "FilterSpec":
        if key not in FILTER_KEYS:
            raise KeyError(f"Unknown filter key: {key!r}")
        return replace(self, **{key: value or ""})

    def cleared(self) -> "FilterSpec":
        return FilterSpec()

    def active(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name).strip()}

    @property
    def is_active(self) -> bool:
        return bool(self.active())


@dataclass(frozen=True)
class CanonicalDate:
    year: int
    month: int  # 1-12
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CanonicalDate":
        return cls(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    def to_datetime(self) -> datetime:
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def month_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def day_key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


class Unparseable:
    """Marker for a transfer time that could not be normalised."""

    _instance: Optional["Unparseable"] = None

    def __new__(cls) -> "Unparseable":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNPARSEABLE"


UNPARSEABLE = Unparseable()
