from __future__ import annotations

import pytest

from txn_dashboard.domain.models import Transaction


@pytest.fixture
def transactions():
    return [
        Transaction(id=1, sender="Nguyen Van A", receiver="Shop One", transfer_time="15/01/2024 10:00:00", amount="100", txn_hash="h1"),
        Transaction(id=2, sender="Tran Thi B", receiver=None, transfer_time="03/02/2024 08:30", amount="50", txn_hash="h2"),
        Transaction(id=3, sender="nguyen van c", receiver="Shop Two", transfer_time="unknown", amount="abc", txn_hash="h3"),
        Transaction(id=4, sender="Le Van D", receiver="Shop One", transfer_time=None, amount=None, txn_hash="h4"),
        Transaction(id=5, sender="Pham E", receiver="Cafe", transfer_time="15/01/2024", amount="250.5", txn_hash="h5"),
    ]


@pytest.fixture(autouse=True)
def _clear_supabase_env(monkeypatch):
    for name in (
        "SUPABASE_URL",
        "NEXT_PUBLIC_SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "NEXT_PUBLIC_SUPABASE_ANON_KEY",
        "SUPABASE_TABLE",
        "SUPABASE_TIMEOUT",
        "TXN_DASHBOARD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
