"""
Read the `transactions` table through Supabase's REST endpoint (PostgREST).

Only one call is needed: select every row. Failures are raised as FetchError
(AccessDeniedError for a rejected key / row level security), an empty table
is a normal, empty result.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

import requests

from txn_dashboard.config import Settings
from txn_dashboard.domain.models import Transaction
from txn_dashboard.errors import AccessDeniedError, FetchError
from txn_dashboard.logging_setup import get_logger

logger = get_logger("txn_dashboard.data.supabase")

REST_PATH = "/rest/v1"


def _headers(settings: Settings) -> Dict[str, str]:
    return {
        "apikey": settings.supabase_key or "",
        "Authorization": f"Bearer {settings.supabase_key}",
        "Accept": "application/json",
    }


def _error_detail(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {"message": (resp.text or resp.reason or "").strip()}
    return body if isinstance(body, dict) else {"message": str(body)}


def _project_ref(url: str) -> str:
    host = urlparse(url).hostname or ""
    return host.split(".")[0]


def _raise_for_error(resp: requests.Response) -> None:
    if resp.status_code < 400:
        return

    detail = _error_detail(resp)
    message = detail.get("message") or f"HTTP {resp.status_code}"
    hint = detail.get("hint")
    logger.error(
        "Supabase error status=%s code=%s message=%s details=%s hint=%s",
        resp.status_code,
        detail.get("code"),
        message,
        detail.get("details"),
        hint,
    )

    text = f"Supabase Error: {message}"
    if hint:
        text += f" (Hint: {hint})"

    if resp.status_code in (401, 403):
        raise AccessDeniedError(
            f"Access denied by the data store. Check the API key and row level security policies. {text}",
            status_code=resp.status_code,
        )
    raise FetchError(text, status_code=resp.status_code)


def fetch_transactions(
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> List[Transaction]:
    settings = (settings or Settings.from_env()).require()
    http = session or requests.Session()
    url = f"{settings.supabase_url}{REST_PATH}/{settings.table}"

    logger.info("Fetching transactions from %s", url)
    try:
        resp = http.get(url, params={"select": "*"}, headers=_headers(settings), timeout=settings.timeout)
    except requests.RequestException as e:
        logger.error("Supabase request failed: %s", e)
        raise FetchError(f"Could not reach the data store: {e}") from e

    logger.info("Supabase response status: %s %s", resp.status_code, resp.reason)
    _raise_for_error(resp)

    try:
        data = resp.json()
    except ValueError as e:
        raise FetchError("Data store returned a response that is not JSON", status_code=resp.status_code) from e

    if data is None:
        data = []
    if not isinstance(data, list):
        raise FetchError(f"Expected a list of rows, got {type(data).__name__}", status_code=resp.status_code)

    try:
        transactions = [Transaction.from_row(row) for row in data]
    except (ValueError, TypeError, AttributeError) as e:
        raise FetchError(f"Malformed transaction row: {e}") from e

    logger.info("Number of records: %d", len(transactions))
    if not transactions:
        logger.warning(
            "No transactions found. Either the table is empty or row level security is hiding rows "
            "(project %s, table %s).",
            _project_ref(settings.supabase_url or ""),
            settings.table,
        )
    return transactions
