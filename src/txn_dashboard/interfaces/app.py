# src/txn_dashboard/interfaces/app.py
# Streamlit UI for the transaction dashboard
# - Stat cards: Total Amount (month/date filters), Average Amount (sender filter)
# - Transaction Details table filtered by the merged card filters
# - Error panel with Retry when the data store can't be read
#
# Run: streamlit run src/txn_dashboard/interfaces/app.py

from __future__ import annotations

from datetime import date
from typing import List

import pandas as pd
import streamlit as st

from txn_dashboard.config import Settings
from txn_dashboard.data.loader import ERROR, TransactionLoader
from txn_dashboard.data.supabase import fetch_transactions
from txn_dashboard.domain.models import CanonicalDate, Transaction
from txn_dashboard.logging_setup import configure_logging
from txn_dashboard.services.aggregation import card_statistics
from txn_dashboard.services.cards import AVERAGE_CARD, CARDS, TOTAL_CARD, CardConfig, DashboardFilters
from txn_dashboard.services.filtering import filter_collection
from txn_dashboard.tools.money import format_vnd, parse_amount
from txn_dashboard.tools.transfer_time import format_date, format_time, normalize


# -----------------------------
# Page config
# -----------------------------
st.set_page_config(page_title="Transaction Manager", layout="wide")

settings = Settings.from_env()
configure_logging(settings.log_level)


# -----------------------------
# Session state
# -----------------------------
if "loader" not in st.session_state:
    st.session_state["loader"] = TransactionLoader(lambda: fetch_transactions(settings))

if "filters" not in st.session_state:
    st.session_state["filters"] = DashboardFilters()

loader: TransactionLoader = st.session_state["loader"]
filters: DashboardFilters = st.session_state["filters"]


def widget_key(card: CardConfig, key: str) -> str:
    return f"filter_{card.name}_{key}"


def widget_to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def on_widget_change(card: CardConfig, key: str):
    value = widget_to_text(st.session_state.get(widget_key(card, key)))
    filters.on_filter_change(card.name, key, value)


def on_clear_all(card: CardConfig):
    filters.clear_all(card.name)
    # Widgets are rebuilt from the (now empty) spec on the next run
    for f in card.fields:
        st.session_state.pop(widget_key(card, f.key), None)


def reload_data():
    with st.spinner("Loading transactions..."):
        loader.reload()


if loader.state.generation == 0:
    reload_data()

state = loader.state


# -----------------------------
# Error state
# -----------------------------
st.title("💰 Transaction Manager")

if state.status == ERROR:
    st.subheader("Error Loading Data")
    st.error(state.error)
    if st.button("Retry"):
        reload_data()
        st.rerun()
    st.stop()

transactions: List[Transaction] = list(state.transactions)


# -----------------------------
# Filter widgets
# -----------------------------
def month_options(rows: List[Transaction], current: str) -> List[str]:
    months = set()
    for t in rows:
        when = normalize(t.transfer_time)
        if isinstance(when, CanonicalDate):
            months.add(when.month_key())
    if current:
        months.add(current)
    return [""] + sorted(months, reverse=True)


def render_filter_inputs(card: CardConfig):
    spec = filters.spec(card.name)
    for f in card.fields:
        key = widget_key(card, f.key)
        current = getattr(spec, f.key)
        if f.type == "month":
            options = month_options(transactions, current)
            st.selectbox(
                f.label,
                options,
                index=options.index(current),
                format_func=lambda m: m or "All months",
                key=key,
                on_change=on_widget_change,
                args=(card, f.key),
            )
        elif f.type == "date":
            st.date_input(
                f.label,
                value=date.fromisoformat(current) if current else None,
                format="DD/MM/YYYY",
                key=key,
                on_change=on_widget_change,
                args=(card, f.key),
            )
        else:
            st.text_input(
                f.label,
                value=current,
                placeholder=f.placeholder or "Search...",
                key=key,
                on_change=on_widget_change,
                args=(card, f.key),
            )

    if filters.has_active_filter(card.name):
        st.button("✕ Clear All Filters", key=f"clear_{card.name}", on_click=on_clear_all, args=(card,))


# -----------------------------
# Stat cards
# -----------------------------
st.subheader("Transaction Overview 📊")
st.caption("View and filter your transaction statistics")

total_stats = card_statistics(transactions, filters.spec(TOTAL_CARD.name))
avg_stats = card_statistics(transactions, filters.spec(AVERAGE_CARD.name))
card_values = {
    TOTAL_CARD.name: f"{format_vnd(total_stats.total)} ₫",
    AVERAGE_CARD.name: f"{format_vnd(avg_stats.average, max_fraction_digits=0)} ₫",
}

for col, card in zip(st.columns(len(CARDS)), CARDS):
    with col:
        with st.container(border=True):
            st.metric(card.label, card_values[card.name])
            with st.expander("Filter", expanded=filters.has_active_filter(card.name)):
                render_filter_inputs(card)

st.divider()


# -----------------------------
# Transactions table
# -----------------------------
table_rows = filter_collection(transactions, filters.effective())

st.subheader("Transaction Details")
caption = f"{len(table_rows)} transaction(s) found"
if not transactions:
    caption += " (Database is empty or no access)"
st.caption(caption)

if not table_rows:
    st.info("No transactions found matching your filters.")
else:
    df = pd.DataFrame(
        [
            {
                "Bank / ID": f"{t.bank_name or ''}\nID: {t.id}",
                "Date & Time": f"{format_date(t.transfer_time)} {format_time(t.transfer_time)}".strip(),
                "Sender": t.sender,
                "Receiver": t.receiver or "",
                "Amount": f"{format_vnd(parse_amount(t.amount))} ₫",
            }
            for t in table_rows
        ]
    )
    st.dataframe(df, width="stretch", hide_index=True)
