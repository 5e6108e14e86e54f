from __future__ import annotations

import json
import os
from pathlib import Path

import streamlit as st


def _load_json(path: Path) -> dict | None:
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError:
        return None


def _format_pnl(value: float) -> str:
    return f"{value:,.2f}"


def main() -> None:
    st.set_page_config(page_title="optsim report", layout="wide")
    st.title("Options Strategy Backtest")

    default_report_path = os.getenv("OPTSIM_REPORT_PATH", "reports/backtest.json")
    report_path = Path(st.sidebar.text_input("Report path", value=default_report_path))
    report = _load_json(report_path)

    if report is None:
        st.warning(f"No report found at {report_path}")
        return

    summary = report.get("summary", {})
    col_a, col_b, col_c, col_d = st.columns(4)
    col_a.metric("Total PnL", _format_pnl(summary.get("total_pnl", 0.0)))
    col_b.metric("Ticks", str(summary.get("ticks", 0)))
    col_c.metric("Closed Trades", str(summary.get("closed_trades", 0)))
    col_d.metric("Open at Horizon", str(summary.get("open_positions", 0)))

    st.subheader("PnL by Strategy")
    rows = report.get("pnl", [])
    columns = st.columns(max(len(rows), 1))
    for column, row in zip(columns, rows):
        column.metric(
            f"{row.get('strategy_id')}. {row.get('strategy', '').replace('_', ' ')}",
            _format_pnl(row.get("pnl", 0.0)),
            help=f"{row.get('trades', 0)} closed trade(s)",
        )

    st.subheader("Price Path")
    st.line_chart(report.get("prices", []))

    st.subheader("Closed Trades")
    trades = report.get("trades", [])
    if trades:
        st.dataframe(trades)
    else:
        st.info("No trades closed during this run")

    st.subheader("Details")
    st.json({
        "run_id": report.get("run_id"),
        "config_hash": report.get("config_hash"),
        "seed": report.get("seed"),
        "generated_at_utc": report.get("generated_at_utc"),
        "open_trades": report.get("open_trades", []),
    })


if __name__ == "__main__":
    main()
