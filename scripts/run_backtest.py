from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

from optsim.config import BacktestConfig, load_config
from optsim.monitoring import AuditLog, LogNotifier, Monitor
from optsim.runtime import create_run_context
from optsim.simulator import (
    BacktestSimulator,
    build_batch_report,
    build_report,
    format_batch_summary,
    format_report,
    run_batch,
    summarize_batch,
)


def _write_json(path: str, payload: dict) -> None:
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2, default=str), encoding="utf-8")
    print(f"Wrote {output_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the options strategy backtest on a simulated price path.")
    parser.add_argument("--config", default=None, help="YAML config; reference defaults when omitted")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--ticks", type=int, default=None, help="Override simulation.total_ticks")
    parser.add_argument("--runs", type=int, default=1, help="Number of seeded runs to summarize")
    parser.add_argument("--output", default=None, help="Write the JSON report (or batch summary) here")
    args = parser.parse_args()
    if args.runs < 1:
        parser.error("--runs must be at least 1")

    config = load_config(args.config) if args.config else BacktestConfig()
    if args.seed is not None:
        config = replace(config, seed=args.seed)
    if args.ticks is not None:
        config = replace(config, simulation=replace(config.simulation, total_ticks=args.ticks))

    context = create_run_context(args.config, config.run_id_prefix)
    audit = None
    if config.monitoring.audit_enabled:
        audit = AuditLog(config.monitoring.audit_log_path, run_id=context.run_id, config_hash=context.config_hash)

    if args.runs > 1:
        base = config.seed if config.seed is not None else 0
        results = run_batch(config, range(base, base + args.runs), audit_log=audit)
        summary = summarize_batch(results)
        print(format_batch_summary(summary))
        if args.output:
            _write_json(args.output, build_batch_report(summary, results, context))
        return

    simulator = BacktestSimulator(
        config,
        audit_log=audit,
        monitor=Monitor(LogNotifier()),
        run_id=context.run_id,
    )
    result = simulator.run()
    print(format_report(result))

    if args.output:
        _write_json(args.output, build_report(result, context))


if __name__ == "__main__":
    main()
