from dataclasses import replace

from optsim.config import BacktestConfig, SimulationParams
from optsim.simulator import BacktestSimulator, GaussianShocks, ZeroShocks, format_report


config = BacktestConfig(seed=7)
result = BacktestSimulator(config).run()
print(format_report(result))
print("Closed trades:", len(result.trades))
print("Left open at horizon:", sorted(kind.value for kind in result.open_trades))

flat = replace(config, simulation=SimulationParams(total_ticks=50, drift=0.0, volatility=0.0))
flat_result = BacktestSimulator(flat, shocks=ZeroShocks()).run()
print()
print("Flat path, zero shocks")
print(format_report(flat_result))

rerun = BacktestSimulator(config, shocks=GaussianShocks(7)).run()
print()
print("Same seed reproduces:", rerun.prices == result.prices and rerun.pnl == result.pnl)
