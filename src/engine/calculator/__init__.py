"""Propfirm / broker trading calculator.

Pure calculation stages for sizing copy trades against prop-firm drawdown
rules:
- inputs: raw record normalization
- cost: commission per lot, lot in funding, spread
- performance: side P&L, remaining drawdown / objective
- recovery: rounding factor, recovered, objective
- solver: dynamic capital percent search
- engine: unified entry point
- stats: connection trade statistics
"""

from src.engine.calculator.cost import (
    calc_commission_per_lot,
    calc_cost_breakdown,
    calc_lot_factor,
    calc_lot_in_funding,
    calc_spread_cost,
    require_max_drawdown,
)
from src.engine.calculator.engine import calc_plan, calc_trading_plan
from src.engine.calculator.errors import (
    CalculatorError,
    ConfigurationError,
    SymbolNotFoundError,
)
from src.engine.calculator.inputs import (
    assemble_broker_account,
    assemble_funding_account,
    assemble_inputs,
    assemble_rules,
    assemble_symbol_config,
    assemble_trades,
    assemble_user_inputs,
)
from src.engine.calculator.performance import (
    calc_performance,
    calc_remaining_drawdown_percent,
    calc_remaining_objective_percent,
    calc_trades_pnl,
)
from src.engine.calculator.recovery import (
    calc_objective,
    calc_recovered,
    calc_recovery_targets,
    calc_rounding_factor,
)
from src.engine.calculator.solver import (
    capital_from_percent,
    resolve_capital_percent,
    solve_capital_percent,
)
from src.engine.calculator.stats import calc_trade_stats
from src.engine.calculator.trace import (
    RecordingObserver,
    StepObserver,
    logging_observer,
    noop_observer,
)

__all__ = [
    # Inputs
    "assemble_inputs",
    "assemble_funding_account",
    "assemble_broker_account",
    "assemble_rules",
    "assemble_symbol_config",
    "assemble_trades",
    "assemble_user_inputs",
    # Cost
    "require_max_drawdown",
    "calc_lot_factor",
    "calc_commission_per_lot",
    "calc_spread_cost",
    "calc_lot_in_funding",
    "calc_cost_breakdown",
    # Performance
    "calc_trades_pnl",
    "calc_remaining_drawdown_percent",
    "calc_remaining_objective_percent",
    "calc_performance",
    # Recovery
    "calc_rounding_factor",
    "calc_recovered",
    "calc_objective",
    "calc_recovery_targets",
    # Solver
    "capital_from_percent",
    "solve_capital_percent",
    "resolve_capital_percent",
    # Engine
    "calc_trading_plan",
    "calc_plan",
    # Stats
    "calc_trade_stats",
    # Trace
    "StepObserver",
    "noop_observer",
    "logging_observer",
    "RecordingObserver",
    # Errors
    "CalculatorError",
    "ConfigurationError",
    "SymbolNotFoundError",
]
