"""Trading calculator data models.

Pure data containers for the propfirm/broker risk calculator. Inputs are
produced by the input assembler (src/engine/calculator/inputs.py) and are
never mutated by the engine; results are produced by calc_trading_plan().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from src.engine.models.enums import CapitalMode


# =============================================================================
# Inputs
# =============================================================================


@dataclass(frozen=True)
class FundingAccountState:
    """Propfirm (funding) account state.

    Attributes:
        initial_balance: Starting balance of the funding account.
        current_balance: Current balance of the funding account.
        account_cost: "Cobertura" - nominal coverage/price of the funding slot.
    """

    initial_balance: float = 0.0
    current_balance: float = 0.0
    account_cost: float = 0.0


@dataclass(frozen=True)
class BrokerAccountState:
    """Broker account state (display context only)."""

    current_balance: float = 0.0


@dataclass(frozen=True)
class RulesConfiguration:
    """Propfirm rules for the account's type and phase.

    Attributes:
        max_drawdown: Max drawdown in percent. None when not configured.
        daily_drawdown: Daily drawdown in percent (informational).
        profit_target: Profit target in percent.
    """

    max_drawdown: float | None = None
    daily_drawdown: float = 0.0
    profit_target: float = 0.0


@dataclass(frozen=True)
class SymbolCostConfig:
    """Per-side cost configuration of a symbol.

    Attributes:
        commission_per_lot: Commission charged per lot.
        pip_value_per_lot: Value of one pip per lot. Zero or negative becomes 1.
        spread_typical: Typical spread in pips.
        symbol_id: Symbol identifier.
        symbol: Ticker, e.g. "EURUSD".
        display_name: Human readable name.
        pip_ticks: Ticks per pip.
        is_available: Whether the symbol is tradeable on this side.
    """

    commission_per_lot: float = 0.0
    pip_value_per_lot: float = 1.0
    spread_typical: float = 0.0
    symbol_id: str | None = None
    symbol: str | None = None
    display_name: str | None = None
    pip_ticks: int | None = None
    is_available: bool = True

    def __post_init__(self) -> None:
        if not self.pip_value_per_lot or not self.pip_value_per_lot > 0:
            object.__setattr__(self, "pip_value_per_lot", 1.0)


@dataclass(frozen=True)
class TradeRecord:
    """A closed or open trade on one side of a connection.

    commission and swap are always costs and are stored as values <= 0.
    """

    net_profit: float = 0.0
    commission: float = 0.0
    swap: float = 0.0
    trade_id: str | None = None
    symbol_id: str | None = None
    status: str | None = None
    open_time: datetime | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "commission", -abs(self.commission))
        object.__setattr__(self, "swap", -abs(self.swap))

    @property
    def total_pnl(self) -> float:
        return self.net_profit + self.commission + self.swap

    @property
    def is_open(self) -> bool:
        return (self.status or "").upper() == "OPEN"


@dataclass(frozen=True)
class UserInputs:
    """Values typed by the trader.

    Attributes:
        pips_stop: Stop-loss distance in pips. Zero or negative becomes 1.
        operation_risk_percent: Risk per trade in percent.
        capital_mode: AUTO runs the capital solver, MANUAL uses manual_capital_percent.
        manual_capital_percent: Capital percent used in MANUAL mode.
    """

    pips_stop: float = 1.0
    operation_risk_percent: float = 0.0
    capital_mode: CapitalMode = CapitalMode.AUTO
    manual_capital_percent: float = 100.0

    def __post_init__(self) -> None:
        if not self.pips_stop or not self.pips_stop > 0:
            object.__setattr__(self, "pips_stop", 1.0)


@dataclass(frozen=True)
class SolverSettings:
    """Bounds of the dynamic capital search.

    Attributes:
        min_percent: Search floor (percent of account cost).
        max_percent: Search ceiling (percent of account cost).
        tolerance: Stop when the interval is this narrow.
        max_iterations: Hard cap on bisection steps.
        fallback_percent: Percent used when no search is possible or needed.
        decimals: Rounding applied to the solved percent.
    """

    min_percent: float = 0.1
    max_percent: float = 1000.0
    tolerance: float = 0.01
    max_iterations: int = 50
    fallback_percent: float = 100.0
    decimals: int = 2


@dataclass(frozen=True)
class CalculatorInputs:
    """All normalized inputs for one calculation."""

    funding: FundingAccountState
    broker: BrokerAccountState
    rules: RulesConfiguration
    funding_symbol: SymbolCostConfig
    broker_symbol: SymbolCostConfig
    funding_trades: tuple[TradeRecord, ...] = ()
    broker_trades: tuple[TradeRecord, ...] = ()
    user_inputs: UserInputs = field(default_factory=UserInputs)


# =============================================================================
# Outputs
# =============================================================================


@dataclass(frozen=True)
class CostBreakdown:
    """Cost Model output at one CAPITAL value."""

    commission_per_lot: float
    lot_in_funding: float
    spread: float

    @property
    def total_commission(self) -> float:
        return self.commission_per_lot + self.lot_in_funding + self.spread


@dataclass(frozen=True)
class PerformanceSummary:
    """Performance Model output."""

    total_propfirm_pnl: float
    total_broker_pnl: float
    remaining_drawdown_percent: float
    remaining_objective_percent: float


@dataclass(frozen=True)
class RecoveryTargets:
    """Recovery/Objective Model output at one CAPITAL value."""

    rounding_factor: int
    recovered: float
    objective: float
    projected_total: float


@dataclass(frozen=True)
class SolverOutcome:
    """Result of the dynamic capital search.

    Attributes:
        capital_percent: Solved percent of account cost.
        iterations: Bisection steps performed (0 on the early exits).
        converged: True when the interval narrowed to the tolerance.
        threshold_met: True when projected total at the returned percent covers the account cost.
        fast_path: True when 100% already covered the account cost.
    """

    capital_percent: float
    iterations: int = 0
    converged: bool = True
    threshold_met: bool = True
    fast_path: bool = False


@dataclass(frozen=True)
class EngineResult:
    """Final calculator report."""

    commission_per_lot: float
    lot_in_funding: float
    spread: float
    total_commission: float
    total_propfirm_pnl: float
    total_broker_pnl: float
    remaining_drawdown_percent: float
    remaining_objective_percent: float
    rounding_factor: int
    recovered: float
    objective: float
    capital_percent: float
    capital_value: float
    projected_total: float
    capital_mode: CapitalMode = CapitalMode.AUTO
    solver: SolverOutcome | None = None

    def to_dict(self) -> dict:
        """Flat dictionary for JSON output."""
        return {
            "commission_per_lot": self.commission_per_lot,
            "lot_in_funding": self.lot_in_funding,
            "spread": self.spread,
            "total_commission": self.total_commission,
            "total_propfirm_pnl": self.total_propfirm_pnl,
            "total_broker_pnl": self.total_broker_pnl,
            "remaining_drawdown_percent": self.remaining_drawdown_percent,
            "remaining_objective_percent": self.remaining_objective_percent,
            "rounding_factor": self.rounding_factor,
            "recovered": self.recovered,
            "objective": self.objective,
            "capital_percent": self.capital_percent,
            "capital_value": self.capital_value,
            "projected_total": self.projected_total,
            "capital_mode": self.capital_mode.value,
            "solver": None
            if self.solver is None
            else {
                "capital_percent": self.solver.capital_percent,
                "iterations": self.solver.iterations,
                "converged": self.solver.converged,
                "threshold_met": self.solver.threshold_met,
                "fast_path": self.solver.fast_path,
            },
        }


@dataclass
class TradeStats:
    """Connection trade statistics across both sides.

    Attributes:
        win_rate: Winning trades / closed trades (0-1).
        profit_factor: Gross profit / gross loss. None when there are no losses.
        max_drawdown: Max drawdown of the combined cumulative P&L curve
            as a positive amount of money.
    """

    total_trades: int = 0
    open_trades: int = 0
    closed_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0
    total_pnl: float = 0.0
    win_rate: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    profit_factor: float | None = None
    max_drawdown: float = 0.0
    propfirm_pnl: float = 0.0
    broker_pnl: float = 0.0
