"""Trading calculator engine - unified entry point.

Chains the calculator stages into one pure function:

    inputs -> performance -> capital percent (solver re-runs cost + recovery
    at trial percents) -> cost + recovery at the final CAPITAL -> EngineResult

Every call recomputes from its arguments; nothing is cached or mutated.
Intermediate values are reported through an optional ``on_step`` observer
(see trace.py).

Example:
    >>> from src.engine.calculator import assemble_inputs, calc_plan
    >>> inputs = assemble_inputs(funding_account={...}, rules={...}, ...)
    >>> result = calc_plan(inputs)
    >>> print(f"CAPITAL: {result.capital_value:,.2f} ({result.capital_percent}%)")
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Iterable

from src.engine.calculator.cost import calc_cost_breakdown, require_max_drawdown
from src.engine.calculator.performance import calc_performance
from src.engine.calculator.recovery import calc_recovery_targets, calc_rounding_factor
from src.engine.calculator.solver import capital_from_percent, resolve_capital_percent
from src.engine.calculator.trace import StepObserver, noop_observer
from src.engine.models.calculator import (
    BrokerAccountState,
    CalculatorInputs,
    CostBreakdown,
    EngineResult,
    FundingAccountState,
    RecoveryTargets,
    RulesConfiguration,
    SolverSettings,
    SymbolCostConfig,
    TradeRecord,
    UserInputs,
)


def calc_trading_plan(
    funding: FundingAccountState,
    broker: BrokerAccountState,
    rules: RulesConfiguration,
    funding_symbol: SymbolCostConfig,
    broker_symbol: SymbolCostConfig,
    funding_trades: Iterable[TradeRecord] | None,
    broker_trades: Iterable[TradeRecord] | None,
    user_inputs: UserInputs,
    settings: SolverSettings | None = None,
    on_step: StepObserver | None = None,
) -> EngineResult:
    """Calculate the full position-sizing report for one connection.

    Args:
        funding: Funding (propfirm) account state.
        broker: Broker account state (display context only).
        rules: Propfirm rules for the account's type and phase.
        funding_symbol: Funding-side symbol cost configuration.
        broker_symbol: Broker-side symbol cost configuration.
        funding_trades: Funding account trades.
        broker_trades: Broker account trades.
        user_inputs: Pips stop, risk percent and capital mode.
        settings: Capital solver bounds.
        on_step: Observer called with (step_name, values) for each stage.

    Returns:
        EngineResult.

    Raises:
        ConfigurationError: If max drawdown is missing or not positive, or
            the operation risk percent is zero.
    """
    observe = on_step or noop_observer

    max_drawdown = require_max_drawdown(rules.max_drawdown)
    risk_percent = user_inputs.operation_risk_percent
    pips_stop = user_inputs.pips_stop
    initial_balance = funding.initial_balance
    account_cost = funding.account_cost

    performance = calc_performance(
        funding_trades,
        broker_trades,
        max_drawdown=max_drawdown,
        profit_target=rules.profit_target,
        initial_balance=initial_balance,
    )
    observe("performance", asdict(performance))

    # Reject a zero risk percent before any trial runs.
    calc_rounding_factor(performance.remaining_objective_percent, risk_percent)

    def evaluate(capital: float) -> tuple[CostBreakdown, RecoveryTargets]:
        cost = calc_cost_breakdown(
            capital,
            risk_percent,
            max_drawdown,
            pips_stop,
            initial_balance,
            funding_symbol,
            broker_symbol,
        )
        targets = calc_recovery_targets(
            capital,
            max_drawdown,
            performance.remaining_drawdown_percent,
            performance.remaining_objective_percent,
            risk_percent,
            cost.total_commission,
            performance.total_broker_pnl,
        )
        return cost, targets

    def projected_total_at(capital: float) -> float:
        cost, targets = evaluate(capital)
        observe(
            "solver_trial",
            {
                "capital": capital,
                "total_commission": cost.total_commission,
                "projected_total": targets.projected_total,
            },
        )
        return targets.projected_total

    capital_percent, outcome = resolve_capital_percent(
        user_inputs.capital_mode,
        user_inputs.manual_capital_percent,
        projected_total_at,
        account_cost,
        settings,
    )
    capital_value = capital_from_percent(account_cost, capital_percent)
    observe(
        "capital",
        {
            "mode": user_inputs.capital_mode.value,
            "capital_percent": capital_percent,
            "capital_value": capital_value,
            "iterations": outcome.iterations if outcome else 0,
        },
    )

    cost, targets = evaluate(capital_value)
    observe("cost", {**asdict(cost), "total_commission": cost.total_commission})
    observe("recovery", asdict(targets))

    return EngineResult(
        commission_per_lot=cost.commission_per_lot,
        lot_in_funding=cost.lot_in_funding,
        spread=cost.spread,
        total_commission=cost.total_commission,
        total_propfirm_pnl=performance.total_propfirm_pnl,
        total_broker_pnl=performance.total_broker_pnl,
        remaining_drawdown_percent=performance.remaining_drawdown_percent,
        remaining_objective_percent=performance.remaining_objective_percent,
        rounding_factor=targets.rounding_factor,
        recovered=targets.recovered,
        objective=targets.objective,
        capital_percent=capital_percent,
        capital_value=capital_value,
        projected_total=targets.projected_total,
        capital_mode=user_inputs.capital_mode,
        solver=outcome,
    )


def calc_plan(
    inputs: CalculatorInputs,
    settings: SolverSettings | None = None,
    on_step: StepObserver | None = None,
) -> EngineResult:
    """calc_trading_plan() over an assembled CalculatorInputs."""
    return calc_trading_plan(
        inputs.funding,
        inputs.broker,
        inputs.rules,
        inputs.funding_symbol,
        inputs.broker_symbol,
        inputs.funding_trades,
        inputs.broker_trades,
        inputs.user_inputs,
        settings=settings,
        on_step=on_step,
    )
