#!/usr/bin/env python3
"""Trading Calculator Demo.

Runs the calculator stages one by one on a fixed account, then the full
engine in AUTO and MANUAL capital mode.
"""

import argparse
import logging

from src.engine import (
    BrokerAccountState,
    CapitalMode,
    ConfigurationError,
    FundingAccountState,
    RulesConfiguration,
    SymbolCostConfig,
    TradeRecord,
    UserInputs,
    calc_cost_breakdown,
    calc_performance,
    calc_trading_plan,
    logging_observer,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

FUNDING = FundingAccountState(initial_balance=10000, current_balance=10000, account_cost=10000)
BROKER = BrokerAccountState(current_balance=2500)
RULES = RulesConfiguration(max_drawdown=10, daily_drawdown=5, profit_target=8)
FUNDING_SYMBOL = SymbolCostConfig(commission_per_lot=2, pip_value_per_lot=10, symbol="EURUSD")
BROKER_SYMBOL = SymbolCostConfig(commission_per_lot=3, pip_value_per_lot=10, spread_typical=1, symbol="EURUSD")


def demo_stages():
    """Demonstrate the individual stages at CAPITAL = account cost."""
    logger.info("=" * 60)
    logger.info("Calculator Stages Demo")
    logger.info("=" * 60)

    cost = calc_cost_breakdown(
        FUNDING.account_cost, 1, RULES.max_drawdown, 20, FUNDING.initial_balance, FUNDING_SYMBOL, BROKER_SYMBOL
    )
    logger.info(f"Commission per lot: ${cost.commission_per_lot:.2f}")
    logger.info(f"Lot in funding:     ${cost.lot_in_funding:.2f}")
    logger.info(f"Spread:             ${cost.spread:.2f}")
    logger.info(f"Total commission:   ${cost.total_commission:.2f}")

    trades = [TradeRecord(net_profit=150, commission=-6), TradeRecord(net_profit=-20, commission=4)]
    perf = calc_performance(trades, [], RULES.max_drawdown, RULES.profit_target, FUNDING.initial_balance)
    logger.info(f"Propfirm P&L: ${perf.total_propfirm_pnl:.2f}")
    logger.info(f"% Restante: {perf.remaining_drawdown_percent:.2f}%  % Objetivo: {perf.remaining_objective_percent:.2f}%")


def demo_engine(mode: CapitalMode, trace: bool):
    """Demonstrate the full engine."""
    logger.info("=" * 60)
    logger.info(f"Engine Demo ({mode.value})")
    logger.info("=" * 60)

    result = calc_trading_plan(
        FUNDING,
        BROKER,
        RULES,
        FUNDING_SYMBOL,
        BROKER_SYMBOL,
        [],
        [],
        UserInputs(pips_stop=20, operation_risk_percent=1, capital_mode=mode, manual_capital_percent=150),
        on_step=logging_observer(logger, logging.INFO) if trace else None,
    )
    logger.info(f"CAPITAL: ${result.capital_value:,.2f} ({result.capital_percent}%)")
    logger.info(f"Recuperado: ${result.recovered:,.2f}  Objetivo: ${result.objective:,.2f}")
    logger.info(f"Projected total: ${result.projected_total:,.2f}")


def demo_configuration_error():
    """Demonstrate the rejected calculation for a zero max drawdown."""
    try:
        calc_trading_plan(
            FUNDING, BROKER, RulesConfiguration(max_drawdown=0), FUNDING_SYMBOL, BROKER_SYMBOL, [], [],
            UserInputs(pips_stop=20, operation_risk_percent=1),
        )
    except ConfigurationError as e:
        logger.info(f"Rejected: {e}")


def main():
    parser = argparse.ArgumentParser(description="Trading calculator demo")
    parser.add_argument("--trace", action="store_true", help="Log every engine step")
    args = parser.parse_args()

    demo_stages()
    demo_engine(CapitalMode.AUTO, args.trace)
    demo_engine(CapitalMode.MANUAL, args.trace)
    demo_configuration_error()

    logger.info("\n" + "=" * 60)
    logger.info("Demo completed!")


if __name__ == "__main__":
    main()
