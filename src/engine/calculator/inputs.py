"""Input assembler.

Normalizes raw account, rules, symbol configuration, trade and user-input
records into the typed inputs of the calculation engine.

Raw records are dictionaries as serialized by the upstream API: numbers may
arrive as strings (decimal columns), as None, or be missing altogether, and
keys may be camelCase or snake_case. Every assembler accepts None for an
absent record.

Defaults:
- pip_value_per_lot missing or zero -> 1
- commission_per_lot / spread_typical missing -> 0
- pips_stop missing or zero -> 1
- max_drawdown missing -> None (the engine raises ConfigurationError)
- trade commission / swap -> -abs(value)
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any, Iterable, Mapping

from src.engine.models.calculator import (
    BrokerAccountState,
    CalculatorInputs,
    FundingAccountState,
    RulesConfiguration,
    SymbolCostConfig,
    TradeRecord,
    UserInputs,
)
from src.engine.models.enums import CapitalMode

DEFAULT_PIP_VALUE = 1.0
DEFAULT_PIPS_STOP = 1.0
DEFAULT_CAPITAL_PERCENT = 100.0

Record = Mapping[str, Any]


def to_float(value: Any, default: float | None = 0.0) -> float | None:
    """Convert a raw numeric value to float.

    Returns default for None, empty strings, non-numeric and non-finite values.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(result):
        return default
    return result


def to_cost(value: Any) -> float:
    """Normalize a commission or swap to a cost (<= 0)."""
    return -abs(to_float(value, 0.0))


def to_datetime(value: Any) -> datetime | None:
    """Parse an ISO timestamp (a trailing "Z" is accepted)."""
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def _pick(record: Record | None, *keys: str) -> Any:
    """Return the first present key of a record."""
    if not record:
        return None
    for key in keys:
        if key in record and record[key] is not None:
            return record[key]
    return None


def assemble_funding_account(record: Record | None) -> FundingAccountState:
    return FundingAccountState(
        initial_balance=to_float(_pick(record, "initialBalance", "initial_balance")),
        current_balance=to_float(_pick(record, "currentBalance", "current_balance")),
        account_cost=to_float(_pick(record, "accountCost", "account_cost")),
    )


def assemble_broker_account(record: Record | None) -> BrokerAccountState:
    return BrokerAccountState(
        current_balance=to_float(_pick(record, "currentBalance", "current_balance")),
    )


def assemble_rules(record: Record | None) -> RulesConfiguration:
    """Normalize a propfirm rules record.

    A missing max drawdown stays None so the engine can reject it instead
    of silently dividing by a placeholder.
    """
    return RulesConfiguration(
        max_drawdown=to_float(_pick(record, "maxDrawdown", "max_drawdown"), None),
        daily_drawdown=to_float(_pick(record, "dailyDrawdown", "daily_drawdown")),
        profit_target=to_float(_pick(record, "profitTarget", "profit_target")),
    )


def assemble_symbol_config(record: Record | None) -> SymbolCostConfig:
    """Normalize one side's symbol configuration record.

    The nested ``symbol`` relation ({"symbol": ..., "displayName": ...}) is
    flattened when present.
    """
    pip_value = to_float(_pick(record, "pipValuePerLot", "pip_value_per_lot"))
    if not pip_value:
        pip_value = DEFAULT_PIP_VALUE

    symbol = _pick(record, "symbol")
    display_name = _pick(record, "displayName", "display_name")
    if isinstance(symbol, Mapping):
        display_name = display_name or symbol.get("displayName") or symbol.get("display_name")
        symbol = symbol.get("symbol")

    pip_ticks = _pick(record, "pipTicks", "pip_ticks")
    is_available = _pick(record, "isAvailable", "is_available")

    return SymbolCostConfig(
        commission_per_lot=to_float(_pick(record, "commissionPerLot", "commission_per_lot")),
        pip_value_per_lot=pip_value,
        spread_typical=to_float(_pick(record, "spreadTypical", "spread_typical")),
        symbol_id=_pick(record, "symbolId", "symbol_id"),
        symbol=symbol,
        display_name=display_name,
        pip_ticks=int(to_float(pip_ticks)) if pip_ticks is not None else None,
        is_available=True if is_available is None else bool(is_available),
    )


def assemble_trade(record: Record) -> TradeRecord:
    symbol_id = _pick(record, "symbolId", "symbol_id")
    symbol = record.get("symbol")
    if symbol_id is None and isinstance(symbol, Mapping):
        symbol_id = symbol.get("id")

    return TradeRecord(
        net_profit=to_float(_pick(record, "netProfit", "net_profit")),
        commission=to_cost(_pick(record, "commission")),
        swap=to_cost(_pick(record, "swap")),
        trade_id=_pick(record, "id", "trade_id"),
        symbol_id=symbol_id,
        status=_pick(record, "status"),
        open_time=to_datetime(_pick(record, "openTime", "open_time")),
        created_at=to_datetime(_pick(record, "createdAt", "created_at")),
    )


def assemble_trades(records: Iterable[Record] | None) -> tuple[TradeRecord, ...]:
    if not records:
        return ()
    return tuple(assemble_trade(r) for r in records)


def assemble_user_inputs(record: Record | None) -> UserInputs:
    """Normalize the trader's inputs.

    pips_stop of zero or less becomes 1. The manual percent falls back to
    100 when unset, non-numeric or not positive.
    """
    pips_stop = to_float(_pick(record, "pipsStop", "pips_stop"))
    if not pips_stop or pips_stop <= 0:
        pips_stop = DEFAULT_PIPS_STOP

    manual = to_float(
        _pick(record, "manualCapitalPercent", "manual_capital_percent"),
        DEFAULT_CAPITAL_PERCENT,
    )
    if manual <= 0:
        manual = DEFAULT_CAPITAL_PERCENT

    return UserInputs(
        pips_stop=pips_stop,
        operation_risk_percent=to_float(
            _pick(record, "operationRiskPercent", "operation_risk_percent", "operationRisk")
        ),
        capital_mode=CapitalMode.parse(_pick(record, "capitalMode", "capital_mode")),
        manual_capital_percent=manual,
    )


def assemble_inputs(
    funding_account: Record | None = None,
    broker_account: Record | None = None,
    rules: Record | None = None,
    funding_symbol: Record | None = None,
    broker_symbol: Record | None = None,
    funding_trades: Iterable[Record] | None = None,
    broker_trades: Iterable[Record] | None = None,
    user_inputs: Record | None = None,
) -> CalculatorInputs:
    """Assemble every input of one calculation from raw records."""
    return CalculatorInputs(
        funding=assemble_funding_account(funding_account),
        broker=assemble_broker_account(broker_account),
        rules=assemble_rules(rules),
        funding_symbol=assemble_symbol_config(funding_symbol),
        broker_symbol=assemble_symbol_config(broker_symbol),
        funding_trades=assemble_trades(funding_trades),
        broker_trades=assemble_trades(broker_trades),
        user_inputs=assemble_user_inputs(user_inputs),
    )
