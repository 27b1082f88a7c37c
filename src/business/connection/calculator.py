"""
Connection Calculator - 连接级交易计算

从连接记录 (propfirm 账户 + broker 账户 + 交易)、propfirm 规则和两侧品种
配置中取出计算所需的输入，调用引擎层 calc_trading_plan()。

数据获取由上游负责，这里只接收已加载的原始记录 (API 形状的字典)。
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from src.business.config.calculator_config import CalculatorConfig
from src.business.connection.models import SymbolData, TradePair
from src.business.connection.symbol_catalog import build_symbol_catalog, find_symbol
from src.business.connection.trade_pairing import pair_operations
from src.engine.calculator.engine import calc_trading_plan
from src.engine.calculator.errors import SymbolNotFoundError
from src.engine.calculator.inputs import (
    assemble_broker_account,
    assemble_funding_account,
    assemble_rules,
    assemble_trades,
    assemble_user_inputs,
)
from src.engine.calculator.stats import calc_trade_stats
from src.engine.calculator.trace import StepObserver
from src.engine.models.calculator import EngineResult, SymbolCostConfig, TradeRecord, TradeStats

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


_ACCOUNT_KEYS = {
    "propfirm": ("propfirmAccount", "propfirm_account"),
    "broker": ("brokerAccount", "broker_account"),
}


def _account(connection: Record, side: str) -> Record:
    for key in _ACCOUNT_KEYS[side]:
        if connection.get(key):
            return connection[key]
    return {}


class ConnectionCalculator:
    """连接级计算入口

    示例:
        calculator = ConnectionCalculator()
        result = calculator.calculate(
            connection=connection,
            rules=rules,
            propfirm_configs=propfirm_configs,
            broker_configs=broker_configs,
            symbol_id="sym-eurusd",
            user_inputs={"pipsStop": 20, "operationRiskPercent": 1},
        )
    """

    def __init__(self, config: Optional[CalculatorConfig] = None) -> None:
        self.config = config or CalculatorConfig.load()

    def symbols(
        self,
        propfirm_configs: Iterable[Record] | None,
        broker_configs: Iterable[Record] | None,
    ) -> list[SymbolData]:
        """可选品种目录 (按配置类别过滤)"""
        return build_symbol_catalog(
            propfirm_configs, broker_configs, category=self.config.symbol_category
        )

    def trades(self, connection: Record) -> tuple[tuple[TradeRecord, ...], tuple[TradeRecord, ...]]:
        """(propfirm 交易, broker 交易)"""
        return (
            assemble_trades(_account(connection, "propfirm").get("trades")),
            assemble_trades(_account(connection, "broker").get("trades")),
        )

    def calculate(
        self,
        connection: Record,
        rules: Record | None,
        propfirm_configs: Iterable[Record] | None,
        broker_configs: Iterable[Record] | None,
        symbol_id: str,
        user_inputs: Record | None,
        on_step: StepObserver | None = None,
    ) -> EngineResult:
        """计算选中品种的交易方案

        Raises:
            SymbolNotFoundError: 两侧都没有该品种的配置
            ConfigurationError: 规则缺少有效的最大回撤，或操作风险为 0
        """
        symbol = find_symbol(self.symbols(propfirm_configs, broker_configs), symbol_id)
        if symbol is None:
            raise SymbolNotFoundError(f"No symbol configuration for {symbol_id!r}")

        propfirm_trades, broker_trades = self.trades(connection)
        funding = assemble_funding_account(_account(connection, "propfirm"))

        logger.info(
            "Calculating %s: cost=%.2f, %d propfirm / %d broker trades",
            symbol.symbol or symbol_id,
            funding.account_cost,
            len(propfirm_trades),
            len(broker_trades),
        )

        return calc_trading_plan(
            funding=funding,
            broker=assemble_broker_account(_account(connection, "broker")),
            rules=assemble_rules(rules),
            funding_symbol=symbol.propfirm_config or SymbolCostConfig(symbol_id=symbol_id),
            broker_symbol=symbol.broker_config or SymbolCostConfig(symbol_id=symbol_id),
            funding_trades=propfirm_trades,
            broker_trades=broker_trades,
            user_inputs=assemble_user_inputs(user_inputs),
            settings=self.config.to_solver_settings(),
            on_step=on_step,
        )

    def stats(self, connection: Record) -> TradeStats:
        """连接交易统计"""
        propfirm_trades, broker_trades = self.trades(connection)
        return calc_trade_stats(propfirm_trades, broker_trades)

    def operations(self, connection: Record, limit: Optional[int] = 10) -> list[TradePair]:
        """操作表 (默认前 10 笔 propfirm 交易)"""
        propfirm_trades, broker_trades = self.trades(connection)
        return pair_operations(
            propfirm_trades,
            broker_trades,
            window_seconds=self.config.pair_window_seconds,
            limit=limit,
        )
