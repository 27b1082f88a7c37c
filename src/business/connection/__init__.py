"""
Connection - propfirm/broker 连接层

- ConnectionCalculator: 连接级计算入口
- build_symbol_catalog: 两侧品种配置合并
- group_trades_by_open_time / pair_operations: 交易配对
"""

from src.business.connection.calculator import ConnectionCalculator
from src.business.connection.models import SymbolData, TradeGroup, TradePair
from src.business.connection.symbol_catalog import build_symbol_catalog, find_symbol
from src.business.connection.trade_pairing import (
    group_trades_by_open_time,
    match_broker_trade,
    pair_operations,
)

__all__ = [
    "ConnectionCalculator",
    "SymbolData",
    "TradeGroup",
    "TradePair",
    "build_symbol_catalog",
    "find_symbol",
    "group_trades_by_open_time",
    "match_broker_trade",
    "pair_operations",
]
