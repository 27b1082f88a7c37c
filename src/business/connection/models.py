"""
Connection Models - 连接数据模型

propfirm 账户与 broker 账户连接层的数据结构：
- SymbolData: 合并后的可选品种 (两侧配置)
- TradeGroup: 按开仓时间分组的 propfirm/broker 交易
- TradePair: 操作表中的一行 (propfirm 交易 + 匹配的 broker 交易)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.engine.models.calculator import SymbolCostConfig, TradeRecord


@dataclass
class SymbolData:
    """可选品种 (propfirm 与 broker 两侧配置合并)"""

    symbol_id: str
    symbol: Optional[str] = None
    display_name: Optional[str] = None
    propfirm_config: Optional[SymbolCostConfig] = None
    broker_config: Optional[SymbolCostConfig] = None

    @property
    def is_configured_both_sides(self) -> bool:
        return self.propfirm_config is not None and self.broker_config is not None


@dataclass
class TradeGroup:
    """同一开仓时间的 propfirm/broker 交易"""

    propfirm: Optional[TradeRecord] = None
    broker: Optional[TradeRecord] = None
    open_time: Optional[datetime] = None

    @property
    def combined_pnl(self) -> Optional[float]:
        """propfirm P&L + broker P&L (两侧都存在时)"""
        if self.propfirm is None or self.broker is None:
            return None
        return self.propfirm.total_pnl + self.broker.total_pnl


@dataclass
class TradePair:
    """操作表行"""

    number: int  # 从 1 开始的操作编号
    propfirm: TradeRecord
    broker: Optional[TradeRecord] = None

    @property
    def propfirm_pnl(self) -> float:
        return self.propfirm.net_profit

    @property
    def broker_pnl(self) -> float:
        return self.broker.net_profit if self.broker else 0.0

    @property
    def broker_trade_id(self) -> Optional[str]:
        return self.broker.trade_id if self.broker else None
