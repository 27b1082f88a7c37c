"""
Trade Pairing - 交易配对

将 propfirm 账户与 broker 账户的交易对应起来：
- group_trades_by_open_time: 按开仓时间分组 (交易列表视图)
- match_broker_trade: 同品种、创建时间相差在窗口内的 broker 交易
- pair_operations: 操作表 (每笔 propfirm 交易 + 匹配的 broker 交易)
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from src.business.connection.models import TradeGroup, TradePair
from src.engine.models.calculator import TradeRecord
from src.engine.models.enums import TradeSide

DEFAULT_PAIR_WINDOW_SECONDS = 60.0


def group_trades_by_open_time(
    propfirm_trades: Iterable[TradeRecord] | None,
    broker_trades: Iterable[TradeRecord] | None,
) -> list[TradeGroup]:
    """按开仓时间将两侧交易分组

    相同 open_time 的 propfirm 交易与 broker 交易归入同一组。没有 open_time
    的交易各自成组；某侧已占用的组再遇到同侧交易时新开一组，不丢弃交易。
    组按首次出现顺序返回 (propfirm 交易在前)。
    """
    groups: list[TradeGroup] = []
    open_groups: dict[datetime, TradeGroup] = {}

    tagged = [(TradeSide.PROPFIRM, t) for t in propfirm_trades or []]
    tagged += [(TradeSide.BROKER, t) for t in broker_trades or []]

    for side, trade in tagged:
        attr = side.value
        group = open_groups.get(trade.open_time) if trade.open_time else None
        if group is None or getattr(group, attr) is not None:
            group = TradeGroup(open_time=trade.open_time)
            groups.append(group)
            if trade.open_time:
                open_groups[trade.open_time] = group
        setattr(group, attr, trade)

    return groups


def _seconds_apart(a: datetime, b: datetime) -> Optional[float]:
    try:
        return abs((a - b).total_seconds())
    except TypeError:
        # naive vs aware
        return None


def match_broker_trade(
    propfirm_trade: TradeRecord,
    broker_trades: Iterable[TradeRecord] | None,
    window_seconds: float = DEFAULT_PAIR_WINDOW_SECONDS,
) -> Optional[TradeRecord]:
    """查找与 propfirm 交易对应的 broker 交易

    条件: 同一 symbol_id，且 created_at 相差严格小于 window_seconds。
    返回第一笔满足条件的交易；缺少 created_at 的交易不参与匹配。
    """
    if propfirm_trade.created_at is None:
        return None

    for trade in broker_trades or []:
        if trade.symbol_id != propfirm_trade.symbol_id or trade.created_at is None:
            continue
        gap = _seconds_apart(trade.created_at, propfirm_trade.created_at)
        if gap is not None and gap < window_seconds:
            return trade
    return None


def pair_operations(
    propfirm_trades: Iterable[TradeRecord] | None,
    broker_trades: Iterable[TradeRecord] | None,
    window_seconds: float = DEFAULT_PAIR_WINDOW_SECONDS,
    limit: Optional[int] = None,
) -> list[TradePair]:
    """生成操作表

    Args:
        propfirm_trades: propfirm 侧交易
        broker_trades: broker 侧交易
        window_seconds: 配对时间窗口
        limit: 最多返回的行数 (None 表示全部)

    Returns:
        TradePair 列表，编号从 1 开始
    """
    broker = list(broker_trades or [])
    propfirm = list(propfirm_trades or [])
    if limit is not None:
        propfirm = propfirm[:limit]

    return [
        TradePair(
            number=index + 1,
            propfirm=trade,
            broker=match_broker_trade(trade, broker, window_seconds),
        )
        for index, trade in enumerate(propfirm)
    ]
