"""
Symbol Catalog - 品种目录

合并 propfirm 与 broker 两侧的品种配置，生成去重后的可选品种列表。
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from src.business.connection.models import SymbolData
from src.engine.calculator.inputs import assemble_symbol_config

logger = logging.getLogger(__name__)


def _symbol_id(record: Mapping[str, Any]) -> Optional[str]:
    return record.get("symbolId") or record.get("symbol_id")


def _category(record: Mapping[str, Any]) -> Optional[str]:
    symbol = record.get("symbol")
    if isinstance(symbol, Mapping):
        return symbol.get("category")
    return record.get("category")


def _is_available(record: Mapping[str, Any]) -> bool:
    value = record.get("isAvailable", record.get("is_available"))
    return True if value is None else bool(value)


def filter_configs(
    records: Iterable[Mapping[str, Any]] | None,
    category: Optional[str] = None,
) -> list[Mapping[str, Any]]:
    """过滤不可用或类别不符的配置

    未标注类别的配置保留。
    """
    result = []
    for record in records or []:
        if not _is_available(record) or _symbol_id(record) is None:
            continue
        record_category = _category(record)
        if category and record_category and record_category.upper() != category.upper():
            continue
        result.append(record)
    return result


def build_symbol_catalog(
    propfirm_configs: Iterable[Mapping[str, Any]] | None,
    broker_configs: Iterable[Mapping[str, Any]] | None,
    category: Optional[str] = None,
) -> list[SymbolData]:
    """合并两侧配置为品种目录

    按首次出现的顺序去重 (propfirm 在前)，每个品种携带两侧的配置
    (某侧没有配置时为 None)。

    Args:
        propfirm_configs: propfirm 侧原始配置记录
        broker_configs: broker 侧原始配置记录
        category: 只保留该类别 (如 "FOREX")，None 表示不过滤

    Returns:
        SymbolData 列表
    """
    propfirm = filter_configs(propfirm_configs, category)
    broker = filter_configs(broker_configs, category)

    propfirm_by_id = {}
    for record in propfirm:
        propfirm_by_id.setdefault(_symbol_id(record), record)
    broker_by_id = {}
    for record in broker:
        broker_by_id.setdefault(_symbol_id(record), record)

    catalog: dict[str, SymbolData] = {}
    for record in propfirm + broker:
        symbol_id = _symbol_id(record)
        if symbol_id in catalog:
            continue

        propfirm_record = propfirm_by_id.get(symbol_id)
        broker_record = broker_by_id.get(symbol_id)
        propfirm_config = assemble_symbol_config(propfirm_record) if propfirm_record else None
        broker_config = assemble_symbol_config(broker_record) if broker_record else None
        reference = propfirm_config or broker_config

        catalog[symbol_id] = SymbolData(
            symbol_id=symbol_id,
            symbol=reference.symbol,
            display_name=reference.display_name,
            propfirm_config=propfirm_config,
            broker_config=broker_config,
        )

    logger.debug(
        "Symbol catalog: %d symbols (%d propfirm, %d broker configs)",
        len(catalog),
        len(propfirm),
        len(broker),
    )
    return list(catalog.values())


def find_symbol(catalog: Iterable[SymbolData], symbol_id: str) -> Optional[SymbolData]:
    """按 symbol_id 查找品种"""
    for item in catalog:
        if item.symbol_id == symbol_id:
            return item
    return None
