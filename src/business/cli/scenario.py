"""
Scenario Loader - 场景文件加载

场景文件 (YAML 或 JSON) 汇集一次计算所需的全部原始记录：

    connection:
      propfirmAccount: {initialBalance: 10000, accountCost: 10000, trades: [...]}
      brokerAccount: {currentBalance: 2500, trades: [...]}
    rules: {maxDrawdown: 10, dailyDrawdown: 5, profitTarget: 8}
    symbol_configs:
      propfirm: [...]
      broker: [...]
    symbol_id: sym-eurusd
    inputs: {pipsStop: 20, operationRiskPercent: 1, capitalMode: AUTO}
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass
class Scenario:
    """已加载的场景"""

    connection: dict[str, Any] = field(default_factory=dict)
    rules: dict[str, Any] | None = None
    propfirm_configs: list[dict[str, Any]] = field(default_factory=list)
    broker_configs: list[dict[str, Any]] = field(default_factory=list)
    symbol_id: str | None = None
    inputs: dict[str, Any] = field(default_factory=dict)


def load_scenario(path: str | Path) -> Scenario:
    """加载场景文件 (JSON 是 YAML 的子集，统一用 yaml.safe_load)"""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    symbol_configs = data.get("symbol_configs") or {}
    scenario = Scenario(
        connection=data.get("connection") or {},
        rules=data.get("rules"),
        propfirm_configs=symbol_configs.get("propfirm") or [],
        broker_configs=symbol_configs.get("broker") or [],
        symbol_id=data.get("symbol_id"),
        inputs=data.get("inputs") or {},
    )
    logger.debug(
        "Loaded scenario %s: %d propfirm / %d broker symbol configs",
        path,
        len(scenario.propfirm_configs),
        len(scenario.broker_configs),
    )
    return scenario
