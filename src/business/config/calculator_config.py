"""
Calculator Configuration - 计算器配置

交易计算器参数的唯一配置源。

配置来源 (优先级高→低):
1. from_dict() 传入的覆盖值
2. YAML 配置文件 (config/calculator/calculator.yaml)
3. dataclass 默认值 (代码 fallback)
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from src.engine.models.calculator import SolverSettings

DEFAULT_CONFIG_FILE = (
    Path(__file__).parent.parent.parent.parent / "config" / "calculator" / "calculator.yaml"
)


@dataclass
class CalculatorConfig:
    """计算器配置

    示例:
        # 从 YAML 加载 (不存在则使用默认值)
        config = CalculatorConfig.load()

        # 覆盖部分字段
        config = CalculatorConfig.from_dict({"solver_tolerance": 0.001})
    """

    # =========================================================================
    # Dynamic Capital Solver (动态资金搜索)
    # =========================================================================

    solver_min_percent: float = 0.1  # 搜索下限 (% of Cobertura)
    solver_max_percent: float = 1000.0  # 搜索上限
    solver_tolerance: float = 0.01  # 区间宽度收敛阈值
    solver_max_iterations: int = 50  # 最大迭代次数
    default_capital_percent: float = 100.0  # 无法搜索时 / 手动模式默认值
    result_decimals: int = 2  # 结果保留小数位

    # =========================================================================
    # Connection (连接级参数)
    # =========================================================================

    symbol_category: str = "FOREX"  # 只计算该类别的品种
    pair_window_seconds: float = 60.0  # propfirm/broker 交易配对时间窗口

    @classmethod
    def _apply_dict(cls, config: "CalculatorConfig", data: dict[str, Any]) -> "CalculatorConfig":
        """将字典中的值覆盖到 config 实例上（内部方法）"""
        section = data.get("calculator", data) or {}
        valid_fields = {f.name for f in fields(cls)}
        for key, value in section.items():
            if key in valid_fields:
                setattr(config, key, value)
        return config

    @classmethod
    def from_yaml(cls, path: str | Path) -> "CalculatorConfig":
        """从 YAML 文件加载配置

        Args:
            path: YAML 文件路径

        Returns:
            CalculatorConfig 实例
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls._apply_dict(cls(), data)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "CalculatorConfig":
        """加载配置

        优先从 YAML 加载，如果 YAML 不存在则使用 dataclass 默认值。
        """
        config_file = Path(path) if path else DEFAULT_CONFIG_FILE
        if config_file.exists():
            return cls.from_yaml(config_file)
        return cls()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalculatorConfig":
        """在 YAML 基线上叠加字典覆盖 (支持嵌套 calculator 或扁平结构)"""
        return cls._apply_dict(cls.load(), data)

    def to_solver_settings(self) -> SolverSettings:
        """转换为引擎层的 SolverSettings"""
        return SolverSettings(
            min_percent=float(self.solver_min_percent),
            max_percent=float(self.solver_max_percent),
            tolerance=float(self.solver_tolerance),
            max_iterations=int(self.solver_max_iterations),
            fallback_percent=float(self.default_capital_percent),
            decimals=int(self.result_decimals),
        )

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "calculator": {
                # Solver
                "solver_min_percent": self.solver_min_percent,
                "solver_max_percent": self.solver_max_percent,
                "solver_tolerance": self.solver_tolerance,
                "solver_max_iterations": self.solver_max_iterations,
                "default_capital_percent": self.default_capital_percent,
                "result_decimals": self.result_decimals,
                # Connection
                "symbol_category": self.symbol_category,
                "pair_window_seconds": self.pair_window_seconds,
            }
        }
