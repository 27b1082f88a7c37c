"""
Configuration Management - 配置管理

加载和管理业务层配置：
- CalculatorConfig: 交易计算器配置
"""

from src.business.config.calculator_config import CalculatorConfig

__all__ = ["CalculatorConfig"]
