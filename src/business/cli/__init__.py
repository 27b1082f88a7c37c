"""
Business Layer CLI - 业务层命令行工具

提供命令：
- calc: 运行交易计算器
- symbols: 列出可选品种
- stats: 连接交易统计与操作表
"""

from src.business.cli.main import cli

__all__ = ["cli"]
