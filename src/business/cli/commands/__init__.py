"""
CLI Commands - 命令行子命令
"""

from src.business.cli.commands.calc import calc
from src.business.cli.commands.stats import stats
from src.business.cli.commands.symbols import symbols

__all__ = ["calc", "stats", "symbols"]
