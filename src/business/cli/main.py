"""
CLI Main Entry Point - 命令行主入口

使用 Click 库构建命令行工具。
"""

import click

from src.business.cli.commands.calc import calc
from src.business.cli.commands.stats import stats
from src.business.cli.commands.symbols import symbols


@click.group()
@click.version_option(version="0.1.0", prog_name="propcalc")
def cli() -> None:
    """propfirm 跟单计算器 - 业务层命令行工具

    提供交易计算、品种目录、交易统计等功能。
    """
    pass


# 注册子命令
cli.add_command(calc)
cli.add_command(symbols)
cli.add_command(stats)


if __name__ == "__main__":
    cli()
