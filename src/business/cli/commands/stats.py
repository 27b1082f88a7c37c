"""
Stats Command - 连接交易统计命令

输出连接两侧的交易统计和操作表 (propfirm 交易与匹配的 broker 交易)。
"""

import json
import logging
import sys
from dataclasses import asdict
from typing import Optional

import click

from src.business.cli.scenario import load_scenario
from src.business.config.calculator_config import CalculatorConfig
from src.business.connection.calculator import ConnectionCalculator


logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--scenario",
    "-s",
    type=click.Path(exists=True),
    required=True,
    help="场景文件路径 (YAML/JSON)",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True),
    help="计算器配置文件路径",
)
@click.option(
    "--limit",
    "-n",
    type=int,
    default=10,
    show_default=True,
    help="操作表最多显示的行数",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
def stats(scenario: str, config: Optional[str], limit: int, output: str) -> None:
    """连接交易统计

    \b
    示例：
      propcalc stats -s scenario.yaml -n 20
    """
    try:
        data = load_scenario(scenario)
        calculator = ConnectionCalculator(CalculatorConfig.load(config))
        trade_stats = calculator.stats(data.connection)
        operations = calculator.operations(data.connection, limit=limit)
    except Exception as e:
        logger.exception("统计过程出错")
        click.echo(f"❌ 错误: {e}", err=True)
        sys.exit(3)

    if output == "json":
        click.echo(
            json.dumps(
                {
                    "stats": asdict(trade_stats),
                    "operations": [
                        {
                            "number": op.number,
                            "propfirm_pnl": op.propfirm_pnl,
                            "broker_pnl": op.broker_pnl,
                            "broker_trade_id": op.broker_trade_id,
                        }
                        for op in operations
                    ],
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    pf = trade_stats.profit_factor
    click.echo("📊 交易统计")
    click.echo("-" * 50)
    click.echo(f"   总交易: {trade_stats.total_trades} (持仓 {trade_stats.open_trades} / 平仓 {trade_stats.closed_trades})")
    click.echo(f"   胜率: {trade_stats.win_rate:.1%} ({trade_stats.winning_trades}W / {trade_stats.losing_trades}L)")
    click.echo(f"   平均盈利: ${trade_stats.avg_win:,.2f} | 平均亏损: ${trade_stats.avg_loss:,.2f}")
    click.echo(f"   盈亏比: {'∞' if pf is None else f'{pf:.2f}'}")
    click.echo(f"   最大回撤: ${trade_stats.max_drawdown:,.2f}")
    click.echo(f"   总 P&L: ${trade_stats.total_pnl:,.2f} (Propfirm ${trade_stats.propfirm_pnl:,.2f} / Broker ${trade_stats.broker_pnl:,.2f})")
    click.echo()

    click.echo("📋 操作表")
    click.echo("-" * 50)
    if not operations:
        click.echo("   没有可用的操作")
        return
    for op in operations:
        click.echo(
            f"   #{op.number:<3} P&L FTMO ${op.propfirm_pnl:>10,.2f} | "
            f"P&L BROKER ${op.broker_pnl:>10,.2f} | {op.broker_trade_id or '-'}"
        )
