"""
Symbols Command - 品种目录命令

列出场景文件中 propfirm 与 broker 两侧合并后的可选品种。
"""

import json
import logging
import sys
from typing import Optional

import click

from src.business.cli.scenario import load_scenario
from src.business.config.calculator_config import CalculatorConfig
from src.business.connection.calculator import ConnectionCalculator


logger = logging.getLogger(__name__)


def _fmt_config(config) -> str:
    if config is None:
        return "-"
    return (
        f"comm ${config.commission_per_lot:.4f} | pip ${config.pip_value_per_lot:.4f}"
        f" | spread {config.spread_typical:.2f}"
    )


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
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
def symbols(scenario: str, config: Optional[str], output: str) -> None:
    """列出可选品种

    \b
    示例：
      propcalc symbols -s scenario.yaml
    """
    try:
        data = load_scenario(scenario)
        calculator = ConnectionCalculator(CalculatorConfig.load(config))
        catalog = calculator.symbols(data.propfirm_configs, data.broker_configs)
    except Exception as e:
        logger.exception("加载品种目录出错")
        click.echo(f"❌ 错误: {e}", err=True)
        sys.exit(3)

    if output == "json":
        click.echo(
            json.dumps(
                [
                    {
                        "symbol_id": item.symbol_id,
                        "symbol": item.symbol,
                        "display_name": item.display_name,
                        "propfirm": item.propfirm_config is not None,
                        "broker": item.broker_config is not None,
                    }
                    for item in catalog
                ],
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    click.echo(f"📋 {len(catalog)} 个可选品种 ({calculator.config.symbol_category})")
    click.echo("-" * 80)
    for item in catalog:
        click.echo(f"{item.symbol or item.symbol_id}  {item.display_name or ''}")
        click.echo(f"   Propfirm: {_fmt_config(item.propfirm_config)}")
        click.echo(f"   Broker:   {_fmt_config(item.broker_config)}")
