"""
Calc Command - 交易计算命令

从场景文件运行交易计算器，输出佣金、回收资金、目标资金与动态资金比例。
"""

import json
import logging
import sys
from datetime import datetime
from typing import Optional

import click

from src.business.cli.scenario import Scenario, load_scenario
from src.business.config.calculator_config import CalculatorConfig
from src.business.connection.calculator import ConnectionCalculator
from src.engine.calculator.errors import ConfigurationError
from src.engine.calculator.trace import RecordingObserver
from src.engine.models.calculator import EngineResult


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
    "--symbol",
    "symbol_id",
    help="品种 ID (覆盖场景文件中的 symbol_id)",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
@click.option(
    "--trace",
    is_flag=True,
    help="输出每个计算步骤的中间值",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="显示详细日志",
)
def calc(
    scenario: str,
    config: Optional[str],
    symbol_id: Optional[str],
    output: str,
    trace: bool,
    verbose: bool,
) -> None:
    """运行交易计算器

    \b
    示例：
      # 自动计算动态资金比例
      propcalc calc -s scenario.yaml

      # 指定品种并输出 JSON
      propcalc calc -s scenario.yaml --symbol sym-eurusd -o json

      # 查看计算步骤
      propcalc calc -s scenario.yaml --trace
    """
    # 配置日志
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        data = load_scenario(scenario)
        calculator = ConnectionCalculator(CalculatorConfig.load(config))
        selected = symbol_id or _default_symbol(calculator, data)
        recorder = RecordingObserver() if trace else None

        result = calculator.calculate(
            connection=data.connection,
            rules=data.rules,
            propfirm_configs=data.propfirm_configs,
            broker_configs=data.broker_configs,
            symbol_id=selected,
            user_inputs=data.inputs,
            on_step=recorder,
        )

        if output == "json":
            _output_json(result, selected, recorder)
        else:
            _output_text(result, selected, recorder)
        sys.exit(0)

    except click.UsageError:
        raise
    except ConfigurationError as e:
        click.echo(f"❌ 配置错误: {e}", err=True)
        sys.exit(2)
    except Exception as e:
        logger.exception("计算过程出错")
        click.echo(f"❌ 错误: {e}", err=True)
        sys.exit(3)


def _default_symbol(calculator: ConnectionCalculator, data: Scenario) -> str:
    """场景未指定品种时使用目录中的第一个品种"""
    if data.symbol_id:
        return data.symbol_id
    catalog = calculator.symbols(data.propfirm_configs, data.broker_configs)
    if not catalog:
        raise click.UsageError("场景文件中没有可用的品种配置")
    logger.info("未指定品种，使用 %s", catalog[0].symbol or catalog[0].symbol_id)
    return catalog[0].symbol_id


def _output_text(result: EngineResult, symbol_id: str, recorder: Optional[RecordingObserver]) -> None:
    """文本格式输出"""
    click.echo(f"🧮 交易计算 [{symbol_id}]")
    click.echo("-" * 50)

    click.echo("📊 账户表现:")
    click.echo(f"   CAPITAL FTMO:        ${result.total_propfirm_pnl:,.2f}")
    click.echo(f"   Broker P&L:          ${result.total_broker_pnl:,.2f}")
    click.echo(f"   % Restante:          {result.remaining_drawdown_percent:.2f}%")
    click.echo(f"   % Objetivo:          {result.remaining_objective_percent:.2f}%")
    click.echo()

    mode_note = (
        f"自动, {result.solver.iterations} 次迭代" if result.solver else "手动"
    )
    click.echo(f"💰 CAPITAL: ${result.capital_value:,.2f} ({result.capital_percent:.2f}%, {mode_note})")
    if result.solver and not result.solver.threshold_met:
        click.echo("   ⚠️ 搜索上限内无法覆盖 Cobertura")
    click.echo()

    click.echo("💸 成本:")
    click.echo(f"   Comisión por lote:   ${result.commission_per_lot:,.2f}")
    click.echo(f"   C. lote en fondeo:   ${result.lot_in_funding:,.2f}")
    click.echo(f"   Spread:              ${result.spread:,.2f}")
    click.echo(f"   Comisión total:      ${result.total_commission:,.2f}")
    click.echo()

    click.echo(f"🎯 Recuperado:          ${result.recovered:,.2f}")
    click.echo(f"🎯 Objetivo:            ${result.objective:,.2f}")
    click.echo(f"📈 Proyectado:          ${result.projected_total:,.2f}")

    if recorder:
        click.echo()
        click.echo("🔍 计算步骤:")
        for name, values in recorder.steps:
            formatted = ", ".join(f"{k}={v}" for k, v in values.items())
            click.echo(f"   {name}: {formatted}")


def _output_json(result: EngineResult, symbol_id: str, recorder: Optional[RecordingObserver]) -> None:
    """JSON 格式输出"""
    output_data = {
        "timestamp": datetime.now().isoformat(),
        "symbol_id": symbol_id,
        "result": result.to_dict(),
    }
    if recorder:
        output_data["steps"] = [{"step": name, "values": values} for name, values in recorder.steps]
    click.echo(json.dumps(output_data, indent=2, ensure_ascii=False, default=str))
