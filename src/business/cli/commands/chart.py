"""
Chart Command - 收益图导出命令
"""

import logging
from pathlib import Path
from typing import Optional

import click

from src.business.cli.commands.common import (
    build_session,
    portfolio_options,
    settings_options,
    setup_logging,
)
from src.business.visualization import PayoffChart
from src.engine.models import PayoffVariant

logger = logging.getLogger(__name__)


@click.command()
@portfolio_options
@settings_options
@click.option("--payoff-only", is_flag=True, help="曲线不含期权费")
@click.option(
    "--out",
    "out_path",
    type=click.Path(dir_okay=False),
    default="payoff-diagram.html",
    show_default=True,
    help="输出文件 (.html 或 kaleido 支持的图片格式)",
)
def chart(
    strategy: Optional[str],
    portfolio: Optional[str],
    config_path: Optional[str],
    auto_price: Optional[bool],
    verbose: bool,
    spot: Optional[float],
    rate: Optional[float],
    maturity: Optional[float],
    vol: Optional[float],
    payoff_only: bool,
    out_path: str,
) -> None:
    """导出收益图

    \b
    示例：
      payoff chart -s collar --out reports/collar.html
      payoff chart -p my_portfolio.yaml --out payoff.png
    """
    setup_logging(verbose)

    session = build_session(strategy, portfolio, config_path, auto_price, spot, rate, maturity, vol)
    variant = PayoffVariant.PAYOFF_ONLY if payoff_only else PayoffVariant.FULL
    payoff_chart = PayoffChart(session.evaluate(variant))

    if Path(out_path).suffix.lower() in (".html", ".htm"):
        saved = payoff_chart.save_html(out_path)
    else:
        saved = payoff_chart.save_image(out_path)

    logger.info(f"Payoff chart written to {saved}")
    click.echo(f"✅ {saved}")
