"""
Price Command - Black-Scholes 期权定价命令
"""

import json
import logging

import click

from src.business.cli.commands.common import resolve_settings, settings_options, setup_logging
from src.business.config import PayoffConfig
from src.engine.bs import calc_bs_price_for
from src.engine.models import InstrumentKind

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--type",
    "-t",
    "option_type",
    type=click.Choice(["call", "put"], case_sensitive=False),
    default="call",
    help="期权类型",
)
@click.option("--strike", "-K", type=float, required=True, help="行权价")
@settings_options
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="配置文件 (默认 config/payoff.yaml)",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
@click.option("--verbose", "-v", is_flag=True, help="显示详细日志")
def price(
    option_type: str,
    strike: float,
    spot: float | None,
    rate: float | None,
    maturity: float | None,
    vol: float | None,
    config_path: str | None,
    output: str,
    verbose: bool,
) -> None:
    """计算欧式期权 Black-Scholes 理论价格

    \b
    示例：
      payoff price -K 105
      payoff price -t put -K 95 --spot 100 --vol 0.3 --maturity 0.5
      payoff price -K 100 -c my_config.yaml
    """
    setup_logging(verbose)

    settings = resolve_settings(PayoffConfig.load(config_path).settings, spot, rate, maturity, vol)
    kind = InstrumentKind.LONG_CALL if option_type.lower() == "call" else InstrumentKind.LONG_PUT
    premium = calc_bs_price_for(kind, strike, settings)

    if output == "json":
        click.echo(
            json.dumps(
                {"type": option_type.lower(), "strike": strike, "price": premium, **settings.to_dict()},
                indent=2,
            )
        )
        return

    click.echo(
        f"{option_type.upper()} K={strike:.2f} | S={settings.spot_price:.2f} "
        f"r={settings.risk_free_rate:.2%} T={settings.time_to_maturity:g}y "
        f"σ={settings.volatility:.2%}"
    )
    click.echo(f"Price: {premium:.4f}")
