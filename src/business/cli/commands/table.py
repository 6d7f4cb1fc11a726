"""
Table Command - P&L 表命令

输出组合在默认价格区间内的 P&L 表、拐点、盈亏平衡点和无风险头寸汇总。
"""

import json
import logging
from typing import Optional

import click

from src.business.cli.commands.common import (
    build_session,
    portfolio_options,
    settings_options,
    setup_logging,
)
from src.business.portfolio import PayoffSession, PayoffView
from src.engine.models import PayoffVariant

logger = logging.getLogger(__name__)


def _signed(value: float) -> str:
    sign = "+" if value >= 0 else "-"
    return f"{sign}${abs(value):.2f}"


def _print_view(session: PayoffSession, view: PayoffView) -> None:
    settings = view.settings
    click.echo("=" * 60)
    click.echo("📈 Payoff")
    click.echo(
        f"   S={settings.spot_price:.2f}  r={settings.risk_free_rate:.2%}  "
        f"T={settings.time_to_maturity:g}y  σ={settings.volatility:.2%}  "
        f"BS={'on' if session.auto_price else 'off'}"
    )
    click.echo("=" * 60)

    click.echo()
    click.echo("Positions:")
    for position in session.positions:
        if position.kind.is_risk_free:
            detail = f"principal={position.principal:.2f}"
        elif position.kind.is_option:
            detail = f"strike={position.strike:.2f} premium={position.cost:.2f}"
        else:
            detail = f"price={position.strike:.2f}"
        click.echo(f"  #{position.id:<3} {position.label:<24} {detail}")

    if view.is_empty:
        click.echo()
        click.echo("No positions added")
        return

    click.echo()
    click.echo(f"{'Underlying Price':>18} {'Total P&L':>14}")
    click.echo("-" * 33)
    for row in view.pnl_table:
        click.echo(f"{'$' + format(row.x, '.2f'):>18} {_signed(row.y):>14}")

    click.echo()
    if view.kinks:
        kinks = ", ".join(f"${k.x:.2f} ({_signed(k.y)})" for k in view.kinks)
        click.echo(f"Kinks: {kinks}")
    if view.breakevens:
        click.echo(f"Break-even: {', '.join(f'${b:.2f}' for b in view.breakevens)}")

    if not view.risk_free.is_empty:
        click.echo()
        click.echo(f"{'Position':<24} {'Value Today':>14} {'At Maturity':>14}")
        click.echo("-" * 54)
        for row in view.risk_free.rows:
            click.echo(
                f"{row.label:<24} {_signed(row.value_today):>14} {_signed(row.value_at_maturity):>14}"
            )
        click.echo(
            f"{'TOTAL':<24} {_signed(view.risk_free.total_today):>14} "
            f"{_signed(view.risk_free.total_at_maturity):>14}"
        )


@click.command()
@portfolio_options
@settings_options
@click.option("--payoff-only", is_flag=True, help="曲线不含期权费")
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json"]),
    default="text",
    help="输出格式",
)
def table(
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
    output: str,
) -> None:
    """输出组合 P&L 表

    \b
    示例：
      payoff table -s straddle
      payoff table -s butterfly --bs --vol 0.3
      payoff table -p my_portfolio.yaml -o json
    """
    setup_logging(verbose)

    session = build_session(strategy, portfolio, config_path, auto_price, spot, rate, maturity, vol)
    variant = PayoffVariant.PAYOFF_ONLY if payoff_only else PayoffVariant.FULL
    view = session.evaluate(variant)

    if output == "json":
        data = view.to_dict()
        data["positions"] = [p.to_dict() for p in session.positions]
        click.echo(json.dumps(data, indent=2))
        return

    _print_view(session, view)
