"""
Common CLI helpers - 子命令共享的选项与会话构建
"""

import logging
from typing import Callable, Optional

import click

from src.business.config import PayoffConfig, merge_overrides
from src.business.portfolio import PayoffSession
from src.business.strategy import StrategyLibrary, StrategyLibraryError
from src.engine.models import ValuationSettings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """配置日志"""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def settings_options(func: Callable) -> Callable:
    """估值参数选项 (覆盖配置文件)"""
    options = [
        click.option("--spot", type=float, help="标的当前价格"),
        click.option("--rate", type=float, help="年化无风险利率，小数 (如 0.05)"),
        click.option("--maturity", type=float, help="到期时间 (年)"),
        click.option("--vol", type=float, help="年化波动率，小数 (如 0.20)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def portfolio_options(func: Callable) -> Callable:
    """组合来源选项"""
    options = [
        click.option("--strategy", "-s", type=str, help="预设策略模板，如 straddle"),
        click.option(
            "--portfolio",
            "-p",
            type=click.Path(exists=True, dir_okay=False),
            help="组合 YAML 文件",
        ),
        click.option(
            "--config",
            "-c",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            help="配置文件 (默认 config/payoff.yaml)",
        ),
        click.option("--bs/--no-bs", "auto_price", default=None, help="是否用 Black-Scholes 自动定价期权费"),
        click.option("--verbose", "-v", is_flag=True, help="显示详细日志"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def settings_overrides(
    spot: Optional[float] = None,
    rate: Optional[float] = None,
    maturity: Optional[float] = None,
    vol: Optional[float] = None,
) -> dict[str, Optional[float]]:
    """命令行估值参数 (None 表示未指定)"""
    return {
        "spot_price": spot,
        "risk_free_rate": rate,
        "time_to_maturity": maturity,
        "volatility": vol,
    }


def resolve_settings(
    base: ValuationSettings,
    spot: Optional[float] = None,
    rate: Optional[float] = None,
    maturity: Optional[float] = None,
    vol: Optional[float] = None,
) -> ValuationSettings:
    """命令行参数覆盖估值参数"""
    overrides = settings_overrides(spot, rate, maturity, vol)
    return ValuationSettings.from_dict(merge_overrides(base.to_dict(), overrides))


def build_session(
    strategy: Optional[str],
    portfolio: Optional[str],
    config_path: Optional[str],
    auto_price: Optional[bool],
    spot: Optional[float] = None,
    rate: Optional[float] = None,
    maturity: Optional[float] = None,
    vol: Optional[float] = None,
) -> PayoffSession:
    """按命令行参数构建会话

    估值参数与自动定价开关在加载头寸之前确定，优先级：命令行 > 组合文件 > 配置文件。
    --no-bs 时保留文件或模板中的期权费。

    Raises:
        click.UsageError: 未指定或同时指定了 --strategy 与 --portfolio
        click.ClickException: 策略模板不存在或无效
    """
    if bool(strategy) == bool(portfolio):
        raise click.UsageError("请指定 --strategy 或 --portfolio 其中之一")

    config = PayoffConfig.load(config_path)

    if portfolio:
        return PayoffSession.from_portfolio_file(
            portfolio,
            config,
            auto_price=auto_price,
            settings_overrides=settings_overrides(spot, rate, maturity, vol),
        )

    try:
        template = StrategyLibrary().get(strategy)
    except (StrategyLibraryError, KeyError) as e:
        raise click.ClickException(str(e)) from e

    session = PayoffSession(
        settings=resolve_settings(config.settings, spot, rate, maturity, vol),
        auto_price=config.auto_price if auto_price is None else auto_price,
        config=config,
    )
    session.load_strategy(template)
    return session
