"""
CLI Main Entry Point - 命令行主入口

使用 Click 库构建命令行工具。

Usage:
    payoff --help
    payoff table --help
"""

import click

from src.business.cli.commands.chart import chart
from src.business.cli.commands.price import price
from src.business.cli.commands.strategies import strategies
from src.business.cli.commands.table import table


@click.group()
@click.version_option(version="0.1.0", prog_name="payoff")
def cli() -> None:
    """收益图工具 - 组合到期盈亏分析

    提供期权定价、P&L 表、收益图导出等功能。

    \b
    示例:
        payoff strategies
        payoff table -s straddle
        payoff chart -s butterfly --bs --out butterfly.html
    """
    pass


# 注册子命令
cli.add_command(price)
cli.add_command(table)
cli.add_command(chart)
cli.add_command(strategies)


def main() -> None:
    """CLI 入口函数"""
    cli()


if __name__ == "__main__":
    main()
