"""
CLI Commands - 命令行子命令
"""

from src.business.cli.commands.chart import chart
from src.business.cli.commands.price import price
from src.business.cli.commands.strategies import strategies
from src.business.cli.commands.table import table

__all__ = ["chart", "price", "strategies", "table"]
