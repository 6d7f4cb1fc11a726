"""
Strategies Command - 列出预设策略模板
"""

import sys

import click

from src.business.strategy import StrategyLibrary, StrategyLibraryError


@click.command()
def strategies() -> None:
    """列出所有预设策略模板"""
    try:
        library = StrategyLibrary()
        keys = library.keys()
    except StrategyLibraryError as e:
        click.echo(f"❌ 错误: {e}", err=True)
        sys.exit(1)

    for key in keys:
        template = library.get(key)
        click.echo(f"  {key:<16} {template.name:<20} {template.description}")
