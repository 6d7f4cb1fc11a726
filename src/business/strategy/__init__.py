"""
Strategy Presets - 预设策略模板
"""

from src.business.strategy.library import (
    StrategyLibrary,
    StrategyLibraryError,
    StrategyNotFoundError,
    StrategyTemplate,
)

__all__ = [
    "StrategyLibrary",
    "StrategyLibraryError",
    "StrategyNotFoundError",
    "StrategyTemplate",
]
