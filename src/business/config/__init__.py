"""
Configuration Management - 配置管理

加载和管理业务层配置：
- PayoffConfig: 估值参数、采样密度、新建头寸默认值
- merge_overrides: 配置覆盖合并
"""

from src.business.config.config_utils import merge_overrides
from src.business.config.payoff_config import (
    DisplayConfig,
    PayoffConfig,
    PositionDefaultsConfig,
)

__all__ = ["PayoffConfig", "DisplayConfig", "PositionDefaultsConfig", "merge_overrides"]
