"""
Config Utilities - 配置工具函数

所有配置模块共享的工具函数。
"""

from typing import Any


def merge_overrides(
    base: dict[str, Any],
    overrides: dict[str, Any] | None,
) -> dict[str, Any]:
    """递归深合并覆盖配置到基础配置

    用于组合文件、命令行参数覆盖默认估值参数等场景。
    - 嵌套 dict：递归合并
    - None 值：忽略（保留基础值）
    - 其他类型：直接覆盖

    Args:
        base: 基础配置字典
        overrides: 覆盖字典

    Returns:
        合并后的配置字典（不修改原字典）
    """
    result = base.copy()
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_overrides(result[key], value)
        else:
            result[key] = value
    return result
