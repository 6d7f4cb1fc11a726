"""
Payoff CLI - 命令行工具

提供命令：
- price: Black-Scholes 期权定价
- table: P&L 表、拐点、盈亏平衡点
- chart: 收益图导出
- strategies: 列出预设策略
"""

from src.business.cli.main import cli

__all__ = ["cli"]
