"""
Payoff Portfolio - 收益图会话

- PayoffSession: 头寸与估值参数的唯一持有者
- PayoffView: 一次完整估值的结果
"""

from src.business.portfolio.session import PayoffSession, PayoffView

__all__ = ["PayoffSession", "PayoffView"]
