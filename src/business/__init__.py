"""
Business Layer - 业务模块层

收益图工具的业务逻辑层，包含：
- portfolio: 头寸与估值参数会话
- strategy: 预设策略模板
- visualization: 收益图
- config: 配置管理
- cli: 命令行工具
"""
