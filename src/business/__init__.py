"""
Business Layer - 业务模块层

propfirm/broker 跟单计算器的业务逻辑层，包含：
- connection: 连接级计算、品种目录、交易配对
- config: 配置管理
- cli: 命令行工具
"""
