"""
Payoff Configuration - 收益图配置管理

加载和管理收益图工具的默认参数：估值参数、采样密度、新建头寸默认值。
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.engine.models import ValuationSettings
from src.engine.payoff import DEFAULT_NUM_POINTS, DEFAULT_TABLE_ROWS

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).parent.parent.parent.parent / "config"


@dataclass
class DisplayConfig:
    """采样与展示配置"""

    num_points: int = DEFAULT_NUM_POINTS  # 收益曲线采样点数
    table_rows: int = DEFAULT_TABLE_ROWS  # P&L 表行数 (10 等分 + 端点)

    def __post_init__(self) -> None:
        if self.num_points < 2:
            raise ValueError(f"num_points must be at least 2, got {self.num_points}")
        if self.table_rows < 2:
            raise ValueError(f"table_rows must be at least 2, got {self.table_rows}")


@dataclass
class PositionDefaultsConfig:
    """新建头寸默认值

    strike 未配置时使用当前标的价格 (spot_price)。
    """

    strike: float | None = None
    cost: float = 5.0
    principal: float = 100.0
    quantity: int = 1

    def fill_record(self, record: dict[str, Any]) -> dict[str, Any]:
        """为部分头寸记录补齐 principal / quantity (记录中的值优先)"""
        return {"principal": self.principal, "quantity": self.quantity, **record}


@dataclass
class PayoffConfig:
    """收益图配置"""

    settings: ValuationSettings = field(default_factory=ValuationSettings)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    position_defaults: PositionDefaultsConfig = field(default_factory=PositionDefaultsConfig)
    auto_price: bool = False  # 是否用 Black-Scholes 自动计算期权费

    @classmethod
    def from_yaml(cls, path: str | Path) -> "PayoffConfig":
        """从 YAML 文件加载配置"""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.debug(f"Loaded payoff config from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PayoffConfig":
        """从字典创建配置"""
        config = cls()

        if "settings" in data:
            config.settings = ValuationSettings.from_dict(data["settings"] or {})

        if "display" in data:
            disp = data["display"] or {}
            config.display = DisplayConfig(
                num_points=int(disp.get("num_points", DEFAULT_NUM_POINTS)),
                table_rows=int(disp.get("table_rows", DEFAULT_TABLE_ROWS)),
            )

        if "position_defaults" in data:
            pd_ = data["position_defaults"] or {}
            strike = pd_.get("strike")
            config.position_defaults = PositionDefaultsConfig(
                strike=float(strike) if strike is not None else None,
                cost=float(pd_.get("cost", 5.0)),
                principal=float(pd_.get("principal", 100.0)),
                quantity=int(pd_.get("quantity", 1)),
            )

        if "auto_price" in data:
            config.auto_price = bool(data["auto_price"])

        return config

    @classmethod
    def load(cls, path: str | Path | None = None) -> "PayoffConfig":
        """加载配置，文件不存在时使用默认值"""
        config_file = Path(path) if path is not None else CONFIG_DIR / "payoff.yaml"
        if config_file.exists():
            return cls.from_yaml(config_file)
        logger.debug(f"Config file {config_file} not found, using defaults")
        return cls()
