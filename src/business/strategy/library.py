"""
Strategy Library - 预设策略模板库

管理配置驱动的策略模板（跨式、宽跨式、蝶式、领口等），
模板只提供 kind / strike / cost，principal 与 quantity 由加载器补默认值。

使用方式:
    library = StrategyLibrary()

    # 列出所有模板
    keys = library.keys()

    # 获取模板并生成头寸
    template = library.get("straddle")
    positions = template.to_positions(start_id=1)
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.business.config import PositionDefaultsConfig
from src.engine.models import InstrumentKind, Position

logger = logging.getLogger(__name__)

# 默认配置文件路径
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "strategies.yaml"


class StrategyLibraryError(Exception):
    """策略库相关错误"""
    pass


class StrategyNotFoundError(StrategyLibraryError, KeyError):
    """策略模板不存在"""
    pass


@dataclass
class StrategyTemplate:
    """策略模板

    Attributes:
        key: 模板标识，如 "straddle"
        name: 显示名称
        description: 描述
        positions: 部分头寸记录 (kind, strike, cost, 可选 principal/quantity)
    """

    key: str
    name: str
    description: str = ""
    positions: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        # 尽早暴露未知的 kind
        for record in self.positions:
            InstrumentKind(record.get("kind", record.get("type")))

    def to_positions(
        self,
        start_id: int = 1,
        defaults: PositionDefaultsConfig | None = None,
    ) -> list[Position]:
        """生成新头寸，id 从 start_id 开始连续分配

        Args:
            start_id: 第一个头寸的 id
            defaults: 新建头寸默认值，默认 PositionDefaultsConfig() (principal 100, quantity 1)

        Returns:
            头寸列表
        """
        defaults = defaults or PositionDefaultsConfig()
        positions = []
        for offset, record in enumerate(self.positions):
            data = defaults.fill_record(record)
            positions.append(Position.from_dict(data, position_id=start_id + offset))
        return positions


class StrategyLibrary:
    """策略模板库

    配置文件结构:
    ```yaml
    straddle:
      name: Long Straddle
      description: Buy call and put at same strike
      positions:
        - {kind: long_call, strike: 100, cost: 5}
        - {kind: long_put, strike: 100, cost: 5}
    ```
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        """初始化策略库

        Args:
            config_path: 配置文件路径，默认使用 config/strategies.yaml
        """
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._templates: dict[str, StrategyTemplate] | None = None

    @property
    def templates(self) -> dict[str, StrategyTemplate]:
        """懒加载模板"""
        if self._templates is None:
            self._templates = self._load_templates()
        return self._templates

    def _load_templates(self) -> dict[str, StrategyTemplate]:
        """加载配置文件

        Raises:
            StrategyLibraryError: 配置文件不存在或格式错误
        """
        if not self.config_path.exists():
            raise StrategyLibraryError(f"配置文件不存在: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise StrategyLibraryError(f"配置文件格式错误: {e}") from e

        if not config:
            raise StrategyLibraryError(f"配置文件为空: {self.config_path}")

        try:
            templates = {
                key: StrategyTemplate(
                    key=key,
                    name=data.get("name", key),
                    description=data.get("description", ""),
                    positions=list(data.get("positions", [])),
                )
                for key, data in config.items()
            }
        except ValueError as e:
            raise StrategyLibraryError(f"策略模板无效: {e}") from e

        logger.debug(f"Loaded {len(templates)} strategy templates from {self.config_path}")
        return templates

    def keys(self) -> list[str]:
        """列出所有模板标识（按配置顺序）"""
        return list(self.templates)

    def get(self, key: str) -> StrategyTemplate:
        """获取指定模板

        Raises:
            StrategyNotFoundError: 模板不存在
        """
        try:
            return self.templates[key]
        except KeyError:
            raise StrategyNotFoundError(
                f"策略模板 '{key}' 不存在，可用: {', '.join(self.keys())}"
            ) from None
