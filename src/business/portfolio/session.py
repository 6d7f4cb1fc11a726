"""
Payoff Session - 收益图会话

持有头寸列表与估值参数，所有修改都经由明确的更新操作完成，
每次修改后可调用 evaluate() 重新计算完整的收益视图（无增量更新）。

使用方式:
    session = PayoffSession.from_config(PayoffConfig.load())
    session.add_position(InstrumentKind.LONG_CALL, strike=100, cost=5)
    session.add_position(InstrumentKind.LONG_PUT, strike=100, cost=5)
    view = session.evaluate()
    view.kinks       # [PayoffPoint(x=100.0, y=-10.0)]
    view.breakevens  # [90.0, 110.0]
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import yaml

from src.business.config import PayoffConfig, merge_overrides
from src.business.strategy import StrategyTemplate
from src.engine.models import (
    InstrumentKind,
    PayoffPoint,
    PayoffVariant,
    Position,
    PriceRange,
    RiskFreeSummary,
    ValuationSettings,
)
from src.engine.payoff import (
    calc_default_range,
    calc_total_payoff,
    find_breakeven_prices,
    find_kink_points,
    generate_payoff_series,
    generate_pnl_table,
)
from src.engine.portfolio import calc_risk_free_summary, reprice_options, reprice_position

logger = logging.getLogger(__name__)


@dataclass
class PayoffView:
    """一次完整估值的结果

    Attributes:
        settings: 估值参数快照
        variant: 曲线使用的收益口径
        price_range: 标的价格区间
        curve: 收益曲线采样点
        kinks: 拐点 (含期权费的完整收益)
        breakevens: 盈亏平衡价格 (含期权费)
        pnl_table: P&L 表 (含期权费)
        risk_free: 无风险头寸现金流汇总
    """

    settings: ValuationSettings
    variant: PayoffVariant
    price_range: PriceRange
    curve: list[PayoffPoint] = field(default_factory=list)
    kinks: list[PayoffPoint] = field(default_factory=list)
    breakevens: list[float] = field(default_factory=list)
    pnl_table: list[PayoffPoint] = field(default_factory=list)
    risk_free: RiskFreeSummary = field(default_factory=RiskFreeSummary)

    @property
    def is_empty(self) -> bool:
        return not self.curve

    def to_dict(self) -> dict[str, Any]:
        """转换为可 JSON 序列化的字典"""
        return {
            "settings": self.settings.to_dict(),
            "variant": self.variant.value,
            "price_range": {"min": self.price_range.min, "max": self.price_range.max},
            "curve": [{"x": p.x, "y": p.y} for p in self.curve],
            "kinks": [{"x": p.x, "y": p.y} for p in self.kinks],
            "breakevens": self.breakevens,
            "pnl_table": [{"price": p.x, "pnl": p.y} for p in self.pnl_table],
            "risk_free": {
                "rows": [
                    {
                        "id": row.position_id,
                        "label": row.label,
                        "value_today": row.value_today,
                        "value_at_maturity": row.value_at_maturity,
                    }
                    for row in self.risk_free.rows
                ],
                "total_today": self.risk_free.total_today,
                "total_at_maturity": self.risk_free.total_at_maturity,
            },
        }


class PayoffSession:
    """收益图会话

    单一所有者、单线程使用：头寸列表与估值参数只通过下列方法修改：
    add / remove / update / clear / load_strategy / replace_settings / set_auto_price。

    开启 auto_price 时，期权头寸的 cost 由 Black-Scholes 自动计算：
    - 新增期权头寸、加载模板、修改参数、开启自动定价时全部重算
    - 修改期权 strike 时重算该头寸
    """

    def __init__(
        self,
        settings: ValuationSettings | None = None,
        auto_price: bool = False,
        config: PayoffConfig | None = None,
    ) -> None:
        """初始化会话

        Args:
            settings: 估值参数，默认取配置中的值
            auto_price: 是否自动计算期权费
            config: 配置，默认使用 PayoffConfig()
        """
        self.config = config or PayoffConfig()
        self._settings = settings or self.config.settings
        self._auto_price = auto_price
        self._positions: list[Position] = []
        self._next_id = 1

    @classmethod
    def from_config(cls, config: PayoffConfig) -> "PayoffSession":
        """按配置创建会话"""
        return cls(settings=config.settings, auto_price=config.auto_price, config=config)

    @classmethod
    def from_portfolio_file(
        cls,
        path: str | Path,
        config: PayoffConfig | None = None,
        auto_price: bool | None = None,
        settings_overrides: dict[str, Any] | None = None,
    ) -> "PayoffSession":
        """从组合 YAML 文件创建会话

        文件结构:
        ```yaml
        settings: {spot_price: 100, volatility: 0.25}   # 可选，覆盖配置
        auto_price: true                                 # 可选
        positions:
          - {kind: long_call, strike: 100, cost: 5}
          - {kind: long_risk_free, principal: 95}
        ```

        估值参数与自动定价开关在加载头寸之前确定，头寸只按最终参数定价一次。

        Args:
            path: 组合文件路径
            config: 配置，默认 PayoffConfig.load()
            auto_price: 自动定价开关，优先于文件与配置 (None 表示不覆盖)
            settings_overrides: 估值参数覆盖，优先于文件与配置

        """
        config = config or PayoffConfig.load()
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        merged = merge_overrides(config.settings.to_dict(), data.get("settings"))
        settings = ValuationSettings.from_dict(merge_overrides(merged, settings_overrides))
        if auto_price is None:
            auto_price = bool(data.get("auto_price", config.auto_price))

        session = cls(settings=settings, auto_price=auto_price, config=config)
        session.load_positions(data.get("positions") or [])
        logger.info(f"Loaded portfolio {path}: {len(session.positions)} positions")
        return session

    # ------------------------------------------------------------------
    # 状态访问
    # ------------------------------------------------------------------

    @property
    def positions(self) -> list[Position]:
        """当前头寸（按加入顺序）"""
        return list(self._positions)

    @property
    def settings(self) -> ValuationSettings:
        return self._settings

    @property
    def auto_price(self) -> bool:
        return self._auto_price

    def get_position(self, position_id: int) -> Position | None:
        for position in self._positions:
            if position.id == position_id:
                return position
        return None

    def _allocate_id(self) -> int:
        position_id = self._next_id
        self._next_id += 1
        return position_id

    # ------------------------------------------------------------------
    # 头寸修改
    # ------------------------------------------------------------------

    def add_position(
        self,
        kind: InstrumentKind | str,
        strike: float | None = None,
        cost: float | None = None,
        principal: float | None = None,
        quantity: int | None = None,
    ) -> Position:
        """新增头寸

        未指定的字段取配置默认值：strike 为当前标的价格（无风险头寸为 0，
        避免影响价格区间推断），cost 为 5，principal 为 100，quantity 为 1。

        Returns:
            新头寸
        """
        kind = InstrumentKind(kind)
        defaults = self.config.position_defaults

        if strike is None:
            if kind.is_risk_free:
                strike = 0.0
            elif defaults.strike is not None:
                strike = defaults.strike
            else:
                strike = self._settings.spot_price

        position = Position(
            id=self._allocate_id(),
            kind=kind,
            strike=strike,
            cost=defaults.cost if cost is None else cost,
            principal=defaults.principal if principal is None else principal,
            quantity=defaults.quantity if quantity is None else quantity,
        )

        if self._auto_price:
            reprice_position(position, self._settings)

        self._positions.append(position)
        logger.debug(f"Added position #{position.id}: {position.label} K={position.strike}")
        return position

    def load_positions(self, records: Iterable[dict[str, Any]]) -> list[Position]:
        """追加一组头寸记录（principal / quantity 缺省取配置默认值），分配新 id"""
        added = []
        for record in records:
            data = self.config.position_defaults.fill_record(record)
            position = Position.from_dict(data, position_id=self._allocate_id())
            if self._auto_price:
                reprice_position(position, self._settings)
            self._positions.append(position)
            added.append(position)
        return added

    def remove_position(self, position_id: int) -> bool:
        """按 id 删除头寸

        Returns:
            是否删除了头寸
        """
        before = len(self._positions)
        self._positions = [p for p in self._positions if p.id != position_id]
        removed = len(self._positions) < before
        if removed:
            logger.debug(f"Removed position #{position_id}")
        return removed

    def update_position(self, position_id: int, field_name: str, value: Any) -> Position | None:
        """修改头寸字段

        数值按 float 解析，无法解析时为 0；quantity 至少为 1。
        自动定价开启时，修改期权 strike 会重算 cost。

        Args:
            position_id: 头寸 id
            field_name: strike / cost / principal / quantity
            value: 新值

        Returns:
            修改后的头寸；id 不存在时返回 None

        Raises:
            ValueError: 字段不可编辑
        """
        position = self.get_position(position_id)
        if position is None:
            logger.debug(f"Ignoring update for unknown position #{position_id}")
            return None

        position.set_field(field_name, value)

        if self._auto_price and field_name == "strike":
            reprice_position(position, self._settings)

        return position

    def clear(self) -> None:
        """清空所有头寸"""
        self._positions = []
        logger.debug("Cleared all positions")

    def load_strategy(self, template: StrategyTemplate) -> list[Position]:
        """用预设模板替换当前头寸"""
        self._positions = template.to_positions(
            start_id=self._next_id, defaults=self.config.position_defaults
        )
        self._next_id += len(self._positions)

        if self._auto_price:
            reprice_options(self._positions, self._settings)

        logger.info(f"Loaded strategy '{template.name}' ({len(self._positions)} positions)")
        return self.positions

    # ------------------------------------------------------------------
    # 估值参数
    # ------------------------------------------------------------------

    def replace_settings(self, settings: ValuationSettings) -> None:
        """整体替换估值参数"""
        self._settings = settings
        if self._auto_price:
            reprice_options(self._positions, self._settings)

    def update_settings(self, **changes: float) -> ValuationSettings:
        """修改部分估值参数"""
        self.replace_settings(self._settings.with_updates(**changes))
        return self._settings

    def set_auto_price(self, enabled: bool) -> None:
        """开关 Black-Scholes 自动定价，开启时立即重算所有期权"""
        self._auto_price = enabled
        if enabled:
            count = reprice_options(self._positions, self._settings)
            logger.debug(f"Auto pricing enabled, repriced {count} options")

    # ------------------------------------------------------------------
    # 估值
    # ------------------------------------------------------------------

    def price_range(self) -> PriceRange:
        return calc_default_range(self._positions)

    def total_payoff(
        self,
        underlying_price: float,
        variant: PayoffVariant = PayoffVariant.FULL,
    ) -> float:
        """单一价格下的组合收益"""
        return calc_total_payoff(self._positions, underlying_price, self._settings, variant)

    def evaluate(self, variant: PayoffVariant = PayoffVariant.FULL) -> PayoffView:
        """重新计算完整收益视图

        Args:
            variant: 曲线口径。拐点、盈亏平衡点与 P&L 表始终含期权费。

        Returns:
            PayoffView；无头寸时曲线、拐点、表格为空
        """
        price_range = self.price_range()
        view = PayoffView(
            settings=self._settings,
            variant=variant,
            price_range=price_range,
            risk_free=calc_risk_free_summary(self._positions, self._settings),
        )
        if not self._positions:
            return view

        display = self.config.display
        view.curve = generate_payoff_series(
            self._positions, price_range, self._settings, display.num_points, variant
        )
        view.kinks = find_kink_points(self._positions, price_range, self._settings)
        if variant is PayoffVariant.FULL:
            full_curve = view.curve
        else:
            full_curve = generate_payoff_series(
                self._positions, price_range, self._settings, display.num_points
            )
        view.breakevens = find_breakeven_prices(full_curve)
        view.pnl_table = generate_pnl_table(
            self._positions, price_range, self._settings, display.table_rows
        )

        logger.debug(
            f"Evaluated {len(self._positions)} positions over "
            f"[{price_range.min:.2f}, {price_range.max:.2f}]: "
            f"{len(view.kinks)} kinks, {len(view.breakevens)} breakevens"
        )
        return view
