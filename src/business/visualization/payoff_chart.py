"""
Payoff Chart - 收益图可视化

使用 Plotly 生成交互式收益图:
- 组合收益曲线 (填充)
- 盈亏平衡线 (y = 0, 虚线)
- 拐点标记 (期权行权价 / 线性头寸参考价)
- 独立 HTML 导出 / 图片导出

Usage:
    from src.business.visualization import PayoffChart

    chart = PayoffChart(session.evaluate())
    chart.save_html("reports/payoff.html")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import plotly.graph_objects as go

from src.engine.models import PayoffPoint, PayoffVariant

# 平坦曲线判定阈值与上下留白
FLAT_RANGE_THRESHOLD = 0.01
FLAT_PADDING = 5.0
PADDING_RATIO = 0.15


@dataclass(frozen=True)
class YBounds:
    """纵轴显示范围"""

    min: float
    max: float


def calc_y_bounds(
    curve: Sequence[PayoffPoint],
    kinks: Sequence[PayoffPoint] = (),
) -> YBounds | None:
    """计算纵轴显示范围

    - 包含所有曲线点、拐点以及 0 (盈亏平衡线始终可见)
    - 平坦曲线 (振幅 < 0.01): 以曲线值为中心 ±5，并至少覆盖 [-5, 5]
    - 其他: 上下各留 15% 振幅，若区间不含 0 则扩展到 ∓padding

    Args:
        curve: 收益曲线
        kinks: 拐点

    Returns:
        YBounds，曲线为空时返回 None
    """
    if not curve:
        return None

    values = [p.y for p in curve] + [k.y for k in kinks] + [0.0]
    y_min = min(values)
    y_max = max(values)
    y_range = y_max - y_min

    if y_range < FLAT_RANGE_THRESHOLD:
        flat_value = curve[0].y
        return YBounds(
            min=min(flat_value - FLAT_PADDING, -FLAT_PADDING),
            max=max(flat_value + FLAT_PADDING, FLAT_PADDING),
        )

    padding = y_range * PADDING_RATIO
    lower = y_min - padding
    upper = y_max + padding
    if lower > 0:
        lower = -padding
    if upper < 0:
        upper = padding
    return YBounds(min=lower, max=upper)


class PayoffChart:
    """收益图

    Usage:
        chart = PayoffChart(view)
        fig = chart.create_figure()
    """

    # 配色方案
    COLORS = {
        "curve": "#00ff00",
        "fill": "rgba(0, 255, 0, 0.05)",
        "breakeven": "#ff9900",
        "kink": "#ff9900",
        "background": "#000000",
        "grid": "#333333",
        "text": "#888888",
    }

    def __init__(self, view) -> None:
        """初始化收益图

        Args:
            view: PayoffSession.evaluate() 返回的 PayoffView
        """
        self._view = view

    @property
    def title(self) -> str:
        if self._view.variant is PayoffVariant.PAYOFF_ONLY:
            return "PAYOFF DIAGRAM (EXCL. PREMIUM)"
        return "PAYOFF DIAGRAM"

    def create_figure(self) -> go.Figure:
        """创建收益图

        Returns:
            Plotly Figure；无头寸时返回空图
        """
        view = self._view
        fig = go.Figure()
        self._apply_layout(fig)

        if view.is_empty:
            return fig

        fig.add_trace(
            go.Scatter(
                x=[p.x for p in view.curve],
                y=[p.y for p in view.curve],
                mode="lines",
                name="Total Payoff",
                line=dict(color=self.COLORS["curve"], width=2),
                fill="tozeroy",
                fillcolor=self.COLORS["fill"],
                hovertemplate="PRICE: $%{x:.2f}<br>P&L: %{y:+.2f}<extra></extra>",
            )
        )

        fig.add_trace(
            go.Scatter(
                x=[view.price_range.min, view.price_range.max],
                y=[0.0, 0.0],
                mode="lines",
                name="Break-even",
                line=dict(color=self.COLORS["breakeven"], width=1, dash="dash"),
                hoverinfo="skip",
            )
        )

        if view.kinks:
            fig.add_trace(
                go.Scatter(
                    x=[k.x for k in view.kinks],
                    y=[k.y for k in view.kinks],
                    mode="markers",
                    name="Kink Points",
                    showlegend=False,
                    marker=dict(
                        size=10,
                        color=self.COLORS["background"],
                        line=dict(color=self.COLORS["kink"], width=2),
                    ),
                    hovertemplate="KINK @ $%{x:.2f}<extra></extra>",
                )
            )

        bounds = calc_y_bounds(view.curve, view.kinks)
        if bounds is not None:
            fig.update_yaxes(range=[bounds.min, bounds.max])

        return fig

    def _apply_layout(self, fig: go.Figure) -> None:
        axis_style = dict(
            gridcolor=self.COLORS["grid"],
            color=self.COLORS["text"],
            tickprefix="$",
            tickformat=".0f",
        )
        fig.update_layout(
            title=dict(text=self.title, font=dict(color=self.COLORS["breakeven"])),
            template="plotly_dark",
            plot_bgcolor=self.COLORS["background"],
            paper_bgcolor=self.COLORS["background"],
            font=dict(family="Consolas, Monaco, monospace", size=11),
            hovermode="x unified",
            legend=dict(orientation="h", yanchor="bottom", y=1.02),
            xaxis=dict(title="UNDERLYING PRICE", **axis_style),
            yaxis=dict(title="PROFIT / LOSS", **axis_style),
        )

    def save_html(self, path: str | Path) -> Path:
        """导出独立 HTML 文件"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.create_figure().write_html(str(path), include_plotlyjs="cdn")
        return path

    def save_image(self, path: str | Path) -> Path:
        """导出图片 (png/svg/pdf，需要 kaleido)"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.create_figure().write_image(str(path))
        return path
