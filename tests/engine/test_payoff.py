"""Tests for the payoff engine: formulas, aggregation, range, sampling, kinks."""

import pytest

from src.engine.models import (
    InstrumentKind,
    PayoffPoint,
    PayoffVariant,
    Position,
    PriceRange,
    ValuationSettings,
)
from src.engine.payoff import (
    DEFAULT_PRICE_RANGE,
    PAYOFF_FUNCTIONS,
    calc_default_range,
    calc_position_payoff,
    calc_sample_prices,
    calc_total_payoff,
    calc_total_payoff_only,
    find_breakeven_prices,
    find_kink_points,
    generate_payoff_series,
    generate_pnl_table,
    get_payoff_function,
)


@pytest.fixture
def settings():
    return ValuationSettings()


@pytest.fixture
def long_call():
    return Position(id=1, kind=InstrumentKind.LONG_CALL, strike=100, cost=5)


@pytest.fixture
def straddle():
    return [
        Position(id=1, kind=InstrumentKind.LONG_CALL, strike=100, cost=5),
        Position(id=2, kind=InstrumentKind.LONG_PUT, strike=100, cost=5),
    ]


class TestPayoffFunctions:
    """Tests for per-instrument payoff formulas."""

    def test_every_kind_has_a_formula(self):
        assert set(PAYOFF_FUNCTIONS) == set(InstrumentKind)

    @pytest.mark.parametrize(
        "kind,S,expected_full,expected_payoff_only",
        [
            ("long_underlying", 120, 20, 20),
            ("short_underlying", 120, -20, -20),
            ("long_forward", 80, -20, -20),
            ("short_forward", 80, 20, 20),
            ("long_call", 120, 15, 20),
            ("long_call", 80, -5, 0),
            ("short_call", 120, -15, -20),
            ("short_call", 80, 5, 0),
            ("long_put", 80, 15, 20),
            ("long_put", 120, -5, 0),
            ("short_put", 80, -15, -20),
            ("short_put", 120, 5, 0),
        ],
    )
    def test_formulas(self, settings, kind, S, expected_full, expected_payoff_only):
        pos = Position(id=1, kind=kind, strike=100, cost=5)
        assert calc_position_payoff(pos, S, settings, PayoffVariant.FULL) == expected_full
        assert calc_position_payoff(pos, S, settings, PayoffVariant.PAYOFF_ONLY) == expected_payoff_only

    @pytest.mark.parametrize("S", [0.0, 50.0, 100.0, 1000.0])
    def test_risk_free_is_flat(self, settings, S):
        lend = Position(id=1, kind="long_risk_free", principal=100, strike=0)
        borrow = Position(id=2, kind="short_risk_free", principal=100, strike=0)
        for variant in PayoffVariant:
            assert calc_position_payoff(lend, S, settings, variant) == 100
            assert calc_position_payoff(borrow, S, settings, variant) == -100

    def test_linear_kinds_ignore_cost(self, settings):
        pos = Position(id=1, kind="long_underlying", strike=100, cost=100)
        assert calc_position_payoff(pos, 110, settings) == 10

    def test_unknown_kind_lookup_raises(self):
        with pytest.raises(KeyError):
            get_payoff_function("long_swaption")


class TestTotalPayoff:
    """Tests for portfolio aggregation."""

    def test_single_long_call(self, settings, long_call):
        assert calc_total_payoff([long_call], 120, settings) == 15
        assert calc_total_payoff([long_call], 80, settings) == -5
        assert calc_total_payoff([long_call], 100, settings) == -5

    def test_straddle(self, settings, straddle):
        assert calc_total_payoff(straddle, 100, settings) == -10
        assert calc_total_payoff(straddle, 90, settings) == 0
        assert calc_total_payoff(straddle, 110, settings) == 0

    def test_empty_portfolio(self, settings):
        assert calc_total_payoff([], 100, settings) == 0

    def test_quantity_multiplies(self, settings):
        positions = [
            Position(id=1, kind="long_call", strike=100, cost=5, quantity=3),
            Position(id=2, kind="long_risk_free", principal=100, quantity=2),
        ]
        # 3 × (20 - 5) + 2 × 100
        assert calc_total_payoff(positions, 120, settings) == 245

    def test_payoff_only_excludes_premium(self, settings, straddle):
        assert calc_total_payoff_only(straddle, 100, settings) == 0
        assert calc_total_payoff(straddle, 130, settings, PayoffVariant.PAYOFF_ONLY) == 30

    def test_butterfly(self, settings):
        positions = [
            Position(id=1, kind="long_call", strike=90, cost=12),
            Position(id=2, kind="short_call", strike=100, cost=6),
            Position(id=3, kind="short_call", strike=100, cost=6),
            Position(id=4, kind="long_call", strike=110, cost=3),
        ]
        # Net debit 3: max profit at the body, max loss outside the wings
        assert calc_total_payoff(positions, 100, settings) == pytest.approx(7)
        assert calc_total_payoff(positions, 80, settings) == pytest.approx(-3)
        assert calc_total_payoff(positions, 130, settings) == pytest.approx(-3)

    def test_idempotent(self, settings, straddle):
        first = calc_total_payoff(straddle, 97.5, settings)
        second = calc_total_payoff(straddle, 97.5, settings)
        assert first == second


class TestDefaultRange:
    """Tests for default price domain inference."""

    def test_no_positions(self):
        assert calc_default_range([]) == PriceRange(min=0, max=200)
        assert calc_default_range([]) == DEFAULT_PRICE_RANGE

    def test_no_positive_strikes(self):
        positions = [Position(id=1, kind="long_risk_free", principal=100)]
        assert calc_default_range(positions) == PriceRange(min=0, max=200)

    def test_single_strike_pads_by_fifty(self):
        positions = [Position(id=1, kind="long_call", strike=100, cost=5)]
        assert calc_default_range(positions) == PriceRange(min=50, max=150)

    def test_spread_pads_by_half(self):
        positions = [
            Position(id=1, kind="long_put", strike=90),
            Position(id=2, kind="long_call", strike=110),
        ]
        assert calc_default_range(positions) == PriceRange(min=80, max=120)

    def test_min_clamped_at_zero(self):
        positions = [
            Position(id=1, kind="long_put", strike=10),
            Position(id=2, kind="long_call", strike=100),
        ]
        assert calc_default_range(positions) == PriceRange(min=0, max=145)

    def test_filter_is_by_value_not_kind(self):
        positions = [
            Position(id=1, kind="long_call", strike=100),
            Position(id=2, kind="long_risk_free", strike=300, principal=100),
        ]
        # spread 200 → padding 100
        assert calc_default_range(positions) == PriceRange(min=0, max=400)


class TestPayoffSeries:
    """Tests for curve sampling and the P&L table."""

    def test_length_and_endpoints(self, settings, straddle):
        price_range = PriceRange(min=50, max=150)
        points = generate_payoff_series(straddle, price_range, settings, num_points=100)
        assert len(points) == 100
        assert points[0].x == 50
        assert points[-1].x == pytest.approx(150)

    def test_equally_spaced(self):
        prices = calc_sample_prices(PriceRange(min=0, max=10), 6)
        assert prices == pytest.approx([0, 2, 4, 6, 8, 10])

    def test_single_point(self, settings, straddle):
        points = generate_payoff_series(straddle, PriceRange(min=60, max=140), settings, num_points=1)
        assert points == [PayoffPoint(x=60, y=30)]

    def test_zero_points(self, settings, straddle):
        assert generate_payoff_series(straddle, PriceRange(min=60, max=140), settings, num_points=0) == []

    def test_payoff_only_variant(self, settings, straddle):
        price_range = PriceRange(min=100, max=100)
        full = generate_payoff_series(straddle, price_range, settings, 2)
        payoff_only = generate_payoff_series(straddle, price_range, settings, 2, PayoffVariant.PAYOFF_ONLY)
        assert [p.y for p in full] == [-10, -10]
        assert [p.y for p in payoff_only] == [0, 0]

    def test_deterministic(self, settings, straddle):
        price_range = calc_default_range(straddle)
        assert generate_payoff_series(straddle, price_range, settings) == generate_payoff_series(
            straddle, price_range, settings
        )

    def test_pnl_table(self, settings, straddle):
        rows = generate_pnl_table(straddle, PriceRange(min=50, max=150), settings)
        assert len(rows) == 11
        assert [row.x for row in rows] == pytest.approx([50 + 10 * i for i in range(11)])
        assert rows[0].y == pytest.approx(40)
        assert rows[5].y == pytest.approx(-10)


class TestKinkPoints:
    """Tests for kink detection."""

    def test_two_calls(self, settings):
        positions = [
            Position(id=1, kind="long_call", strike=90, cost=5),
            Position(id=2, kind="long_call", strike=100, cost=5),
        ]
        kinks = find_kink_points(positions, PriceRange(min=0, max=200), settings)
        assert kinks == [PayoffPoint(x=90, y=-10), PayoffPoint(x=100, y=0)]

    def test_shared_strike_deduplicated(self, settings, straddle):
        kinks = find_kink_points(straddle, PriceRange(min=0, max=200), settings)
        assert kinks == [PayoffPoint(x=100, y=-10)]

    def test_out_of_range_filtered(self, settings):
        positions = [
            Position(id=1, kind="long_call", strike=90, cost=5),
            Position(id=2, kind="long_call", strike=250, cost=5),
        ]
        kinks = find_kink_points(positions, PriceRange(min=50, max=200), settings)
        assert [k.x for k in kinks] == [90]

    def test_risk_free_excluded_linear_included(self, settings):
        positions = [
            Position(id=1, kind="long_risk_free", strike=120, principal=100),
            Position(id=2, kind="long_underlying", strike=100),
        ]
        kinks = find_kink_points(positions, PriceRange(min=0, max=200), settings)
        # Full payoff at 100: 100 (lending) + 0 (stock)
        assert kinks == [PayoffPoint(x=100, y=100)]

    def test_ascending_order(self, settings):
        positions = [
            Position(id=1, kind="short_put", strike=110, cost=1),
            Position(id=2, kind="long_call", strike=95, cost=1),
            Position(id=3, kind="long_put", strike=100, cost=1),
        ]
        kinks = find_kink_points(positions, PriceRange(min=0, max=200), settings)
        assert [k.x for k in kinks] == [95, 100, 110]

    def test_kinks_use_full_payoff(self, settings, long_call):
        kinks = find_kink_points([long_call], PriceRange(min=0, max=200), settings)
        assert kinks[0].y == -5

    def test_strikes_on_range_bounds_included(self, settings):
        positions = [
            Position(id=1, kind="long_call", strike=50, cost=5),
            Position(id=2, kind="long_put", strike=150, cost=5),
        ]
        kinks = find_kink_points(positions, PriceRange(min=50, max=150), settings)
        assert [k.x for k in kinks] == [50, 150]

    def test_repeated_calls_return_same_points(self, settings, straddle):
        price_range = PriceRange(min=50, max=150)
        first = find_kink_points(straddle, price_range, settings)
        second = find_kink_points(straddle, price_range, settings)
        assert first == second
        assert straddle[0].cost == 5


class TestBreakevens:
    """Tests for zero-crossing detection."""

    def test_straddle_breakevens(self, settings, straddle):
        points = generate_payoff_series(straddle, calc_default_range(straddle), settings)
        assert find_breakeven_prices(points) == pytest.approx([90, 110], abs=1e-6)

    def test_exact_zero_sample(self):
        points = [PayoffPoint(x=0, y=-1), PayoffPoint(x=1, y=0), PayoffPoint(x=2, y=1)]
        assert find_breakeven_prices(points) == [1.0]

    def test_no_crossing(self):
        points = [PayoffPoint(x=0, y=1), PayoffPoint(x=1, y=2)]
        assert find_breakeven_prices(points) == []

    def test_empty(self):
        assert find_breakeven_prices([]) == []

    def test_flat_zero_segment_reports_endpoints(self):
        points = [PayoffPoint(x=float(x), y=y) for x, y in enumerate([-1, 0, 0, 0, 1])]
        assert find_breakeven_prices(points) == [1.0, 3.0]

    def test_zero_premium_call_is_not_flooded(self, settings):
        positions = [Position(id=1, kind="long_call", strike=100, cost=0)]
        points = generate_payoff_series(positions, PriceRange(min=50, max=150), settings)
        breakevens = find_breakeven_prices(points)
        # Flat at zero from 50 up to the last sample below the strike
        assert len(breakevens) == 2
        assert breakevens[0] == 50.0
        assert breakevens[1] == pytest.approx(50 + 49 * 100 / 99)

    def test_zero_run_and_crossing(self):
        points = [PayoffPoint(x=float(x), y=y) for x, y in enumerate([0, 0, 2, -2])]
        assert find_breakeven_prices(points) == [0.0, 1.0, 2.5]
