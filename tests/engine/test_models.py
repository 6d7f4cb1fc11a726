"""Tests for engine layer data models."""

import math

import pytest

from src.engine.models import (
    BSParams,
    InstrumentGroup,
    InstrumentKind,
    PayoffPoint,
    Position,
    PriceRange,
    ValuationSettings,
)


class TestInstrumentKind:
    """Tests for InstrumentKind groups and helpers."""

    def test_groups_partition_all_kinds(self):
        groups = {kind: kind.group for kind in InstrumentKind}
        assert len(groups) == 10
        assert sum(1 for g in groups.values() if g is InstrumentGroup.RISK_FREE) == 2
        assert sum(1 for g in groups.values() if g is InstrumentGroup.LINEAR) == 4
        assert sum(1 for g in groups.values() if g is InstrumentGroup.OPTION) == 4

    def test_option_flags(self):
        assert InstrumentKind.LONG_CALL.is_call
        assert InstrumentKind.SHORT_CALL.is_call
        assert InstrumentKind.LONG_PUT.is_put
        assert not InstrumentKind.LONG_FORWARD.is_option
        assert InstrumentKind.SHORT_RISK_FREE.is_risk_free
        assert InstrumentKind.SHORT_UNDERLYING.is_linear

    def test_is_long(self):
        assert InstrumentKind.LONG_PUT.is_long
        assert not InstrumentKind.SHORT_PUT.is_long

    def test_value_lookup(self):
        assert InstrumentKind("long_forward") is InstrumentKind.LONG_FORWARD
        assert InstrumentKind.LONG_FORWARD.display_name == "Long Forward/Future"


class TestPosition:
    """Tests for Position construction and coercion."""

    def test_basic_creation(self):
        pos = Position(id=1, kind=InstrumentKind.LONG_CALL, strike=100, cost=5)
        assert pos.kind is InstrumentKind.LONG_CALL
        assert pos.strike == 100.0
        assert pos.cost == 5.0
        assert pos.principal == 0.0
        assert pos.quantity == 1

    def test_string_kind_is_coerced(self):
        pos = Position(id=1, kind="short_put")
        assert pos.kind is InstrumentKind.SHORT_PUT

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError):
            Position(id=1, kind="long_variance_swap")

    def test_missing_numbers_default_to_zero(self):
        pos = Position(id=1, kind="long_call", strike=None, cost="abc", principal=math.nan)
        assert pos.strike == 0.0
        assert pos.cost == 0.0
        assert pos.principal == 0.0

    @pytest.mark.parametrize("quantity", [0, -3, None, "x", 0.4])
    def test_invalid_quantity_defaults_to_one(self, quantity):
        assert Position(id=1, kind="long_call", quantity=quantity).quantity == 1

    def test_quantity_kept_when_valid(self):
        assert Position(id=1, kind="long_call", quantity=3).quantity == 3
        assert Position(id=1, kind="long_call", quantity="2").quantity == 2

    def test_from_dict_partial_record(self):
        pos = Position.from_dict({"type": "long_put", "strike": 95, "cost": 4}, position_id=7)
        assert pos.id == 7
        assert pos.kind is InstrumentKind.LONG_PUT
        assert pos.strike == 95.0
        assert pos.quantity == 1

    def test_from_dict_without_kind_raises(self):
        with pytest.raises(ValueError):
            Position.from_dict({"strike": 100})

    def test_set_field(self):
        pos = Position(id=1, kind="long_call", strike=100)
        pos.set_field("strike", "105.5")
        pos.set_field("cost", "")
        pos.set_field("quantity", 0)
        assert pos.strike == 105.5
        assert pos.cost == 0.0
        assert pos.quantity == 1

    def test_set_unknown_field_raises(self):
        pos = Position(id=1, kind="long_call")
        with pytest.raises(ValueError):
            pos.set_field("kind", "short_call")

    def test_label(self):
        assert Position(id=1, kind="long_call").label == "Long Call"
        assert Position(id=1, kind="short_put", quantity=2).label == "2x Short Put"

    def test_to_dict(self):
        data = Position(id=3, kind="long_forward", strike=100).to_dict()
        assert data == {
            "id": 3,
            "kind": "long_forward",
            "strike": 100.0,
            "cost": 0.0,
            "principal": 0.0,
            "quantity": 1,
        }


class TestValuationSettings:
    """Tests for ValuationSettings."""

    def test_defaults(self):
        settings = ValuationSettings()
        assert settings.spot_price == 100.0
        assert settings.risk_free_rate == 0.05
        assert settings.time_to_maturity == 1.0
        assert settings.volatility == 0.20

    def test_from_dict_keeps_missing_defaults(self):
        settings = ValuationSettings.from_dict({"spot_price": 50, "volatility": 0.3})
        assert settings.spot_price == 50.0
        assert settings.volatility == 0.3
        assert settings.risk_free_rate == 0.05

    def test_with_updates_returns_new_instance(self):
        settings = ValuationSettings()
        updated = settings.with_updates(time_to_maturity=0.5)
        assert updated.time_to_maturity == 0.5
        assert settings.time_to_maturity == 1.0

    def test_discount_factor(self):
        assert ValuationSettings().discount_factor == pytest.approx(math.exp(-0.05))


class TestBSParams:
    """Tests for BSParams factories."""

    def test_from_settings(self):
        settings = ValuationSettings(spot_price=110, risk_free_rate=0.03, time_to_maturity=0.5, volatility=0.25)
        params = BSParams.from_settings(settings, strike_price=100, is_call=False)
        assert params.spot_price == 110
        assert params.strike_price == 100
        assert params.risk_free_rate == 0.03
        assert params.time_to_expiry == 0.5
        assert params.volatility == 0.25
        assert params.is_call is False

    def test_for_position_kind(self):
        params = BSParams.for_position_kind(InstrumentKind.SHORT_CALL, 105, ValuationSettings())
        assert params.is_call is True
        params = BSParams.for_position_kind(InstrumentKind.LONG_PUT, 95, ValuationSettings())
        assert params.is_call is False

    def test_for_non_option_kind_raises(self):
        with pytest.raises(ValueError):
            BSParams.for_position_kind(InstrumentKind.LONG_UNDERLYING, 100, ValuationSettings())


class TestResultModels:
    """Tests for PriceRange and PayoffPoint."""

    def test_price_range_contains_inclusive(self):
        price_range = PriceRange(min=50, max=150)
        assert price_range.contains(50)
        assert price_range.contains(150)
        assert not price_range.contains(150.01)
        assert price_range.span == 100

    def test_payoff_point_is_immutable(self):
        point = PayoffPoint(x=1.0, y=2.0)
        with pytest.raises(AttributeError):
            point.x = 3.0
