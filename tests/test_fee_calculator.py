"""
Unit Tests for Fee Calculators

Tests verify item pricing and order totals against known expected values.
"""

from decimal import Decimal

import pytest

from fee_engine.calculators.fees import (
    ItemFeeCalculator,
    OrderFeeAggregator,
    quantize_money,
)
from fee_engine.errors import MissingFeeScheduleEntry, UnrecognizedItemType
from fee_engine.models import OrderItem
from fee_engine.schedule import load_schedule

RECORDING = "Real Property Recording"
CERTIFICATE = "Birth Certificate"


@pytest.fixture
def schedule():
    return load_schedule([
        {
            "order_item_type": RECORDING,
            "fees": [{"type": "flat", "amount": "10.00"}, {"type": "per-page", "amount": "2.00"}],
            "distributions": [{"name": "Fund1", "amount": "5.00"}],
        },
        {
            "order_item_type": CERTIFICATE,
            "fees": [{"type": "flat", "amount": "15.00"}],
            "distributions": [{"name": "State", "amount": "10.00"}, {"name": "County", "amount": "5.00"}],
        },
    ])


class TestQuantizeMoney:
    """Test the money rounding utility."""

    def test_rounds_down_below_half(self):
        assert quantize_money(Decimal("0.004")) == Decimal("0.00")

    def test_rounds_up_at_half(self):
        # 0.005 rounds to 0.01 (ROUND_HALF_UP)
        assert quantize_money(Decimal("0.005")) == Decimal("0.01")

    def test_preserves_exact_cents(self):
        assert quantize_money(Decimal("123.45")) == Decimal("123.45")

    def test_truncates_extra_precision(self):
        assert quantize_money(Decimal("9.99999")) == Decimal("10.00")


class TestRealPropertyRecording:
    """Flat fee for the first page, per-page fee for the rest."""

    @pytest.fixture
    def calculator(self):
        return ItemFeeCalculator()

    def test_single_page_is_flat(self, calculator, schedule):
        result = calculator.price_item(OrderItem(type=RECORDING, pages=1), schedule)
        assert result.price == Decimal("10.00")
        assert result.additional_price_amount == Decimal("0")

    def test_missing_pages_is_flat(self, calculator, schedule):
        result = calculator.price_item(OrderItem(type=RECORDING), schedule)
        assert result.price == Decimal("10.00")
        assert result.additional_price_amount == Decimal("0")

    def test_zero_pages_is_flat(self, calculator, schedule):
        result = calculator.price_item(OrderItem(type=RECORDING, pages=0), schedule)
        assert result.price == Decimal("10.00")

    def test_three_pages(self, calculator, schedule):
        """10.00 + 2 extra pages × 2.00 = 14.00"""
        result = calculator.price_item(OrderItem(type=RECORDING, pages=3), schedule)
        assert result.price == Decimal("14.00")
        assert result.additional_price_amount == Decimal("4.00")

    @pytest.mark.parametrize("pages", [2, 5, 20, 101])
    def test_price_is_flat_plus_extra_pages(self, calculator, schedule, pages):
        result = calculator.price_item(OrderItem(type=RECORDING, pages=pages), schedule)
        assert result.additional_price_amount == (pages - 1) * Decimal("2.00")
        assert result.price == Decimal("10.00") + (pages - 1) * Decimal("2.00")

    def test_type_is_copied(self, calculator, schedule):
        result = calculator.price_item(OrderItem(type=RECORDING, pages=2), schedule)
        assert result.type == RECORDING


class TestBirthCertificate:
    """Certificates cost the flat fee and never have an additional amount."""

    def test_flat_fee(self, schedule):
        result = ItemFeeCalculator().price_item(OrderItem(type=CERTIFICATE), schedule)
        assert result.price == Decimal("15.00")
        assert result.additional_price_amount == Decimal("0")

    def test_pages_are_ignored(self, schedule):
        result = ItemFeeCalculator().price_item(OrderItem(type=CERTIFICATE, pages=4), schedule)
        assert result.price == Decimal("15.00")
        assert result.additional_price_amount == Decimal("0")


class TestUnpriceableItems:
    """Items the engine cannot price raise instead of returning partial results."""

    def test_unrecognized_type(self, schedule):
        with pytest.raises(UnrecognizedItemType, match="Marriage License"):
            ItemFeeCalculator().price_item(OrderItem(type="Marriage License"), schedule)

    def test_recognized_type_missing_from_schedule(self):
        partial = load_schedule([{"order_item_type": RECORDING, "fees": [
            {"type": "flat", "amount": "10"}, {"type": "per-page", "amount": "1"}]}])
        with pytest.raises(MissingFeeScheduleEntry):
            ItemFeeCalculator().price_item(OrderItem(type=CERTIFICATE), partial)


class TestOrderFeeAggregator:
    """Test per-order totals."""

    @pytest.fixture
    def aggregator(self):
        return OrderFeeAggregator()

    def test_totals(self, aggregator, schedule):
        items = [
            OrderItem(type=RECORDING, pages=3),
            OrderItem(type=RECORDING, pages=1),
            OrderItem(type=CERTIFICATE),
        ]
        result = aggregator.price_order(items, schedule)

        assert [i.price for i in result.order_items] == [Decimal("14.00"), Decimal("10.00"), Decimal("15.00")]
        assert result.total_fees == Decimal("39.00")
        assert result.additional_price_amount == Decimal("4.00")

    def test_single_item(self, aggregator, schedule):
        result = aggregator.price_order([OrderItem(type=CERTIFICATE)], schedule)
        assert result.total_fees == Decimal("15.00")
        assert result.additional_price_amount == Decimal("0")

    def test_empty_order_totals_zero(self, aggregator, schedule):
        result = aggregator.price_order([], schedule)
        assert result.order_items == ()
        assert result.total_fees == Decimal("0")
        assert result.additional_price_amount == Decimal("0")
