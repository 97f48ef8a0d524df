"""
Fee Calculators for the Fee Distribution Engine

Prices single order items and aggregates them into order totals.
All use Decimal for precision with ROUND_HALF_UP rounding.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ..errors import MissingFeeScheduleEntry, UnrecognizedItemType
from ..models import (
    FLAT_FEE,
    PER_PAGE_FEE,
    FeeSchedule,
    ItemType,
    ItemTypeSchedule,
    OrderItem,
    PricedItem,
)


def quantize_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half up."""
    return value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)


def _require_schedule(item_type: str, schedule: FeeSchedule) -> ItemTypeSchedule:
    item_schedule = schedule.get(item_type)
    if item_schedule is None:
        raise MissingFeeScheduleEntry(item_type)
    return item_schedule


def _require_fee(item_type: str, item_schedule: ItemTypeSchedule, fee_name: str) -> Decimal:
    amount = item_schedule.fee(fee_name)
    if amount is None:
        raise MissingFeeScheduleEntry(item_type, fee_name)
    return amount


class ItemFeeCalculator:
    """Calculates the fee of a single order item."""

    def price_item(self, item: OrderItem, schedule: FeeSchedule) -> PricedItem:
        """Price an item according to the rules of its type."""
        item_type = ItemType.parse(item.type)
        if item_type is None:
            raise UnrecognizedItemType(item.type)

        item_schedule = _require_schedule(item.type, schedule)

        if item_type is ItemType.REAL_PROPERTY_RECORDING:
            return self._price_recording(item, item_schedule)
        return self._price_certificate(item, item_schedule)

    def _price_recording(self, item: OrderItem, item_schedule: ItemTypeSchedule) -> PricedItem:
        """
        Flat fee for the first page, per-page fee for every page after it.

        The per-page portion is reported as the additional amount.
        """
        flat = _require_fee(item.type, item_schedule, FLAT_FEE)

        if item.pages is not None and item.pages > 1:
            per_page = _require_fee(item.type, item_schedule, PER_PAGE_FEE)
            additional = (item.pages - 1) * per_page
            return PricedItem(type=item.type, price=flat + additional, additional_price_amount=additional)

        return PricedItem(type=item.type, price=flat)

    def _price_certificate(self, item: OrderItem, item_schedule: ItemTypeSchedule) -> PricedItem:
        """Certificates cost the flat fee."""
        return PricedItem(type=item.type, price=_require_fee(item.type, item_schedule, FLAT_FEE))


@dataclass(frozen=True)
class PricedOrder:
    """Priced items of one order and their sums."""

    order_items: tuple[PricedItem, ...]
    total_fees: Decimal
    additional_price_amount: Decimal


class OrderFeeAggregator:
    """Prices every item of an order and totals the results."""

    def __init__(self, item_calculator: ItemFeeCalculator | None = None):
        self.item_calculator = item_calculator or ItemFeeCalculator()

    def price_order(self, items: Sequence[OrderItem], schedule: FeeSchedule) -> PricedOrder:
        priced = tuple(self.item_calculator.price_item(item, schedule) for item in items)
        return PricedOrder(
            order_items=priced,
            total_fees=sum((p.price for p in priced), Decimal('0')),
            additional_price_amount=sum((p.additional_price_amount for p in priced), Decimal('0')),
        )
