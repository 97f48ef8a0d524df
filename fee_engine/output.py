"""
Output Builder

Constructs JSON-ready API responses from engine results.
"""

from decimal import Decimal
from typing import Sequence

from .models import BatchResult, FundAllocation, OrderFees, PricedItem


def to_number(value: Decimal) -> int | float:
    """Convert a Decimal to a JSON number, keeping whole amounts as integers."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


class OutputBuilder:
    """Builds the response bodies for fee and distribution requests."""

    def build_fees(self, orders: Sequence[OrderFees]) -> list:
        return [self._build_order_fees(order) for order in orders]

    def build_distributions(self, result: BatchResult) -> dict:
        return {
            "orders": [
                {
                    "id": order.id,
                    "distributions": self._build_allocations(order.distributions),
                }
                for order in result.orders
            ],
            "total_distributions": self._build_allocations(result.total_distributions),
        }

    def _build_order_fees(self, order: OrderFees) -> dict:
        return {
            "id": order.id,
            "order_items": [self._build_item(item) for item in order.order_items],
            "total_fees": to_number(order.total_fees),
            "additionalPriceAmount": to_number(order.additional_price_amount),
        }

    def _build_item(self, item: PricedItem) -> dict:
        return {
            "type": item.type,
            "price": to_number(item.price),
            "additionalPriceAmount": to_number(item.additional_price_amount),
        }

    def _build_allocations(self, allocations: Sequence[FundAllocation]) -> list:
        return [{"name": a.name, "amount": to_number(a.amount)} for a in allocations]
