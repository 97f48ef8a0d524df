"""
Fee Processor - Main Orchestrator

Coordinates order pricing and fund distribution through discrete, testable steps.
"""

import logging
from typing import Any, Dict, List, Sequence

from .calculators import (
    ItemDistributionCalculator,
    OrderFeeAggregator,
    reconcile_distributions,
)
from .errors import InvalidOrder
from .models import BatchResult, FeeSchedule, Order, OrderDistribution, OrderFees
from .output import OutputBuilder
from .validators import OrderValidator

logger = logging.getLogger(__name__)


def parse_orders(data: Any) -> list[Order]:
    """Parse a raw JSON batch of orders."""
    if not isinstance(data, list):
        raise InvalidOrder(f"Order batch must be a list of orders, got: {type(data).__name__}")
    return [Order.from_dict(order) for order in data]


class FeeProcessor:
    """
    Main orchestrator for a batch of orders.

    Pipeline:
    1. Validate the whole batch against the schedule
    2. Price every order (items, total fees, additional amounts)
    3. Distribute every priced item to funds
    4. Reconcile item allocations per order
    5. Reconcile order allocations across the batch

    The schedule is read-only, so one processor can serve concurrent callers.
    """

    def __init__(self, schedule: FeeSchedule):
        self.schedule = schedule
        self.validator = OrderValidator()
        self.fee_aggregator = OrderFeeAggregator()
        self.distribution_calculator = ItemDistributionCalculator()
        self.output_builder = OutputBuilder()

    def compute_fees(self, orders: Sequence[Order]) -> List[OrderFees]:
        """
        Price every order of the batch.

        Raises a FeeEngineError for the whole batch if any item cannot be priced.
        """
        self.validator.validate(orders, self.schedule)

        results = []
        for order in orders:
            priced = self.fee_aggregator.price_order(order.order_items, self.schedule)
            results.append(
                OrderFees(
                    id=order.order_number,
                    order_items=priced.order_items,
                    total_fees=priced.total_fees,
                    additional_price_amount=priced.additional_price_amount,
                )
            )
            logger.debug(f"Order {order.order_number}: {len(priced.order_items)} item(s), total {priced.total_fees}")

        return results

    def distribute_orders(self, order_fees: Sequence[OrderFees]) -> BatchResult:
        """Allocate priced orders to funds, per order and for the batch."""
        orders = []
        for fees in order_fees:
            per_item = [
                self.distribution_calculator.distribute_item(item, self.schedule)
                for item in fees.order_items
            ]
            orders.append(
                OrderDistribution(id=fees.id, distributions=tuple(reconcile_distributions(per_item)))
            )

        total = reconcile_distributions(order.distributions for order in orders)
        return BatchResult(orders=tuple(orders), total_distributions=tuple(total))

    def compute_distributions(self, orders: Sequence[Order]) -> BatchResult:
        """Price the batch, then distribute it."""
        return self.distribute_orders(self.compute_fees(orders))

    def compute_fees_from_dict(self, data: Any) -> List[Dict[str, Any]]:
        """
        Price a batch from raw JSON input.

        Convenience method for API usage.
        """
        orders = parse_orders(data)
        logger.info(f"Pricing {len(orders)} order(s)")
        return self.output_builder.build_fees(self.compute_fees(orders))

    def compute_distributions_from_dict(self, data: Any) -> Dict[str, Any]:
        """
        Distribute a batch from raw JSON input.

        Convenience method for API usage.
        """
        orders = parse_orders(data)
        logger.info(f"Distributing {len(orders)} order(s)")
        return self.output_builder.build_distributions(self.compute_distributions(orders))
