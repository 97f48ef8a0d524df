"""
Text Reports

Renders fee and distribution results as plain text, one line per item or fund.
"""

from decimal import Decimal
from typing import Sequence

from .models import BatchResult, FundAllocation, OrderFees


def _fmt(value: Decimal) -> str:
    return f"{value:f}"


def _fund_lines(allocations: Sequence[FundAllocation]) -> str:
    return "".join(f"    Fund - {a.name}: {_fmt(a.amount)}\n" for a in allocations)


def format_fees_report(orders: Sequence[OrderFees]) -> str:
    """Order id, one line per priced item, then the order total."""
    lines = []
    for order in orders:
        lines.append(f"Order ID: {order.id}\n")
        for item in order.order_items:
            lines.append(f"    Order item - {item.type}: {_fmt(item.price)}\n")
        lines.append(f"    Order total: {_fmt(order.total_fees)}\n")
    return "".join(lines)


def format_distributions_report(result: BatchResult) -> str:
    """Order id and its funds for every order, then the batch totals."""
    lines = []
    for order in result.orders:
        lines.append(f"Order ID: {order.id}\n")
        lines.append(_fund_lines(order.distributions))
    lines.append("Total distributions:\n")
    lines.append(_fund_lines(result.total_distributions))
    return "".join(lines)
