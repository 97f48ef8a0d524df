"""
Calculators Package

Provides all calculation components for fee and fund distribution processing.
"""

from .distributions import OTHER_FUND, ItemDistributionCalculator
from .fees import ItemFeeCalculator, OrderFeeAggregator, PricedOrder, quantize_money
from .reconcile import reconcile_distributions

__all__ = [
    "ItemFeeCalculator",
    "OrderFeeAggregator",
    "PricedOrder",
    "ItemDistributionCalculator",
    "reconcile_distributions",
    "quantize_money",
    "OTHER_FUND",
]
