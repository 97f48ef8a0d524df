"""
Fund Distribution Calculator

Splits a priced item's base fee across the funds configured for its type.
The additional (overage) amount is not split: it goes whole to the catch-all fund.
"""

from decimal import Decimal

from ..errors import MissingFeeScheduleEntry
from ..models import FeeSchedule, FundAllocation, ItemType, PricedItem
from .fees import quantize_money

# Fund that receives overage amounts such as per-page charges
OTHER_FUND = "Other"


class ItemDistributionCalculator:
    """Computes the fund allocations contributed by one priced item."""

    def distribute_item(self, item: PricedItem, schedule: FeeSchedule) -> list[FundAllocation]:
        """
        Allocate an item's fee to funds.

        Real Property Recording splits price minus the additional amount;
        Birth Certificate splits its flat price. Each share is rounded to cents.
        A non-zero additional amount is appended unrounded as the "Other" fund.
        """
        allocations = []
        item_type = ItemType.parse(item.type)
        additional = item.additional_price_amount

        if item_type is not None:
            fee = item.price
            if item_type is ItemType.REAL_PROPERTY_RECORDING and additional:
                fee -= additional
            allocations.extend(self._split(item.type, fee, schedule))

        if additional:
            allocations.append(FundAllocation(name=OTHER_FUND, amount=additional))

        return allocations

    def _split(self, item_type: str, fee: Decimal, schedule: FeeSchedule) -> list[FundAllocation]:
        item_schedule = schedule.get(item_type)
        if item_schedule is None:
            raise MissingFeeScheduleEntry(item_type)

        return [
            FundAllocation(name=share.name, amount=quantize_money(fee * share.percentage))
            for share in item_schedule.distributions
        ]
