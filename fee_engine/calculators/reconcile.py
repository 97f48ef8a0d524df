"""
Distribution Reconciler

Merges lists of fund allocations into one list, summing amounts per fund name.
"""

from decimal import Decimal
from itertools import chain
from typing import Iterable

from ..models import FundAllocation


def reconcile_distributions(allocation_lists: Iterable[Iterable[FundAllocation]]) -> list[FundAllocation]:
    """
    Flatten and group-sum allocations by fund name.

    Funds keep the order in which they were first seen. No lists gives an empty result.
    """
    totals: dict[str, Decimal] = {}
    for allocation in chain.from_iterable(allocation_lists):
        totals[allocation.name] = totals.get(allocation.name, Decimal('0')) + allocation.amount

    return [FundAllocation(name=name, amount=amount) for name, amount in totals.items()]
