"""
Input Validation for the Fee Distribution Engine

Validates schedules at load time and whole order batches before any pricing begins,
so a batch either prices completely or fails with a single FeeEngineError.
"""

from decimal import Decimal
from typing import Sequence

from .errors import (
    DegenerateSchedule,
    InvalidOrder,
    InvalidSchedule,
    MissingFeeScheduleEntry,
    UnrecognizedItemType,
)
from .models import (
    FLAT_FEE,
    MAX_PAGES,
    PER_PAGE_FEE,
    FeeSchedule,
    ItemType,
    Order,
    RawItemTypeSchedule,
)

# Fees each recognized item type must configure
REQUIRED_FEES = {
    ItemType.REAL_PROPERTY_RECORDING: (FLAT_FEE, PER_PAGE_FEE),
    ItemType.BIRTH_CERTIFICATE: (FLAT_FEE,),
}


class ScheduleValidator:
    """Validates a raw fee schedule according to business rules."""

    def validate(self, entries: Sequence[RawItemTypeSchedule]) -> None:
        """
        Run all validations. Raises InvalidSchedule (or a subclass) if any check fails.
        """
        seen = set()
        for entry in entries:
            if entry.order_item_type in seen:
                raise InvalidSchedule(f"Duplicate schedule entry for type: {entry.order_item_type!r}")
            seen.add(entry.order_item_type)
            self._validate_entry(entry)

    def _validate_entry(self, entry: RawItemTypeSchedule) -> None:
        name = entry.order_item_type

        for fee in entry.fees:
            if fee.amount < 0:
                raise InvalidSchedule(f"Fee '{fee.type}' of {name!r} cannot be negative, got: {fee.amount}")

        for dist in entry.distributions:
            if dist.amount < 0:
                raise InvalidSchedule(
                    f"Distribution '{dist.name}' of {name!r} cannot be negative, got: {dist.amount}"
                )

        real_fee = max([Decimal("0")] + [fee.amount for fee in entry.fees])
        if entry.distributions and real_fee == 0:
            raise DegenerateSchedule(
                f"Maximum fee of {name!r} is zero; its distributions cannot be turned into percentages"
            )

        item_type = ItemType.parse(name)
        if item_type is not None:
            fee_names = {fee.type for fee in entry.fees}
            for required in REQUIRED_FEES[item_type]:
                if required not in fee_names:
                    raise MissingFeeScheduleEntry(name, required)


class OrderValidator:
    """Validates a batch of orders against a loaded schedule."""

    def validate(self, orders: Sequence[Order], schedule: FeeSchedule) -> None:
        """
        Check every item of every order. Raises on the first problem found.
        """
        for order in orders:
            for item in order.order_items:
                if ItemType.parse(item.type) is None:
                    raise UnrecognizedItemType(item.type, order.order_number)

                if item.type not in schedule:
                    raise MissingFeeScheduleEntry(item.type)

                if item.pages is not None and item.pages < 0:
                    raise InvalidOrder(
                        f"pages cannot be negative in order {order.order_number}, got: {item.pages}"
                    )

                if item.pages is not None and item.pages > MAX_PAGES:
                    raise InvalidOrder(
                        f"pages cannot exceed {MAX_PAGES} in order {order.order_number}, got: {item.pages}"
                    )
