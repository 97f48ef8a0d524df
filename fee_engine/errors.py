"""
Engine Errors

Every failure the engine reports is a FeeEngineError. They subclass ValueError
so callers can treat them like any other input validation failure.
"""


class FeeEngineError(ValueError):
    """Base class for fee and distribution calculation failures."""


class InvalidSchedule(FeeEngineError):
    """The raw fee schedule is malformed."""


class DegenerateSchedule(InvalidSchedule):
    """An item type's maximum fee is zero, so percentages cannot be derived."""


class InvalidOrder(FeeEngineError):
    """An order or order item is malformed."""


class UnrecognizedItemType(FeeEngineError):
    """An order item type has no pricing rules."""

    def __init__(self, item_type, order_number=None):
        self.item_type = item_type
        self.order_number = order_number
        where = f" in order {order_number}" if order_number is not None else ""
        super().__init__(f"Unrecognized order item type{where}: {item_type!r}")


class MissingFeeScheduleEntry(FeeEngineError):
    """The loaded schedule lacks an item type, or a fee the item type needs."""

    def __init__(self, item_type, fee_name=None):
        self.item_type = item_type
        self.fee_name = fee_name
        if fee_name is None:
            message = f"No fee schedule entry for order item type: {item_type!r}"
        else:
            message = f"Fee schedule for {item_type!r} has no '{fee_name}' fee"
        super().__init__(message)
