"""
Domain Models for the Fee Distribution Engine

These dataclasses provide type-safe representations of schedules, orders and results.
All monetary values use Decimal for precision.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .errors import InvalidOrder, InvalidSchedule


def to_decimal(value, what: str) -> Decimal:
    """Parse a textual or numeric amount into a Decimal."""
    if isinstance(value, bool) or value is None:
        raise InvalidSchedule(f"{what} must be a number, got: {value!r}")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise InvalidSchedule(f"{what} must be a number, got: {value!r}") from None
    if not amount.is_finite():
        raise InvalidSchedule(f"{what} must be finite, got: {value!r}")
    return amount


class ItemType(str, Enum):
    """Order item types the engine knows how to price."""

    REAL_PROPERTY_RECORDING = "Real Property Recording"
    BIRTH_CERTIFICATE = "Birth Certificate"

    @classmethod
    def parse(cls, name) -> "ItemType | None":
        try:
            return cls(name)
        except ValueError:
            return None


# Fee names used by the pricing rules
FLAT_FEE = "flat"
PER_PAGE_FEE = "per-page"

# Largest page count a single recording may carry
MAX_PAGES = 10_000


# =============================================================================
# SCHEDULE MODELS
# =============================================================================


@dataclass(frozen=True)
class FeeEntry:
    """A single named fee of an item type, as configured."""

    type: str
    amount: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "FeeEntry":
        if not isinstance(data, dict) or "type" not in data or "amount" not in data:
            raise InvalidSchedule(f"fee entries need 'type' and 'amount', got: {data!r}")
        if not isinstance(data["type"], str):
            raise InvalidSchedule(f"fee type must be a string, got: {data['type']!r}")
        return cls(type=data["type"], amount=to_decimal(data["amount"], f"fee '{data['type']}'"))


@dataclass(frozen=True)
class RawDistribution:
    """A fund and the dollar amount it receives out of the item type's max fee."""

    name: str
    amount: Decimal

    @classmethod
    def from_dict(cls, data: dict) -> "RawDistribution":
        if not isinstance(data, dict) or "name" not in data or "amount" not in data:
            raise InvalidSchedule(f"distribution entries need 'name' and 'amount', got: {data!r}")
        if not isinstance(data["name"], str):
            raise InvalidSchedule(f"distribution name must be a string, got: {data['name']!r}")
        return cls(name=data["name"], amount=to_decimal(data["amount"], f"distribution '{data['name']}'"))


@dataclass(frozen=True)
class RawItemTypeSchedule:
    """One entry of the raw fee schedule file."""

    order_item_type: str
    fees: tuple[FeeEntry, ...] = ()
    distributions: tuple[RawDistribution, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "RawItemTypeSchedule":
        item_type = data.get("order_item_type") if isinstance(data, dict) else None
        if not item_type or not isinstance(item_type, str):
            raise InvalidSchedule(f"schedule entries need an 'order_item_type', got: {data!r}")
        fees = data.get("fees", [])
        distributions = data.get("distributions", [])
        if not isinstance(fees, list) or not isinstance(distributions, list):
            raise InvalidSchedule(
                f"'fees' and 'distributions' must be lists for type '{data['order_item_type']}'"
            )
        return cls(
            order_item_type=data["order_item_type"],
            fees=tuple(FeeEntry.from_dict(f) for f in fees),
            distributions=tuple(RawDistribution.from_dict(d) for d in distributions),
        )


@dataclass(frozen=True)
class DistributionShare:
    """A fund's share of an item type's base fee."""

    name: str
    percentage: Decimal


@dataclass(frozen=True)
class ItemTypeSchedule:
    """Normalized fees and distribution shares for one item type."""

    fees: Mapping[str, Decimal]
    distributions: tuple[DistributionShare, ...]
    real_fee: Decimal  # max fee of the type, the base for percentages

    def fee(self, name: str) -> Decimal | None:
        return self.fees.get(name)


@dataclass(frozen=True)
class FeeSchedule:
    """
    Lookup of normalized schedules keyed by order item type.

    Built once by `load_schedule` and shared read-only by every calculation.
    """

    types: Mapping[str, ItemTypeSchedule] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, item_type: str) -> ItemTypeSchedule | None:
        return self.types.get(item_type)

    def __contains__(self, item_type) -> bool:
        return item_type in self.types

    def __len__(self) -> int:
        return len(self.types)


# =============================================================================
# ORDER MODELS
# =============================================================================


@dataclass(frozen=True)
class OrderItem:
    """A billable line of an order."""

    type: str
    pages: int | None = None
    order_item_id: str | int | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "OrderItem":
        if not isinstance(data, dict) or "type" not in data:
            raise InvalidOrder(f"order items need a 'type', got: {data!r}")
        if not isinstance(data["type"], str):
            raise InvalidOrder(f"order item type must be a string, got: {data['type']!r}")
        pages = data.get("pages")
        if pages is not None:
            if isinstance(pages, bool) or not isinstance(pages, (int, float, str)):
                raise InvalidOrder(f"pages must be an integer, got: {pages!r}")
            try:
                as_decimal = Decimal(str(pages))
            except InvalidOperation:
                raise InvalidOrder(f"pages must be an integer, got: {pages!r}") from None
            if not as_decimal.is_finite() or as_decimal != as_decimal.to_integral_value():
                raise InvalidOrder(f"pages must be an integer, got: {pages!r}")
            if abs(as_decimal) > MAX_PAGES:
                raise InvalidOrder(f"pages cannot exceed {MAX_PAGES}, got: {pages!r}")
            pages = int(as_decimal)
        return cls(type=data["type"], pages=pages, order_item_id=data.get("order_item_id"))


@dataclass(frozen=True)
class Order:
    """A customer order: an id and its items."""

    order_number: str | int
    order_items: tuple[OrderItem, ...] = ()
    order_date: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> "Order":
        if not isinstance(data, dict) or "order_number" not in data:
            raise InvalidOrder(f"orders need an 'order_number', got: {data!r}")
        items = data.get("order_items", [])
        if not isinstance(items, list):
            raise InvalidOrder(f"order_items must be a list for order {data['order_number']}")
        return cls(
            order_number=data["order_number"],
            order_items=tuple(OrderItem.from_dict(i) for i in items),
            order_date=data.get("order_date"),
        )


# =============================================================================
# RESULT MODELS
# =============================================================================


@dataclass(frozen=True)
class PricedItem:
    """An order item with its fee and the overage portion of that fee."""

    type: str
    price: Decimal
    additional_price_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class OrderFees:
    """Priced items of an order plus the order totals."""

    id: str | int
    order_items: tuple[PricedItem, ...]
    total_fees: Decimal
    additional_price_amount: Decimal


@dataclass(frozen=True)
class FundAllocation:
    """One fund's dollar share."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class OrderDistribution:
    """Reconciled fund allocations of a single order."""

    id: str | int
    distributions: tuple[FundAllocation, ...]


@dataclass(frozen=True)
class BatchResult:
    """Per-order distributions and the batch-wide totals."""

    orders: tuple[OrderDistribution, ...]
    total_distributions: tuple[FundAllocation, ...]
