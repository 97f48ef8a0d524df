"""
Fee Schedule Loading

Turns the raw schedule (a list of item types, each with named fees and fund
amounts) into a FeeSchedule whose distribution amounts are percentages of the
item type's maximum fee.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path
from types import MappingProxyType
from typing import Any, Sequence

from .errors import DegenerateSchedule, InvalidSchedule
from .models import (
    DistributionShare,
    FeeEntry,
    FeeSchedule,
    ItemTypeSchedule,
    RawDistribution,
    RawItemTypeSchedule,
)
from .validators import ScheduleValidator

logger = logging.getLogger(__name__)


def parse_schedule(raw: Sequence[dict]) -> list[RawItemTypeSchedule]:
    """Parse the raw JSON schedule into typed entries."""
    if not isinstance(raw, list):
        raise InvalidSchedule(f"Fee schedule must be a list of item types, got: {type(raw).__name__}")
    return [RawItemTypeSchedule.from_dict(entry) for entry in raw]


def normalize_schedule(entries: Sequence[RawItemTypeSchedule]) -> FeeSchedule:
    """
    Build the lookup structure keyed by item type.

    Fees become a name -> amount mapping. Each distribution amount is divided by
    the type's maximum fee (floored at 0); distribution order is preserved.
    """
    types = {}
    for entry in entries:
        fees = {fee.type: fee.amount for fee in entry.fees}
        real_fee = max([Decimal("0")] + [fee.amount for fee in entry.fees])

        if entry.distributions and real_fee == 0:
            raise DegenerateSchedule(f"Maximum fee of {entry.order_item_type!r} is zero")

        shares = tuple(
            DistributionShare(name=dist.name, percentage=dist.amount / real_fee)
            for dist in entry.distributions
        )
        types[entry.order_item_type] = ItemTypeSchedule(
            fees=MappingProxyType(fees),
            distributions=shares,
            real_fee=real_fee,
        )

    return FeeSchedule(types=MappingProxyType(types))


def denormalize_schedule(schedule: FeeSchedule) -> list[RawItemTypeSchedule]:
    """Rebuild raw entries from a normalized schedule (amount = percentage * max fee)."""
    entries = []
    for name, item_schedule in schedule.types.items():
        entries.append(
            RawItemTypeSchedule(
                order_item_type=name,
                fees=tuple(FeeEntry(type=k, amount=v) for k, v in item_schedule.fees.items()),
                distributions=tuple(
                    RawDistribution(name=share.name, amount=share.percentage * item_schedule.real_fee)
                    for share in item_schedule.distributions
                ),
            )
        )
    return entries


def load_schedule(raw: Sequence[dict]) -> FeeSchedule:
    """
    Validate and normalize a raw schedule.

    Called once at startup; the returned FeeSchedule is immutable and is passed
    to every FeeProcessor that prices against it.
    """
    entries = parse_schedule(raw)
    ScheduleValidator().validate(entries)
    schedule = normalize_schedule(entries)
    logger.info(f"Loaded fee schedule with {len(schedule)} item type(s): {', '.join(schedule.types)}")
    return schedule


def load_schedule_file(path: str | Path) -> FeeSchedule:
    """Read a JSON schedule file and load it."""
    path = Path(path)
    logger.info(f"Reading fee schedule from {path}")
    with path.open(encoding="utf-8") as fh:
        raw: Any = json.load(fh)
    return load_schedule(raw)
