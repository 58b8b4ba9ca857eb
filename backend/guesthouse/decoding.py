"""Typed decode applied to every record leaving the store.

Drivers hand fixed-point columns back as ``Decimal`` (or text, for some MySQL
setups); JSON responses need plain numbers. ``None`` is never turned into 0.
"""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation

from guesthouse.errors import StorageError

logger = logging.getLogger(__name__)

MONEY_FIELDS = frozenset({"cost_price", "selling_price", "price_per_night", "total_price"})
COUNT_FIELDS = frozenset({"quantity", "reorder_level"})


def _to_decimal(field: str, value) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        logger.error("Stored value for %s is not numeric: %r", field, value)
        raise StorageError() from e


def decode_money(field: str, value):
    if value is None or isinstance(value, float):
        return value
    return float(_to_decimal(field, value))


def decode_count(field: str, value):
    if value is None or isinstance(value, int):
        return value
    number = _to_decimal(field, value)
    # keep fractional counts as they are stored
    return int(number) if number == number.to_integral_value() else float(number)


def decode_record(row: dict) -> dict:
    record = dict(row)
    for field, value in row.items():
        if field in MONEY_FIELDS:
            record[field] = decode_money(field, value)
        elif field in COUNT_FIELDS:
            record[field] = decode_count(field, value)
        elif isinstance(value, date):
            record[field] = value.isoformat()
    return record
