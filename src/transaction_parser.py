import logging
import re
from decimal import Decimal
from typing import Dict, Optional, Tuple

from amount import MAX_AMOUNT, truncate
from models import MAX_CLIENT_ID, MAX_TRANSACTION_ID, Transaction, TransactionType

logger = logging.getLogger(__name__)

ParsedRecord = Tuple[TransactionType, Transaction]

# Plain ASCII only: int() and Decimal() would also take "1_000" or non-ASCII digits
_ID_PATTERN = re.compile(r"\+?[0-9]+")
_AMOUNT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


class RecordError(ValueError):
    """Raised for a CSV record that cannot become a transaction."""


def parse_csv_row(row: Dict[Optional[str], object]) -> Optional[ParsedRecord]:
    """
    Parse a csv.DictReader row into a transaction type and Transaction.
    Returns None (after logging a warning) for any malformed row.
    """
    try:
        normalized = _normalize(row)

        transaction_type = _parse_type(normalized.get("type", ""))
        client_id = _parse_id(normalized.get("client", ""), "client", MAX_CLIENT_ID)
        transaction_id = _parse_id(normalized.get("tx", ""), "tx", MAX_TRANSACTION_ID)
        amount = _parse_amount(normalized.get("amount", ""))

        if transaction_type.is_monetary:
            if amount is None or amount <= 0:
                raise RecordError(f"{transaction_type.value} needs a positive amount, got {amount}")
        else:
            amount = Decimal("0")

        return transaction_type, Transaction(
            transaction_id=transaction_id,
            client_id=client_id,
            amount=amount,
        )
    except RecordError as e:
        logger.warning(f"Failed to parse row {row}: {e}")
        return None


def _normalize(row: Dict[Optional[str], object]) -> Dict[str, str]:
    # DictReader files surplus columns under None and fills missing ones with None
    return {
        key.strip().lower(): value.strip()
        for key, value in row.items()
        if isinstance(key, str) and isinstance(value, str)
    }


def _parse_type(value: str) -> TransactionType:
    try:
        return TransactionType(value.lower())
    except ValueError:
        raise RecordError(f"unknown transaction type {value!r}") from None


def _parse_id(value: str, field: str, maximum: int) -> int:
    if not _ID_PATTERN.fullmatch(value):
        raise RecordError(f"invalid {field} {value!r}")
    parsed = int(value)
    if parsed > maximum:
        raise RecordError(f"{field} {parsed} out of range")
    return parsed


def _parse_amount(value: str) -> Optional[Decimal]:
    if not value:
        return None
    if not _AMOUNT_PATTERN.fullmatch(value):
        raise RecordError(f"invalid amount {value!r}")
    amount = Decimal(value)
    if amount < 0:
        raise RecordError(f"negative amount {value!r}")
    if amount > MAX_AMOUNT:
        raise RecordError(f"amount {value!r} out of range")
    return truncate(amount)
