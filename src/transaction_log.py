from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Optional

from models import Transaction


@dataclass(frozen=True)
class TransactionLogEntry:
    client_id: int
    amount: Decimal


class TransactionLog:
    """
    Append-only record of every deposit and withdrawal that was applied.
    Keyed by transaction id, which doubles as the idempotency key.
    """

    def __init__(self):
        self._entries: Dict[int, TransactionLogEntry] = {}

    def record(self, transaction: Transaction) -> bool:
        """Store transaction unless its id is already logged. Returns True if stored."""
        if transaction.transaction_id in self._entries:
            return False
        self._entries[transaction.transaction_id] = TransactionLogEntry(
            client_id=transaction.client_id,
            amount=transaction.amount,
        )
        return True

    def lookup(self, transaction: Transaction) -> Optional[TransactionLogEntry]:
        """
        Retrieve the entry for transaction's id, but only if it belongs to the
        same client as the querying transaction.
        """
        entry = self._entries.get(transaction.transaction_id)
        if entry is None or entry.client_id != transaction.client_id:
            return None
        return entry

    def contains(self, transaction_id: int) -> bool:
        return transaction_id in self._entries

    def __contains__(self, transaction_id: int) -> bool:
        return self.contains(transaction_id)

    def __len__(self) -> int:
        return len(self._entries)
