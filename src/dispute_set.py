from typing import Set


class DisputeSet:
    """Transaction ids currently under dispute."""

    def __init__(self):
        self._transaction_ids: Set[int] = set()

    def open(self, transaction_id: int) -> bool:
        """Mark a transaction as disputed. Returns False if it already was."""
        if transaction_id in self._transaction_ids:
            return False
        self._transaction_ids.add(transaction_id)
        return True

    def close(self, transaction_id: int) -> bool:
        """Clear dispute status. Returns whether a dispute was actually open."""
        if transaction_id not in self._transaction_ids:
            return False
        self._transaction_ids.remove(transaction_id)
        return True

    def __contains__(self, transaction_id: int) -> bool:
        return transaction_id in self._transaction_ids

    def __len__(self) -> int:
        return len(self._transaction_ids)
