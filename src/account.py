import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from amount import saturating_add, saturating_sub
from dispute_set import DisputeSet
from models import Transaction
from transaction_log import TransactionLog, TransactionLogEntry

logger = logging.getLogger(__name__)


@dataclass
class Account:
    """
    Balances of a single client.

    Every operation returns True if it changed the account and False if one of
    its preconditions failed, in which case nothing (account, log or disputes)
    is touched. Neither balance is allowed to go negative.
    """

    available: Decimal = Decimal("0")
    held: Decimal = Decimal("0")
    locked: bool = False

    @property
    def total(self) -> Decimal:
        return saturating_add(self.available, self.held)

    def deposit(self, transaction: Transaction, transaction_log: TransactionLog) -> bool:
        if not transaction_log.record(transaction):
            logger.info(f"Deposit tx {transaction.transaction_id}: already processed, skipping (idempotent)")
            return False

        self.available = saturating_add(self.available, transaction.amount)
        return True

    def withdrawal(self, transaction: Transaction, transaction_log: TransactionLog) -> bool:
        if transaction.transaction_id in transaction_log:
            logger.info(f"Withdrawal tx {transaction.transaction_id}: already processed, skipping (idempotent)")
            return False

        remaining = saturating_sub(self.available, transaction.amount)
        if remaining < 0:
            # Not logged, so the same tx id may succeed later once funds arrive
            logger.debug(f"Withdrawal tx {transaction.transaction_id}: insufficient funds")
            return False

        transaction_log.record(transaction)
        self.available = remaining
        return True

    def dispute(self, transaction: Transaction, transaction_log: TransactionLog, disputes: DisputeSet) -> bool:
        entry = transaction_log.lookup(transaction)
        if entry is None:
            logger.debug(f"Dispute for tx {transaction.transaction_id}: no transaction owned by client {transaction.client_id}")
            return False

        if transaction.transaction_id in disputes:
            logger.debug(f"Dispute for tx {transaction.transaction_id}: transaction already disputed")
            return False

        if self.available < entry.amount:
            logger.debug(f"Dispute for tx {transaction.transaction_id}: available funds below disputed amount {entry.amount}")
            return False

        self.available = saturating_sub(self.available, entry.amount)
        self.held = saturating_add(self.held, entry.amount)
        disputes.open(transaction.transaction_id)
        return True

    def resolve(self, transaction: Transaction, transaction_log: TransactionLog, disputes: DisputeSet) -> bool:
        entry = self._disputed_entry(transaction, transaction_log, disputes)
        if entry is None:
            return False

        disputes.close(transaction.transaction_id)
        self.held = saturating_sub(self.held, entry.amount)
        self.available = saturating_add(self.available, entry.amount)
        return True

    def chargeback(self, transaction: Transaction, transaction_log: TransactionLog, disputes: DisputeSet) -> bool:
        entry = self._disputed_entry(transaction, transaction_log, disputes)
        if entry is None:
            return False

        disputes.close(transaction.transaction_id)
        self.held = saturating_sub(self.held, entry.amount)
        self.locked = True
        return True

    def _disputed_entry(
        self, transaction: Transaction, transaction_log: TransactionLog, disputes: DisputeSet
    ) -> Optional[TransactionLogEntry]:
        """Log entry for a resolve/chargeback, or None if the request must be ignored."""
        entry = transaction_log.lookup(transaction)
        if entry is None:
            logger.debug(f"Tx {transaction.transaction_id}: no transaction owned by client {transaction.client_id}")
            return None

        if transaction.transaction_id not in disputes:
            logger.debug(f"Tx {transaction.transaction_id}: transaction is not under dispute")
            return None

        if self.held < entry.amount:
            logger.debug(f"Tx {transaction.transaction_id}: held funds below disputed amount {entry.amount}")
            return None

        return entry
