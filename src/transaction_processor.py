import logging

from account_registry import AccountRegistry
from dispute_set import DisputeSet
from models import Transaction, TransactionType, ProcessingResult
from transaction_log import TransactionLog

logger = logging.getLogger(__name__)


class TransactionProcessor:
    """
    Applies one transaction at a time against the registry.
    The transaction log and dispute set are shared by every account and passed
    into each account operation.
    """

    def __init__(self, registry: AccountRegistry, transaction_log: TransactionLog, disputes: DisputeSet):
        self._registry = registry
        self._transaction_log = transaction_log
        self._disputes = disputes

    def process_transaction(self, transaction_type: TransactionType, transaction: Transaction) -> ProcessingResult:
        """
        Process a single transaction.

        Returns:
            APPLIED: The account changed
            IGNORED: A precondition failed (unknown tx, wrong client, insufficient funds, ...)
            ACCOUNT_FROZEN: The client's account is locked and accepts nothing
        """
        checkout = self._registry.resolve_or_create(transaction.client_id)

        if not checkout.is_available:
            logger.info(f"{transaction_type.value} {transaction}: account {transaction.client_id} is frozen, dropping")
            return ProcessingResult.ACCOUNT_FROZEN

        account = checkout.account
        match transaction_type:
            case TransactionType.DEPOSIT:
                applied = account.deposit(transaction, self._transaction_log)
            case TransactionType.WITHDRAWAL:
                applied = account.withdrawal(transaction, self._transaction_log)
            case TransactionType.DISPUTE:
                applied = account.dispute(transaction, self._transaction_log, self._disputes)
            case TransactionType.RESOLVE:
                applied = account.resolve(transaction, self._transaction_log, self._disputes)
            case TransactionType.CHARGEBACK:
                applied = account.chargeback(transaction, self._transaction_log, self._disputes)
            case _:
                applied = False

        self._registry.commit(transaction.client_id, account)
        return ProcessingResult.APPLIED if applied else ProcessingResult.IGNORED
