from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransactionType(Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    DISPUTE = "dispute"
    RESOLVE = "resolve"
    CHARGEBACK = "chargeback"

    @property
    def is_monetary(self) -> bool:
        """Deposits and withdrawals move money; the rest refer to an earlier one."""
        return self in (TransactionType.DEPOSIT, TransactionType.WITHDRAWAL)


class ProcessingResult(Enum):
    APPLIED = "applied"
    IGNORED = "ignored"
    ACCOUNT_FROZEN = "account_frozen"


MAX_CLIENT_ID = 2**16 - 1
MAX_TRANSACTION_ID = 2**32 - 1


@dataclass(frozen=True)
class Transaction:
    transaction_id: int
    client_id: int
    amount: Decimal = Decimal("0")

    def __repr__(self) -> str:
        return f"Transaction(tx={self.transaction_id}, client={self.client_id}, amount={self.amount})"


@dataclass(frozen=True)
class AccountSummary:
    client_id: int
    available: Decimal
    held: Decimal
    total: Decimal
    locked: bool


class ProcessingStats:
    """Counters for the end-of-run processing report."""

    def __init__(self):
        self.applied = 0
        self.ignored = 0
        self.frozen = 0
        self.rejected = 0

    def record(self, result: ProcessingResult) -> None:
        match result:
            case ProcessingResult.APPLIED:
                self.applied += 1
            case ProcessingResult.IGNORED:
                self.ignored += 1
            case ProcessingResult.ACCOUNT_FROZEN:
                self.frozen += 1

    def record_rejection(self) -> None:
        self.rejected += 1

    def __str__(self) -> str:
        return (
            f"Applied: {self.applied}, "
            f"Ignored: {self.ignored}, "
            f"Frozen: {self.frozen}, "
            f"Rejected: {self.rejected}"
        )
