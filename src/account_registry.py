from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional

from account import Account


class AccountStatus(Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class AccountCheckout:
    status: AccountStatus
    account: Optional[Account] = None

    @property
    def is_available(self) -> bool:
        return self.status == AccountStatus.AVAILABLE


class AccountRegistry:
    """
    Owns every client account.
    Hands out working copies of unlocked accounts; callers commit them back.
    """

    def __init__(self):
        self._accounts: Dict[int, Account] = {}

    def resolve_or_create(self, client_id: int) -> AccountCheckout:
        """
        Get a copy of the client's account, creating an empty one on first use.
        Locked accounts are never handed out.
        """
        account = self._accounts.get(client_id)
        if account is None:
            account = Account()
            self._accounts[client_id] = account
        elif account.locked:
            return AccountCheckout(AccountStatus.UNAVAILABLE)

        return AccountCheckout(AccountStatus.AVAILABLE, replace(account))

    def commit(self, client_id: int, account: Account) -> None:
        """Store the mutated copy as the client's current account."""
        self._accounts[client_id] = account

    def get(self, client_id: int) -> Optional[Account]:
        return self._accounts.get(client_id)

    def accounts(self) -> Dict[int, Account]:
        """Return all accounts (for final output)."""
        return dict(self._accounts)

    def __contains__(self, client_id: int) -> bool:
        return client_id in self._accounts

    def __len__(self) -> int:
        return len(self._accounts)
