from typing import Dict, Iterable, List, TextIO

from account import Account
from amount import format_amount
from models import AccountSummary

HEADER = "client,available,held,total,locked"


def summarize(accounts: Dict[int, Account]) -> List[AccountSummary]:
    """One summary per account, ordered by client id."""
    return [
        AccountSummary(
            client_id=client_id,
            available=account.available,
            held=account.held,
            total=account.total,
            locked=account.locked,
        )
        for client_id, account in sorted(accounts.items())
    ]


def format_row(summary: AccountSummary) -> str:
    return (
        f"{summary.client_id},"
        f"{format_amount(summary.available)},"
        f"{format_amount(summary.held)},"
        f"{format_amount(summary.total)},"
        f"{str(summary.locked).lower()}"
    )


def write_report(summaries: Iterable[AccountSummary], stream: TextIO) -> None:
    print(HEADER, file=stream)
    for summary in summaries:
        print(format_row(summary), file=stream)
