import csv
import logging
from typing import Dict, Iterable, Iterator, TextIO

from account import Account
from account_registry import AccountRegistry
from dispute_set import DisputeSet
from models import ProcessingStats
from transaction_log import TransactionLog
from transaction_parser import ParsedRecord, parse_csv_row
from transaction_processor import TransactionProcessor

logger = logging.getLogger(__name__)


class PaymentsEngine:
    """
    Replays transactions against client accounts, strictly in input order.
    Disputes only make sense relative to that order, so processing is a
    single loop with no concurrency.
    """

    def __init__(self):
        self._registry = AccountRegistry()
        self._transaction_log = TransactionLog()
        self._disputes = DisputeSet()
        self._processor = TransactionProcessor(self._registry, self._transaction_log, self._disputes)
        self._stats = ProcessingStats()

    @property
    def stats(self) -> ProcessingStats:
        return self._stats

    def process_file(self, filepath: str) -> Dict[int, Account]:
        """Process CSV file and return final account states."""
        logger.info(f"Processing {filepath}")
        # Undecodable bytes become U+FFFD so the row is rejected by the parser
        with open(filepath, "r", newline="", encoding="utf-8", errors="replace") as f:
            self.process(self._read_transactions(f))
        logger.info(f"Processing complete: {self._stats}")
        return self._registry.accounts()

    def process(self, records: Iterable[ParsedRecord]) -> Dict[int, Account]:
        """Apply already-parsed (type, transaction) pairs in order."""
        for transaction_type, transaction in records:
            result = self._processor.process_transaction(transaction_type, transaction)
            self._stats.record(result)
        return self._registry.accounts()

    def _read_transactions(self, f: TextIO) -> Iterator[ParsedRecord]:
        """Lazily parse CSV rows, skipping (and counting) rejected ones."""
        reader = csv.DictReader(f)
        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                logger.warning(f"Failed to read line {reader.line_num}: {e}")
                self._stats.record_rejection()
                continue

            record = parse_csv_row(row)
            if record is None:
                self._stats.record_rejection()
                continue
            yield record
