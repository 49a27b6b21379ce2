"""Process-wide in-memory transaction ledger"""

import threading
from typing import Dict, List, Optional

from ledger_service.domain.models import Transaction, TransactionFilter


class InMemoryLedgerStore:
    """
    Append-only keyed collection of transactions.

    A single lock covers inserts and every read traversal, so readers never
    observe a partially-applied insert. Reads return new lists; the
    transactions themselves are frozen and safe to share.
    """

    def __init__(self):
        self._transactions: Dict[str, Transaction] = {}
        self._lock = threading.RLock()

    def put(self, transaction: Transaction) -> None:
        with self._lock:
            self._transactions[transaction.id] = transaction

    def get_by_id(self, transaction_id: str) -> Optional[Transaction]:
        with self._lock:
            return self._transactions.get(transaction_id)

    def get_all(self) -> List[Transaction]:
        """All transactions in insertion order"""
        with self._lock:
            return list(self._transactions.values())

    def get_by_account(self, account_id: str) -> List[Transaction]:
        with self._lock:
            return [t for t in self._transactions.values() if t.involves(account_id)]

    def filter(self, criteria: TransactionFilter) -> List[Transaction]:
        """Transactions matching every supplied criterion; date bounds are inclusive"""
        with self._lock:
            return [t for t in self._transactions.values() if _matches(t, criteria)]

    def reset(self) -> None:
        """Drop every transaction (test isolation only)"""
        with self._lock:
            self._transactions.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._transactions)


def _matches(transaction: Transaction, criteria: TransactionFilter) -> bool:
    if criteria.account_id and not transaction.involves(criteria.account_id):
        return False
    if criteria.type and transaction.type != criteria.type:
        return False
    if criteria.start and transaction.timestamp < criteria.start:
        return False
    if criteria.end and transaction.timestamp > criteria.end:
        return False
    return True
