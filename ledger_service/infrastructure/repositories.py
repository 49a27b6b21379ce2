"""Data access layer for ledger entities"""

from typing import List, Optional

from ledger_service.config import settings
from ledger_service.domain.accounts import calculate_balance, summarize_account
from ledger_service.domain.models import Balance, Summary, Transaction, TransactionFilter
from ledger_service.infrastructure.storage import InMemoryLedgerStore


class TransactionRepository:
    """Repository for ledger transactions"""

    def __init__(self, store: InMemoryLedgerStore):
        self.store = store

    def create(self, transaction: Transaction) -> Transaction:
        """Persist a new transaction and return it"""
        self.store.put(transaction)
        return transaction

    def find_all(self) -> List[Transaction]:
        return self.store.get_all()

    def find_by_id(self, transaction_id: str) -> Optional[Transaction]:
        return self.store.get_by_id(transaction_id)

    def find_by_account(self, account_id: str) -> List[Transaction]:
        return self.store.get_by_account(account_id)

    def filter(self, criteria: TransactionFilter) -> List[Transaction]:
        return self.store.filter(criteria)


class AccountRepository:
    """Derives account snapshots from the transaction log; holds no account state"""

    def __init__(self, transaction_repository: TransactionRepository, default_currency: Optional[str] = None):
        self.transaction_repository = transaction_repository
        self.default_currency = default_currency or settings.default_currency

    def get_balance(self, account_id: str) -> Balance:
        transactions = self.transaction_repository.find_by_account(account_id)
        return calculate_balance(account_id, transactions, default_currency=self.default_currency)

    def get_summary(self, account_id: str) -> Summary:
        transactions = self.transaction_repository.find_by_account(account_id)
        return summarize_account(account_id, transactions)
