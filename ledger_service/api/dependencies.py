"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request

from ledger_service.infrastructure.repositories import AccountRepository, TransactionRepository
from ledger_service.infrastructure.storage import InMemoryLedgerStore
from ledger_service.services.accounts import AccountService
from ledger_service.services.transactions import TransactionService

# Memory-resident ledger shared by every request for the life of the process
_ledger_store = InMemoryLedgerStore()


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_ledger_store() -> InMemoryLedgerStore:
    """Provide the process-wide ledger store"""
    return _ledger_store


def get_transaction_repository(store: InMemoryLedgerStore = Depends(get_ledger_store)) -> TransactionRepository:
    return TransactionRepository(store)


def get_transaction_service(
    repository: TransactionRepository = Depends(get_transaction_repository),
) -> TransactionService:
    return TransactionService(repository)


def get_account_service(
    repository: TransactionRepository = Depends(get_transaction_repository),
) -> AccountService:
    return AccountService(AccountRepository(repository))
