"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from fastapi.testclient import TestClient

from ledger_service.api.dependencies import get_ledger_store
from ledger_service.api.main import create_app
from ledger_service.domain.models import Transaction, TransactionType
from ledger_service.infrastructure.repositories import AccountRepository, TransactionRepository
from ledger_service.infrastructure.storage import InMemoryLedgerStore
from ledger_service.services.accounts import AccountService
from ledger_service.services.transactions import TransactionService

BASE_TIME = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryLedgerStore:
    """Fresh, empty ledger per test"""
    return InMemoryLedgerStore()


@pytest.fixture
def transaction_repository(store: InMemoryLedgerStore) -> TransactionRepository:
    return TransactionRepository(store)


@pytest.fixture
def transaction_service(transaction_repository: TransactionRepository) -> TransactionService:
    return TransactionService(transaction_repository)


@pytest.fixture
def account_service(transaction_repository: TransactionRepository) -> AccountService:
    return AccountService(AccountRepository(transaction_repository, default_currency="USD"))


@pytest.fixture
def client(store: InMemoryLedgerStore) -> TestClient:
    """Create FastAPI test client backed by the per-test ledger"""
    app = create_app()
    app.dependency_overrides[get_ledger_store] = lambda: store
    return TestClient(app)


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def make_transaction():
    """Build a Transaction with a controllable timestamp (minutes after BASE_TIME)"""

    def _make(
        from_account: str,
        to_account: str,
        amount,
        type: TransactionType,
        currency: str = "USD",
        minutes: int = 0,
    ) -> Transaction:
        return Transaction(
            from_account=from_account,
            to_account=to_account,
            amount=Decimal(str(amount)),
            currency=currency,
            type=type,
            timestamp=BASE_TIME + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def scenario_transactions(make_transaction) -> list[Transaction]:
    """Five movements touching ACC-AAAAA: two deposits, two withdrawals, one incoming transfer"""
    return [
        make_transaction("ACC-EXT01", "ACC-AAAAA", 1000, TransactionType.DEPOSIT, minutes=0),
        make_transaction("ACC-EXT01", "ACC-AAAAA", 500, TransactionType.DEPOSIT, minutes=1),
        make_transaction("ACC-AAAAA", "ACC-EXT02", 200, TransactionType.WITHDRAWAL, minutes=2),
        make_transaction("ACC-AAAAA", "ACC-EXT02", 100, TransactionType.WITHDRAWAL, minutes=3),
        make_transaction("ACC-BBBBB", "ACC-AAAAA", 300, TransactionType.TRANSFER, minutes=4),
    ]
