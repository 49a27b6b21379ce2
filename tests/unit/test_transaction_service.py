"""Unit tests for transaction and account services"""

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from ledger_service.domain.exceptions import NotFoundError, ValidationError
from ledger_service.domain.models import NewTransaction, TransactionStatus, TransactionType
from ledger_service.domain.validators import ACCOUNT_ID_MESSAGE
from ledger_service.services.transactions import TransactionQuery


def _new(from_account="ACC-12345", to_account="ACC-67890", amount=100.5, currency="USD", type="transfer"):
    return NewTransaction(from_account, to_account, amount, currency, type)


def test_create_transaction_assigns_server_fields(transaction_service):
    before = datetime.now(timezone.utc)
    transaction = transaction_service.create_transaction(_new(currency="usd"))

    assert transaction.id
    assert transaction.currency == "USD"
    assert transaction.amount == Decimal("100.5")
    assert transaction.type == TransactionType.TRANSFER
    assert transaction.status == TransactionStatus.COMPLETED
    assert before <= transaction.timestamp <= datetime.now(timezone.utc)


def test_create_transaction_ids_are_unique(transaction_service):
    ids = {transaction_service.create_transaction(_new()).id for _ in range(20)}
    assert len(ids) == 20


def test_created_transaction_round_trips_by_id(transaction_service):
    created = transaction_service.create_transaction(_new(type="deposit"))

    assert transaction_service.get_transaction_by_id(created.id) == created


def test_create_transaction_rejects_invalid_fields_without_storing(transaction_service, store):
    with pytest.raises(ValidationError) as exc_info:
        transaction_service.create_transaction(_new(from_account="INVALID-123", amount=0))

    fields = [d["field"] for d in exc_info.value.details]
    assert fields == ["fromAccount", "amount"]
    assert exc_info.value.message == "Validation failed"
    assert len(store) == 0


def test_get_transaction_by_id_not_found(transaction_service):
    with pytest.raises(NotFoundError) as exc_info:
        transaction_service.get_transaction_by_id("nonexistent")

    assert str(exc_info.value) == "Transaction with ID nonexistent does not exist"


def test_get_all_transactions_without_query(transaction_service):
    transaction_service.create_transaction(_new())
    transaction_service.create_transaction(_new(type="deposit"))

    assert len(transaction_service.get_all_transactions()) == 2
    assert len(transaction_service.get_all_transactions(TransactionQuery())) == 2


def test_get_all_transactions_filters_by_account_and_type(transaction_service):
    transaction_service.create_transaction(_new())
    transaction_service.create_transaction(_new(from_account="ACC-11111", to_account="ACC-22222", type="deposit"))

    by_account = transaction_service.get_all_transactions(TransactionQuery(account_id="ACC-22222"))
    by_type = transaction_service.get_all_transactions(TransactionQuery(type="transfer"))

    assert [t.to_account for t in by_account] == ["ACC-22222"]
    assert [t.type for t in by_type] == [TransactionType.TRANSFER]


def test_get_all_transactions_parses_string_date_bounds(transaction_service):
    created = transaction_service.create_transaction(_new())
    day = created.timestamp.date()

    in_range = TransactionQuery(from_date=day.isoformat(), to_date=(day + timedelta(days=1)).isoformat())
    future = TransactionQuery(from_date=(day + timedelta(days=1)).isoformat())

    assert len(transaction_service.get_all_transactions(in_range)) == 1
    assert transaction_service.get_all_transactions(future) == []


def test_get_all_transactions_rejects_bad_date(transaction_service):
    with pytest.raises(ValidationError) as exc_info:
        transaction_service.get_all_transactions(TransactionQuery(from_date="not-a-date"))

    assert exc_info.value.details[0]["field"] == "from"


def test_get_all_transactions_rejects_empty_date_bound(transaction_service):
    """An empty bound is supplied but unparseable, so it is rejected rather than ignored"""
    transaction_service.create_transaction(_new())

    with pytest.raises(ValidationError) as exc_info:
        transaction_service.get_all_transactions(TransactionQuery(to_date=""))

    assert exc_info.value.details[0]["field"] == "to"


def test_get_all_transactions_rejects_non_string_date_bound(transaction_service):
    with pytest.raises(ValidationError) as exc_info:
        transaction_service.get_all_transactions(TransactionQuery(from_date=20240101))

    assert exc_info.value.details[0]["field"] == "from"


def test_account_service_rejects_malformed_id(account_service):
    with pytest.raises(ValidationError) as exc_info:
        account_service.get_balance("INVALID")
    assert exc_info.value.message == ACCOUNT_ID_MESSAGE

    with pytest.raises(ValidationError):
        account_service.get_summary("ACC-1234")


def test_account_service_scenario(transaction_service, account_service):
    for new_transaction in (
        _new("ACC-EXT01", "ACC-AAAAA", 1000, type="deposit"),
        _new("ACC-EXT01", "ACC-AAAAA", 500, type="deposit"),
        _new("ACC-AAAAA", "ACC-EXT02", 200, type="withdrawal"),
        _new("ACC-AAAAA", "ACC-EXT02", 100, type="withdrawal"),
        _new("ACC-BBBBB", "ACC-AAAAA", 300, type="transfer"),
    ):
        transaction_service.create_transaction(new_transaction)

    balance = account_service.get_balance("ACC-AAAAA")
    summary = account_service.get_summary("ACC-AAAAA")

    assert balance.balance == Decimal("1500")
    assert summary.total_deposits == Decimal("1500")
    assert summary.total_withdrawals == Decimal("300")
    assert summary.transaction_count == 5
    assert summary.most_recent_date is not None


def test_account_service_unknown_account(account_service):
    balance = account_service.get_balance("ACC-00000")
    summary = account_service.get_summary("ACC-00000")

    assert balance.balance == Decimal("0")
    assert balance.currency == "USD"
    assert summary.transaction_count == 0
    assert summary.most_recent_date is None
