"""Transaction use cases: validated creation and filtered retrieval"""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Union

from ledger_service.domain.exceptions import NotFoundError, ValidationError
from ledger_service.domain.models import NewTransaction, Transaction, TransactionFilter, TransactionType
from ledger_service.domain.validators import (
    TYPE_MESSAGE,
    collect_transaction_errors,
    is_valid_transaction_type,
    normalize_currency,
    to_decimal,
)
from ledger_service.infrastructure.observability.logging import log_transaction_created
from ledger_service.infrastructure.observability.metrics import record_transaction, record_validation_failure
from ledger_service.infrastructure.repositories import TransactionRepository
from ledger_service.utils.date_utils import parse_date_bound

DateBound = Union[str, datetime, None]


@dataclass
class TransactionQuery:
    """List filter as received from the caller; date bounds may still be strings"""

    account_id: Optional[str] = None
    type: Union[TransactionType, str, None] = None
    from_date: DateBound = None
    to_date: DateBound = None

    def is_empty(self) -> bool:
        # An empty date string is a supplied (and invalid) bound, not an absent one
        return not (self.account_id or self.type) and self.from_date is None and self.to_date is None


class TransactionService:
    """Encapsulates core transaction use cases."""

    def __init__(self, repository: TransactionRepository) -> None:
        self._repository = repository

    def create_transaction(self, new_transaction: NewTransaction) -> Transaction:
        errors = collect_transaction_errors(new_transaction)
        if errors:
            record_validation_failure("create_transaction")
            raise ValidationError("Validation failed", details=errors)

        transaction = Transaction(
            from_account=new_transaction.from_account,
            to_account=new_transaction.to_account,
            amount=to_decimal(new_transaction.amount),
            currency=normalize_currency(new_transaction.currency),
            type=TransactionType(new_transaction.type),
        )
        saved = self._repository.create(transaction)

        record_transaction(saved.type.value, saved.currency, saved.amount)
        log_transaction_created(
            transaction_id=saved.id,
            transaction_type=saved.type.value,
            from_account=saved.from_account,
            to_account=saved.to_account,
            amount=str(saved.amount),
            currency=saved.currency,
        )
        return saved

    def get_all_transactions(self, query: Optional[TransactionQuery] = None) -> List[Transaction]:
        if query is None or query.is_empty():
            return self._repository.find_all()
        return self._repository.filter(self._to_filter(query))

    def get_transaction_by_id(self, transaction_id: str) -> Transaction:
        transaction = self._repository.find_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def _to_filter(self, query: TransactionQuery) -> TransactionFilter:
        errors = []

        transaction_type = None
        if query.type:
            if is_valid_transaction_type(query.type):
                transaction_type = TransactionType(query.type)
            else:
                errors.append({"field": "type", "message": TYPE_MESSAGE})

        bounds = {}
        for field_name, value in (("from", query.from_date), ("to", query.to_date)):
            if value is None:
                bounds[field_name] = None
                continue
            try:
                bounds[field_name] = parse_date_bound(value)
            except (TypeError, ValueError):
                errors.append({"field": field_name, "message": f"{field_name} must be a valid ISO 8601 date string"})

        if errors:
            record_validation_failure("list_transactions")
            raise ValidationError("Validation failed", details=errors)

        return TransactionFilter(
            account_id=query.account_id or None,
            type=transaction_type,
            start=bounds["from"],
            end=bounds["to"],
        )
