"""Account use cases: balance and summary lookups"""

from ledger_service.domain.exceptions import ValidationError
from ledger_service.domain.models import Balance, Summary
from ledger_service.domain.validators import ACCOUNT_ID_MESSAGE, is_valid_account_id
from ledger_service.infrastructure.observability.metrics import record_validation_failure
from ledger_service.infrastructure.repositories import AccountRepository


class AccountService:
    """Exposes derived account snapshots for well-formed account ids."""

    def __init__(self, repository: AccountRepository) -> None:
        self._repository = repository

    def get_balance(self, account_id: str) -> Balance:
        self._ensure_account_format(account_id, "get_balance")
        return self._repository.get_balance(account_id)

    def get_summary(self, account_id: str) -> Summary:
        self._ensure_account_format(account_id, "get_summary")
        return self._repository.get_summary(account_id)

    @staticmethod
    def _ensure_account_format(account_id: str, operation: str) -> None:
        if not is_valid_account_id(account_id):
            record_validation_failure(operation)
            raise ValidationError(ACCOUNT_ID_MESSAGE)
