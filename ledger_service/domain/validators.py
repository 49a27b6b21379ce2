"""Stateless format checks for account ids, currency codes and amounts"""

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List

from ledger_service.domain.models import NewTransaction, TransactionType

ACCOUNT_ID_PATTERN = re.compile(r"^ACC-[A-Za-z0-9]{5}$")

# Common ISO 4217 codes
SUPPORTED_CURRENCIES = frozenset(
    [
        "USD", "EUR", "GBP", "JPY", "CNY", "AUD", "CAD", "CHF", "HKD", "SGD",
        "SEK", "NOK", "DKK", "PLN", "RUB", "INR", "BRL", "ZAR", "KRW", "MXN",
        "NZD", "TRY", "THB", "IDR", "MYR", "PHP", "CZK", "HUF", "ILS", "CLP",
    ]
)

ACCOUNT_ID_MESSAGE = "Account must follow format ACC-XXXXX (where X is alphanumeric)"
CURRENCY_MESSAGE = "Currency must be a valid ISO 4217 code (e.g., USD, EUR, GBP)"
AMOUNT_MESSAGE = "Amount must be a positive number with maximum 2 decimal places"
TYPE_MESSAGE = "Type must be one of: " + ", ".join(t.value for t in TransactionType)

MAX_DECIMAL_PLACES = 2


def is_valid_account_id(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return ACCOUNT_ID_PATTERN.fullmatch(value) is not None


def is_valid_currency(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    return value.upper() in SUPPORTED_CURRENCIES


def normalize_currency(value: str) -> str:
    return value.upper()


def to_decimal(value: Any) -> Decimal:
    """Convert a numeric input to Decimal using its shortest decimal form (0.1 -> 0.1)"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def is_valid_amount(value: Any) -> bool:
    """
    Amount must be numeric, finite, strictly positive, and carry at most
    two fractional digits. bool is rejected even though it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False

    try:
        amount = to_decimal(value)
    except (InvalidOperation, ValueError):
        return False

    if not amount.is_finite() or amount <= 0:
        return False

    exponent = amount.normalize().as_tuple().exponent
    return exponent >= -MAX_DECIMAL_PLACES


def is_valid_transaction_type(value: Any) -> bool:
    if isinstance(value, TransactionType):
        return True
    return isinstance(value, str) and value in {t.value for t in TransactionType}


def collect_transaction_errors(new_transaction: NewTransaction) -> List[Dict[str, str]]:
    """Run every field check and return one {field, message} entry per failure"""
    errors = []

    if not is_valid_account_id(new_transaction.from_account):
        errors.append({"field": "fromAccount", "message": ACCOUNT_ID_MESSAGE})
    if not is_valid_account_id(new_transaction.to_account):
        errors.append({"field": "toAccount", "message": ACCOUNT_ID_MESSAGE})
    if not is_valid_amount(new_transaction.amount):
        errors.append({"field": "amount", "message": AMOUNT_MESSAGE})
    if not is_valid_currency(new_transaction.currency):
        errors.append({"field": "currency", "message": CURRENCY_MESSAGE})
    if not is_valid_transaction_type(new_transaction.type):
        errors.append({"field": "type", "message": TYPE_MESSAGE})

    return errors
