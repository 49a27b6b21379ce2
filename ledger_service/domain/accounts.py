"""Account derivation engine - balances and summaries computed from the ledger"""

from decimal import Decimal
from typing import Iterable, List

from ledger_service.domain.models import Balance, Summary, Transaction, TransactionType

DEFAULT_CURRENCY = "USD"


def participating_transactions(account_id: str, transactions: Iterable[Transaction]) -> List[Transaction]:
    """Transactions where the account is the source or the destination"""
    return [t for t in transactions if t.involves(account_id)]


def signed_amount(account_id: str, transaction: Transaction) -> Decimal:
    """
    Effect of one transaction on the account's balance.

    Rules:
    - deposit: credits the destination only
    - withdrawal: debits the source only
    - transfer: credits the destination, otherwise debits the source
      (a self-transfer is credited once and never debited)
    """
    if transaction.type == TransactionType.DEPOSIT:
        if transaction.to_account == account_id:
            return transaction.amount
    elif transaction.type == TransactionType.WITHDRAWAL:
        if transaction.from_account == account_id:
            return -transaction.amount
    elif transaction.type == TransactionType.TRANSFER:
        if transaction.to_account == account_id:
            return transaction.amount
        if transaction.from_account == account_id:
            return -transaction.amount
    return Decimal("0")


def calculate_balance(
    account_id: str,
    transactions: Iterable[Transaction],
    default_currency: str = DEFAULT_CURRENCY,
) -> Balance:
    """
    Derive the account balance by scanning its transactions.

    An account without history has a zero balance in the default currency.
    Otherwise the currency is taken from the first participating transaction;
    amounts in other currencies are summed as-is (no conversion).
    """
    account_txns = participating_transactions(account_id, transactions)

    if not account_txns:
        return Balance(account_id=account_id, balance=Decimal("0"), currency=default_currency)

    currency = account_txns[0].currency
    balance = sum((signed_amount(account_id, t) for t in account_txns), Decimal("0"))

    return Balance(account_id=account_id, balance=balance, currency=currency)


def summarize_account(account_id: str, transactions: Iterable[Transaction]) -> Summary:
    """
    Derive deposit/withdrawal totals and activity for an account.

    Transfers count towards transaction_count but not towards either total.
    """
    account_txns = participating_transactions(account_id, transactions)

    total_deposits = sum(
        (t.amount for t in account_txns if t.type == TransactionType.DEPOSIT and t.to_account == account_id),
        Decimal("0"),
    )
    total_withdrawals = sum(
        (t.amount for t in account_txns if t.type == TransactionType.WITHDRAWAL and t.from_account == account_id),
        Decimal("0"),
    )
    most_recent_date = max((t.timestamp for t in account_txns), default=None)

    return Summary(
        account_id=account_id,
        total_deposits=total_deposits,
        total_withdrawals=total_withdrawals,
        transaction_count=len(account_txns),
        most_recent_date=most_recent_date,
    )
