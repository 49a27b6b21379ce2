"""Pydantic schemas for API request/response validation"""

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from ledger_service.domain.models import Balance, NewTransaction, Summary, Transaction, TransactionStatus, TransactionType
from ledger_service.utils.date_utils import format_timestamp


class CamelModel(BaseModel):
    """Wire format uses camelCase; Python attributes stay snake_case"""

    model_config = ConfigDict(populate_by_name=True)


class CreateTransactionRequest(CamelModel):
    """Request body for POST /transactions"""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    from_account: str = Field(..., alias="fromAccount", description="Source account", examples=["ACC-12345"])
    to_account: str = Field(..., alias="toAccount", description="Destination account", examples=["ACC-67890"])
    amount: Union[StrictInt, StrictFloat] = Field(
        ..., description="Positive amount, max 2 decimal places", examples=[100.5]
    )
    currency: str = Field(..., description="ISO 4217 currency code", examples=["USD"])
    type: TransactionType = Field(..., description="Transaction type")

    def to_domain(self) -> NewTransaction:
        return NewTransaction(
            from_account=self.from_account,
            to_account=self.to_account,
            amount=self.amount,
            currency=self.currency,
            type=self.type,
        )


class TransactionResponse(CamelModel):
    """Single transaction snapshot"""

    id: str
    from_account: str = Field(..., alias="fromAccount")
    to_account: str = Field(..., alias="toAccount")
    amount: float
    currency: str
    type: TransactionType
    timestamp: str
    status: TransactionStatus

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            from_account=transaction.from_account,
            to_account=transaction.to_account,
            amount=float(transaction.amount),
            currency=transaction.currency,
            type=transaction.type,
            timestamp=format_timestamp(transaction.timestamp),
            status=transaction.status,
        )


class BalanceResponse(CamelModel):
    """Response for GET /accounts/{accountId}/balance"""

    account_id: str = Field(..., alias="accountId")
    balance: float
    currency: str

    @classmethod
    def from_snapshot(cls, balance: Balance) -> "BalanceResponse":
        return cls(account_id=balance.account_id, balance=float(balance.balance), currency=balance.currency)


class SummaryResponse(CamelModel):
    """Response for GET /accounts/{accountId}/summary"""

    account_id: str = Field(..., alias="accountId")
    total_deposits: float = Field(..., alias="totalDeposits")
    total_withdrawals: float = Field(..., alias="totalWithdrawals")
    transaction_count: int = Field(..., alias="transactionCount")
    most_recent_date: Optional[str] = Field(None, alias="mostRecentDate")

    @classmethod
    def from_snapshot(cls, summary: Summary) -> "SummaryResponse":
        return cls(
            account_id=summary.account_id,
            total_deposits=float(summary.total_deposits),
            total_withdrawals=float(summary.total_withdrawals),
            transaction_count=summary.transaction_count,
            most_recent_date=format_timestamp(summary.most_recent_date) if summary.most_recent_date else None,
        )


class ErrorDetail(BaseModel):
    field: str
    message: str


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint"""

    model_config = ConfigDict(populate_by_name=True)

    error: str
    status_code: int = Field(..., alias="statusCode")
    timestamp: str
    path: str
    details: Optional[List[ErrorDetail]] = None
