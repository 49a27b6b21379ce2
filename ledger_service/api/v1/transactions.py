"""/transactions - record and query ledger transactions"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from ledger_service.api.dependencies import get_transaction_service
from ledger_service.api.v1.schemas import CreateTransactionRequest, ErrorResponse, TransactionResponse
from ledger_service.domain.models import TransactionType
from ledger_service.services.transactions import TransactionQuery, TransactionService

router = APIRouter()


@router.post(
    "/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Validation failed"}},
)
def create_transaction(
    request_body: CreateTransactionRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    """
    Record a new transaction.

    The server assigns id, timestamp and status; currency is normalized to
    uppercase.
    """
    transaction = service.create_transaction(request_body.to_domain())
    return TransactionResponse.from_entity(transaction)


@router.get("/transactions", response_model=List[TransactionResponse])
def list_transactions(
    account_id: Optional[str] = Query(None, alias="accountId", description="Matches fromAccount or toAccount"),
    type: Optional[TransactionType] = Query(None, description="Transaction type"),
    from_date: Optional[str] = Query(None, alias="from", description="Start date (ISO 8601, inclusive)"),
    to_date: Optional[str] = Query(None, alias="to", description="End date (ISO 8601, inclusive)"),
    service: TransactionService = Depends(get_transaction_service),
):
    """List transactions, optionally filtered by account, type and date range."""
    query = TransactionQuery(account_id=account_id, type=type, from_date=from_date, to_date=to_date)
    return [TransactionResponse.from_entity(t) for t in service.get_all_transactions(query)]


@router.get(
    "/transactions/{transaction_id}",
    response_model=TransactionResponse,
    responses={404: {"model": ErrorResponse, "description": "Transaction not found"}},
)
def get_transaction(
    transaction_id: str,
    service: TransactionService = Depends(get_transaction_service),
):
    return TransactionResponse.from_entity(service.get_transaction_by_id(transaction_id))
