"""/accounts - balances and summaries derived from the ledger"""

from fastapi import APIRouter, Depends, Path

from ledger_service.api.dependencies import get_account_service
from ledger_service.api.v1.schemas import BalanceResponse, ErrorResponse, SummaryResponse
from ledger_service.services.accounts import AccountService

router = APIRouter()


@router.get(
    "/accounts/{account_id}/balance",
    response_model=BalanceResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid account format"}},
)
def get_balance(
    account_id: str = Path(..., description="Account ID (format: ACC-XXXXX)", examples=["ACC-12345"]),
    service: AccountService = Depends(get_account_service),
):
    """Current balance; an account with no history reports zero."""
    return BalanceResponse.from_snapshot(service.get_balance(account_id))


@router.get(
    "/accounts/{account_id}/summary",
    response_model=SummaryResponse,
    responses={400: {"model": ErrorResponse, "description": "Invalid account format"}},
)
def get_summary(
    account_id: str = Path(..., description="Account ID (format: ACC-XXXXX)", examples=["ACC-12345"]),
    service: AccountService = Depends(get_account_service),
):
    """
    Deposit and withdrawal totals, transaction count and most recent activity.

    Transfers are counted but contribute to neither total.
    """
    return SummaryResponse.from_snapshot(service.get_summary(account_id))
