"""Domain models - pure Python dataclasses representing ledger entities"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class TransactionType(str, Enum):
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    TRANSFER = "transfer"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Transaction:
    """One monetary movement between two accounts; never mutated once stored"""

    from_account: str
    to_account: str
    amount: Decimal
    currency: str
    type: TransactionType
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_utcnow)
    status: TransactionStatus = TransactionStatus.COMPLETED

    def involves(self, account_id: str) -> bool:
        """True if the account is on either side of the movement"""
        return self.from_account == account_id or self.to_account == account_id


@dataclass
class NewTransaction:
    """Creation input as received from the caller, before validation"""

    from_account: str
    to_account: str
    amount: Union[int, float, Decimal]
    currency: str
    type: Union[TransactionType, str]


@dataclass(frozen=True)
class TransactionFilter:
    """Store-level filter criteria; every field is optional and combined with AND"""

    account_id: Optional[str] = None
    type: Optional[TransactionType] = None
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class Balance:
    """Point-in-time balance derived from the ledger"""

    account_id: str
    balance: Decimal
    currency: str


@dataclass(frozen=True)
class Summary:
    """Point-in-time activity summary derived from the ledger"""

    account_id: str
    total_deposits: Decimal
    total_withdrawals: Decimal
    transaction_count: int
    most_recent_date: Optional[datetime]
