"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from ledger_service.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_transaction_created(
    transaction_id: str,
    transaction_type: str,
    from_account: str,
    to_account: str,
    amount: str,
    currency: str,
) -> None:
    """Log structured creation event for audit"""
    logging.info(
        "Transaction recorded",
        extra={
            "step": "transaction_created",
            "transaction_id": transaction_id,
            "transaction_type": transaction_type,
            "from_account": from_account,
            "to_account": to_account,
            "amount": amount,
            "currency": currency,
        },
    )


def log_domain_error(
    request_id: Optional[str],
    path: str,
    status_code: int,
    message: str,
) -> None:
    """Log a client-facing domain failure"""
    logging.warning(
        f"Request rejected: {message}",
        extra={
            "request_id": request_id,
            "path": path,
            "status_code": status_code,
        },
    )
