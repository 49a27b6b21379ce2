"""Prometheus metrics for monitoring ledger activity and request latency"""

from decimal import Decimal

from prometheus_client import Counter, Histogram

# Ledger metrics
transactions_created_counter = Counter(
    "ledger_transactions_created_total",
    "Total transactions recorded",
    ["type"],  # deposit | withdrawal | transfer
)

transaction_amount_counter = Counter(
    "ledger_transaction_amount_total",
    "Sum of recorded transaction amounts",
    ["currency"],
)

validation_failures_counter = Counter(
    "ledger_validation_failures_total",
    "Requests rejected by format validation",
    ["operation"],  # create_transaction | list_transactions | get_balance | get_summary
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_transaction(transaction_type: str, currency: str, amount: Decimal) -> None:
    """Record volume metrics for a newly stored transaction"""
    transactions_created_counter.labels(type=transaction_type).inc()
    transaction_amount_counter.labels(currency=currency).inc(float(amount))


def record_validation_failure(operation: str) -> None:
    validation_failures_counter.labels(operation=operation).inc()
