from finance_tracker.services.transactions.transactions_service import TransactionService  # noqa: F401
