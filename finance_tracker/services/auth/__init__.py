from finance_tracker.services.auth.auth_service import AuthService  # noqa: F401
