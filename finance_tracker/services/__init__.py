"""Services package."""

from finance_tracker.services.email_service import EmailResult, EmailService

__all__ = ["EmailResult", "EmailService"]
