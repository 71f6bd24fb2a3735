"""Mock email delivery for password reset and welcome emails.

Nothing is actually sent. Each call logs what would have gone out, waits a
fixed delay to mimic a provider round trip and reports success. Any error
along the way is turned into a failed ``EmailResult`` instead of raising.
"""

import asyncio
from dataclasses import dataclass
from typing import Optional

from finance_tracker.config import settings
from finance_tracker.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_APP_BASE_URL = "http://localhost:5173"


@dataclass
class EmailResult:
    """Outcome of a (simulated) email send."""

    success: bool
    message: str


class EmailService:
    """Service simulating transactional email delivery."""

    def __init__(
        self,
        app_base_url: Optional[str] = None,
        reset_delay: float = 1.0,
        welcome_delay: float = 0.5,
    ):
        """Initialize email service.

        Args:
            app_base_url: Frontend base URL for links, defaults to REACT_APP_BASE_URL
            reset_delay: Simulated delivery time for reset emails, in seconds
            welcome_delay: Simulated delivery time for welcome emails, in seconds
        """
        self.app_base_url = app_base_url or settings.app_base_url or DEFAULT_APP_BASE_URL
        self.reset_delay = reset_delay
        self.welcome_delay = welcome_delay

    def build_reset_link(self, reset_token: str) -> str:
        """Frontend link that lets the user pick a new password."""
        return f"{self.app_base_url.rstrip('/')}/reset-password?token={reset_token}"

    async def send_password_reset_email(self, email: str, reset_token: str) -> EmailResult:
        """Pretend to send a password reset email.

        Args:
            email: Recipient address
            reset_token: Token embedded in the reset link

        Returns:
            EmailResult: success=True once the simulated delivery finishes,
            success=False if anything went wrong
        """
        try:
            logger.info(
                "Password reset email would be sent",
                email=email,
                reset_token=reset_token,
                reset_link=self.build_reset_link(reset_token),
            )
            await asyncio.sleep(self.reset_delay)
            return EmailResult(success=True, message="Password reset email sent successfully")
        except Exception as e:
            logger.error("Email sending error", email=email, error=str(e), exc_info=True)
            return EmailResult(success=False, message="Failed to send email")

    async def send_welcome_email(self, email: str, first_name: str) -> EmailResult:
        """Pretend to send a welcome email to a new user."""
        try:
            logger.info("Welcome email would be sent", email=email, greeting=f"Welcome {first_name}!")
            await asyncio.sleep(self.welcome_delay)
            return EmailResult(success=True, message="Welcome email sent successfully")
        except Exception as e:
            logger.error("Welcome email error", email=email, error=str(e), exc_info=True)
            return EmailResult(success=False, message="Failed to send welcome email")
