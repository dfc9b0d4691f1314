"""
Outgoing email over SMTP.
"""
import asyncio
import logging
import smtplib
from email.message import EmailMessage

from app.config import Settings
from app.core.errors import DependencyError

logger = logging.getLogger(__name__)


class EmailDeliveryError(DependencyError):
    """The mail transport refused or failed to deliver a message."""


class EmailDispatcher:
    """Sends transactional email through the configured SMTP server."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def build_otp_message(self, email: str, otp: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = "Your verification code"
        message["From"] = self.settings.mail_from
        message["To"] = email
        message.set_content(
            f"Your verification code is {otp}.\n\n"
            f"It expires in {self.settings.otp_expire_minutes} minutes."
        )
        message.add_alternative(
            f"<p>Your verification code is</p>"
            f"<h1 style=\"letter-spacing: 4px;\">{otp}</h1>"
            f"<p>It expires in {self.settings.otp_expire_minutes} minutes.</p>",
            subtype="html",
        )
        return message

    async def send_otp(self, email: str, otp: str) -> None:
        """
        Send a one-time password to an email address.

        Raises:
            EmailDeliveryError: If the SMTP exchange fails
        """
        message = self.build_otp_message(email, otp)
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Failed to deliver OTP email to {email}: {e}")
            raise EmailDeliveryError(str(e)) from e
        logger.info(f"OTP email sent to {email}")

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port) as conn:
            if self.settings.smtp_use_tls:
                conn.starttls()
            if self.settings.smtp_username:
                conn.login(self.settings.smtp_username, self.settings.smtp_password or "")
            conn.send_message(message)
