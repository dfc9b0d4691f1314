"""
One-time password issuance.
"""
import logging
import math
import secrets
import string
from datetime import datetime, timedelta, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from app.config import Settings
from app.core.errors import DependencyError, ValidationError
from app.core.validators import normalize_email
from app.database.databases.accounts_db import Collections
from app.models.otp import OtpMedium, OtpRecord
from app.services.email_service import EmailDeliveryError, EmailDispatcher

logger = logging.getLogger(__name__)


def generate_otp(length: int) -> str:
    """Random numeric code of the given length."""
    return "".join(secrets.choice(string.digits) for _ in range(length))


def _utcnow() -> datetime:
    # MongoDB hands datetimes back naive (UTC); compare like with like
    return datetime.now(timezone.utc).replace(tzinfo=None)


class OtpService:
    """Issues one-time passwords and dispatches them by email."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        settings: Settings,
        dispatcher: EmailDispatcher,
    ):
        self.db = db
        self.otps_collection = db[Collections.OTPS]
        self.settings = settings
        self.dispatcher = dispatcher

    async def get_active_otp(self, email: str) -> OtpRecord | None:
        """Unexpired OTP for this email, if one exists."""
        doc = await self.otps_collection.find_one(
            {"email": email, "expires_at": {"$gt": _utcnow()}}
        )
        if not doc:
            return None
        doc["_id"] = str(doc["_id"])
        return OtpRecord(**doc)

    async def request_otp(self, email: str) -> str:
        """
        Generate an OTP for an email address and send it.

        The record is stored before the email goes out. If delivery fails
        the record stays, so the address is still in cool-down until it
        expires.

        Returns:
            Confirmation message naming the recipient

        Raises:
            ValidationError: If the email is missing, malformed or still
                has an unexpired OTP
            DependencyError: If persistence or delivery fails
        """
        if not email:
            raise ValidationError("Email is missing")
        email = normalize_email(email)
        if email is None:
            raise ValidationError("Invalid email")

        active = await self.get_active_otp(email)
        if active is not None:
            remaining = (active.expires_at - _utcnow()).total_seconds()
            minutes = max(1, math.ceil(remaining / 60))
            unit = "minute" if minutes == 1 else "minutes"
            raise ValidationError(
                f"OTP already sent to {email}. Please try again after {minutes} {unit}."
            )

        now = _utcnow()
        record = OtpRecord(
            email=email,
            otp=generate_otp(self.settings.otp_length),
            medium=OtpMedium.EMAIL,
            created_at=now,
            expires_at=now + timedelta(minutes=self.settings.otp_expire_minutes),
        )

        try:
            await self.otps_collection.insert_one(record.to_document())
            await self.dispatcher.send_otp(email, record.otp)
        except (PyMongoError, EmailDeliveryError) as e:
            logger.error(f"Failed to send OTP to {email}: {e}")
            raise DependencyError(f"Failed to send OTP: {e}") from e

        logger.info(f"OTP issued to {email}")
        return f"OTP sent to {email}"
