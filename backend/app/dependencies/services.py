"""
Service dependencies wired from settings and the database.
"""
from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.config import Settings, get_settings
from app.database.connections import get_database
from app.services.auth_service import AuthService
from app.services.email_service import EmailDispatcher
from app.services.otp_service import OtpService
from app.services.user_service import UserService

SettingsDep = Annotated[Settings, Depends(get_settings)]


async def get_accounts_db(settings: SettingsDep) -> AsyncIOMotorDatabase:
    """Dependency to get the accounts database."""
    return await get_database(settings)


AccountsDb = Annotated[AsyncIOMotorDatabase, Depends(get_accounts_db)]


def get_email_dispatcher(settings: SettingsDep) -> EmailDispatcher:
    """Dependency to get the SMTP email dispatcher."""
    return EmailDispatcher(settings)


def get_auth_service(db: AccountsDb, settings: SettingsDep) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(db, settings)


def get_user_service(db: AccountsDb, settings: SettingsDep) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(db, settings)


def get_otp_service(
    db: AccountsDb,
    settings: SettingsDep,
    dispatcher: Annotated[EmailDispatcher, Depends(get_email_dispatcher)],
) -> OtpService:
    """Dependency to get OtpService instance."""
    return OtpService(db, settings, dispatcher)
