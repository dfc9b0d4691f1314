"""
Index management for the accounts database.
Run on startup; ``create_index`` is a no-op for indexes that already exist.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database.databases.accounts_db import Collections


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the indexes the accounts invariants rely on."""
    # Email uniqueness is enforced here, not in application code
    await db[Collections.USERS].create_index("email", unique=True)

    otps = db[Collections.OTPS]
    await otps.create_index("email")
    # TTL: the server purges a record once expires_at has passed
    await otps.create_index("expires_at", expireAfterSeconds=0)
