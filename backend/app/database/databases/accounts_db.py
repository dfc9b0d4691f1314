"""
Accounts database configuration.
Stores user identity records and one-time passwords.

The database name itself comes from ``Settings.mongo_db_name``.
"""


class Collections:
    """Collection names in the accounts database."""
    USERS = "users"
    OTPS = "otps"
