"""
User database configuration.
Stores account identity and credential data.
"""

DB_NAME = "userdb"


class Collections:
    """Collection names in userdb."""
    USERS = "users"


# Each identity field gets its own unique index. A compound index would
# allow two accounts to share an email as long as the username differed.
UNIQUE_FIELDS = ("email", "user_name", "phone")
