"""
db/dsn.py
---------
Builds the libpq connection string from the DB_* configuration fields.
"""

import config

# libpq needs quoting for empty values and for these characters
_NEEDS_QUOTES = (" ", "'", "\\", "\t", "\n")


def quote_value(value) -> str:
    """Quote one keyword value the way libpq parses it."""
    text = str(value)
    if text and not any(c in text for c in _NEEDS_QUOTES):
        return text
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"


def get_dsn(
    host: str = config.DB_HOST,
    user: str = config.DB_USER,
    password: str = config.DB_PASS,
    name: str = config.DB_NAME,
    port: int = config.DB_PORT,
) -> str:
    """
    Assemble a libpq keyword/value DSN.

    Returns:
        A string like ``host=localhost user=u password=p dbname=d port=5432``.
    """
    fields = {"host": host, "user": user, "password": password, "dbname": name, "port": port}
    return " ".join(f"{key}={quote_value(value)}" for key, value in fields.items())
