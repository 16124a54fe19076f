from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return current UTC time as a naive datetime.

    Timestamp columns carry no time zone on either SQLite or PostgreSQL,
    so tzinfo is stripped and UTC is the storage convention.
    """
    return datetime.now(UTC).replace(tzinfo=None)
