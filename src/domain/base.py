from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite DateTime columns drop tzinfo on the way back."""
    return datetime.now(UTC).replace(tzinfo=None)
