from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp; the store keeps DateTime columns without tzinfo."""
    return datetime.now(UTC).replace(tzinfo=None)
