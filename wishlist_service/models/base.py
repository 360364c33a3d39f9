import uuid
from datetime import datetime, timezone


def new_id():
    return str(uuid.uuid4())


def utcnow():
    return datetime.now(timezone.utc)


def isoformat_utc(value):
    # SQLite hands back naive datetimes; every stored timestamp is UTC
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
