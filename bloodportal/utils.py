import time
from datetime import datetime, timezone


def utc_now_iso():
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T10:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def now_millis():
    return int(time.time() * 1000)


def form_text(data, field):
    """Stripped string value of a submitted field ('' when absent); ValueError for non-strings."""
    value = data.get(field)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise ValueError(f'Invalid {field}: {value!r}. Expected a string')
    return value.strip()


def as_text(value):
    """Backend rows are not validated; coerce to str so filtering and rendering hold."""
    return '' if value is None else str(value)
