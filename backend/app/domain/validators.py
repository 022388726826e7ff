"""Input validators for record fields.

Each validator either returns the normalized value or raises
:class:`~app.domain.exceptions.ValidationError` with a message suitable for
returning to API clients as-is.
"""

from datetime import datetime, timezone

from app.domain.entities import Disease
from app.domain.exceptions import ValidationError

DISEASE_NAMES: tuple[str, ...] = tuple(d.value for d in Disease)

NAME_REQUIRED_MESSAGE = "Name is required."
NAME_EMPTY_MESSAGE = "Name cannot be empty."
INVALID_DISEASE_MESSAGE = f"Disease must be one of: {', '.join(DISEASE_NAMES)}"
INVALID_DATE_MESSAGE = "dateAdded must be a valid ISO date/time."


def validate_name(value: str | None, *, required_message: str = NAME_REQUIRED_MESSAGE) -> str:
    """Return the trimmed name, rejecting missing or blank input."""
    if value is None or not value.strip():
        raise ValidationError(required_message)
    return value.strip()


def validate_disease(value: Disease | str | None) -> Disease:
    """Return the ``Disease`` member for *value*."""
    if isinstance(value, Disease):
        return value
    try:
        return Disease(value)
    except ValueError:
        raise ValidationError(INVALID_DISEASE_MESSAGE) from None


def validate_date(value: str | None) -> str:
    """Parse an ISO-8601 date or date-time and return its canonical UTC form."""
    parsed = _parse_datetime(value)
    if parsed is None:
        raise ValidationError(INVALID_DATE_MESSAGE)
    return format_timestamp(parsed)


def is_valid_date(value: str | None) -> bool:
    return _parse_datetime(value) is not None


def default_date() -> str:
    """Current instant in canonical form."""
    return format_timestamp(datetime.now(timezone.utc))


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    utc = moment.astimezone(timezone.utc)
    return (
        f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
        f"T{utc.hour:02d}:{utc.minute:02d}:{utc.second:02d}"
        f".{utc.microsecond // 1000:03d}Z"
    )


def _parse_datetime(value: str | None) -> datetime | None:
    """Parse *value* and return it converted to UTC, or ``None`` if unusable."""
    if not value or not value.strip():
        return None
    raw = value.strip()
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if raw[-1] in ("Z", "z"):
        raw = raw[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        # offsets can push year 1 / year 9999 values outside datetime's range
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None
