"""
Text-to-value conversions shared by the card parsers.

Every helper takes the logical field name so a failed conversion raises
UnexpectedFormat that says which value on the page was malformed.
"""

from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation

from .exceptions import UnexpectedFormat

THOUSANDS_SEPARATOR = ','
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def strip_separators(text: str) -> str:
    """'1,234,567' → '1234567'."""
    return text.replace(THOUSANDS_SEPARATOR, '').strip()


def parse_decimal(text: str, field: str) -> Decimal:
    cleaned = strip_separators(text)
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise UnexpectedFormat(field, text, "a decimal number") from None
    if not value.is_finite():
        raise UnexpectedFormat(field, text, "a finite decimal number")
    return value


def parse_int(text: str, field: str) -> int:
    cleaned = strip_separators(text)
    if not cleaned.isdecimal():
        raise UnexpectedFormat(field, text, "an unsigned integer")
    return int(cleaned)


def parse_yes_no(text: str, field: str) -> bool:
    """Case-insensitive 'yes'/'no' flag."""
    normalized = text.strip().lower()
    if normalized == 'yes':
        return True
    if normalized == 'no':
        return False
    raise UnexpectedFormat(field, text, "'yes' or 'no'")


def format_unix_timestamp(text: str, field: str) -> str:
    """Unix seconds → 'YYYY-MM-DD HH:MM:SS' in UTC."""
    try:
        seconds = int(text.strip())
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        raise UnexpectedFormat(field, text, "a Unix timestamp in seconds") from None
    return moment.strftime(TIME_FORMAT)


def normalize_timestamp(text: str) -> str:
    """
    Reformat an ISO-8601 timestamp as 'YYYY-MM-DD HH:MM:SS' (UTC).

    The explorer shows localized strings for some locales; anything that is
    not ISO-8601 is returned unchanged.
    """
    candidate = text.strip()
    if candidate.endswith('Z'):
        candidate = candidate[:-1] + '+00:00'
    try:
        moment = datetime.fromisoformat(candidate)
    except ValueError:
        return text
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(TIME_FORMAT)
