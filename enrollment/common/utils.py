import datetime
import re
from typing import Any, Optional

_NON_DIGITS = re.compile(r'[^0-9]')
_ISO_DATE = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')


def utc_now() -> datetime.datetime:
    """
    Naive UTC timestamp, the form every datetime column is stored in
    """
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


def digits_only(value: Any) -> str:
    """
    Keeps only ASCII digits: "1234 5678-9012" -> "123456789012".
    Anything that isn't a string normalizes to an empty string.
    """
    if not isinstance(value, str):
        return ''

    return _NON_DIGITS.sub('', value)


def safe_iso_date_parse(value: Any) -> Optional[datetime.date]:
    """
    Parses a strict YYYY-MM-DD string and does not raise for anything else.
    Looser formats ("1990-1-1", "19900101", "01/01/1990") return None.
    """
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        return None

    try:
        return datetime.datetime.strptime(value, '%Y-%m-%d').date()
    except ValueError:
        # Right shape, impossible calendar date e.g. 2023-02-30
        return None
