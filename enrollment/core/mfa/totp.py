"""
TOTP primitives (RFC 6238 over RFC 4226 HOTP) shared by the MFA service.

Everything here is a pure function of its arguments, time included, so callers
decide which clock a code is derived against.
"""

import base64
import calendar
import hmac
import secrets
from datetime import datetime
from io import BytesIO
from typing import Any, List, Union
from urllib.parse import quote

import pyotp
import qrcode

from enrollment.core.mfa.constants import (
    ALGORITHM,
    BACKUP_CODE_COUNT,
    BACKUP_CODE_DIGITS,
    CODE_DIGITS,
    SECRET_LENGTH,
    TIME_STEP,
)

TimeType = Union[datetime, int, float]


def generate_secret() -> str:
    """
    Generate a new random TOTP secret.
    Returns base32-encoded secret without padding (recommended by RFC 6238).
    """
    return pyotp.random_base32(length=SECRET_LENGTH)


def to_unix_seconds(for_time: TimeType) -> int:
    """
    Naive datetimes are UTC, the form every timestamp in the database takes
    """
    if isinstance(for_time, datetime):
        return calendar.timegm(for_time.utctimetuple())
    return int(for_time)


def time_step(for_time: TimeType) -> int:
    return to_unix_seconds(for_time) // TIME_STEP


def derive_code(secret: str, for_time: TimeType) -> str:
    """
    The 6 digit code an authenticator app shows for `secret` at `for_time`.

    pyotp packs the step counter as an 8 byte big-endian integer, HMAC-SHA1s it
    with the base32 decoded secret (padded to a multiple of 8 first) and
    dynamically truncates the digest, zero padded to CODE_DIGITS.
    """
    totp = pyotp.TOTP(secret, digits=CODE_DIGITS, interval=TIME_STEP)
    return totp.generate_otp(time_step(for_time))


def codes_match(submitted: Any, expected: str) -> bool:
    """
    Constant time, exact comparison. Never raises, anything that isn't a string
    simply doesn't match.
    """
    if not isinstance(submitted, str):
        return False
    return hmac.compare_digest(submitted.encode('utf-8'), expected.encode('utf-8'))


def build_provisioning_uri(secret: str, account: str, issuer: str) -> str:
    """
    otpauth:// URI authenticator apps scan to add the account. Parameter order is
    part of the wire format clients compare against.
    """
    label_issuer = quote(issuer, safe='')
    label_account = quote(account, safe='')
    secret_param = quote(secret, safe='')
    return (
        f'otpauth://totp/{label_issuer}:{label_account}'
        f'?secret={secret_param}&issuer={label_issuer}'
        f'&algorithm={ALGORITHM}&digits={CODE_DIGITS}&period={TIME_STEP}'
    )


def generate_backup_codes(count: int = BACKUP_CODE_COUNT) -> List[str]:
    """
    Single-use numeric codes, one independent secure random draw each
    """
    upper_bound = 10**BACKUP_CODE_DIGITS
    return [f'{secrets.randbelow(upper_bound):0{BACKUP_CODE_DIGITS}d}' for _ in range(count)]


def render_qr_code(uri: str) -> str:
    """
    Generate QR code image for a provisioning URI.
    Returns base64-encoded PNG image.
    """
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4,
    )
    qr.add_data(uri)
    qr.make(fit=True)

    img = qr.make_image(fill_color='black', back_color='white')

    buffer = BytesIO()
    img.save(buffer, format='PNG')
    return base64.b64encode(buffer.getvalue()).decode()
