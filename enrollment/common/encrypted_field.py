"""SQLAlchemy custom type for transparent encryption/decryption of sensitive fields."""

from typing import Optional

from sqlalchemy import String, TypeDecorator
from sqlalchemy.engine import Dialect

from enrollment.common.encryption import decrypt, encrypt

# Every Fernet token starts with the base64 of its version byte
FERNET_TOKEN_PREFIX = 'gAAAAA'


class EncryptedString(TypeDecorator):
    """
    SQLAlchemy type that transparently encrypts/decrypts string values.

    Usage:
        class Customer(BaseModel):
            mfa_secret: Mapped[str | None] = mapped_column(EncryptedString, nullable=True)

        customer.mfa_secret = 'JBSWY3DPEHPK3PXP'  # Stored as a Fernet token
        customer.mfa_secret  # Loaded back as 'JBSWY3DPEHPK3PXP'

    Tokens are non-deterministic, so encrypted columns cannot be filtered on.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Optional[str], dialect: Dialect) -> Optional[str]:
        if value is None:
            return None

        # Already a token, don't double encrypt
        if value.startswith(FERNET_TOKEN_PREFIX):
            return value

        return encrypt(value)

    def process_result_value(self, value: Optional[str], dialect: Dialect) -> Optional[str]:
        if value is None:
            return None

        return decrypt(value)

    @property
    def python_type(self):
        return str
