"""Encryption utilities for storing sensitive data like MFA shared secrets."""

import base64
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from enrollment import settings


class EncryptionService:
    """
    Process wide Fernet wrapper, built once from settings on first use
    """

    _instance: Optional['EncryptionService'] = None
    _fernet: Optional[Fernet] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._fernet is None:
            self._fernet = self._get_fernet()

    @staticmethod
    def _get_fernet() -> Fernet:
        """
        PBKDF2-SHA256 stretches DB_ENCRYPTION_KEY into the 32 byte urlsafe key
        Fernet expects. Changing the key or salt makes stored secrets unreadable.
        """
        if not settings.DB_ENCRYPTION_KEY:
            raise ValueError(
                'DB_ENCRYPTION_KEY must be set in environment variables. '
                'Generate one with: python -c "import secrets; print(secrets.token_urlsafe(32))"'
            )

        password = settings.DB_ENCRYPTION_KEY.encode()
        # Fixed salt so the same key derives across processes
        salt = settings.DB_ENCRYPTION_SALT.encode('utf-8')

        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=100000,
        )
        key = base64.urlsafe_b64encode(kdf.derive(password))

        return Fernet(key)

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt a string and return the Fernet token as a string.
        """
        if not plaintext:
            return plaintext

        encrypted_bytes = self._fernet.encrypt(plaintext.encode())
        return encrypted_bytes.decode('utf-8')

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt a Fernet token. Values that were written before encryption was
        turned on are not valid tokens and are returned unchanged.
        """
        if not ciphertext:
            return ciphertext

        try:
            decrypted_bytes = self._fernet.decrypt(ciphertext.encode())
        except InvalidToken:
            return ciphertext

        return decrypted_bytes.decode('utf-8')


_encryption_service = EncryptionService()


def encrypt(plaintext: str) -> str:
    return _encryption_service.encrypt(plaintext)


def decrypt(ciphertext: str) -> str:
    return _encryption_service.decrypt(ciphertext)
