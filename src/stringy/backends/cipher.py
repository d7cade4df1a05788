"""Password-based encryption and password hashing.

Encryption derives a Fernet key from the password with PBKDF2-HMAC-SHA256
and a random 16-byte salt. The output is the URL-safe base64 encoding of
``salt + fernet_token``, so every ciphertext is self-contained.

Usage:
    cipher = FernetCipher(iterations=390_000)
    token = cipher.encrypt("secret text", "password")
    cipher.decrypt(token, "password")  # "secret text"
"""

from __future__ import annotations

import base64
import binascii
import logging
import os

import bcrypt
from cryptography.fernet import Fernet, InvalidToken
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from stringy.core.errors import BackendError

logger = logging.getLogger(__name__)

SALT_SIZE = 16
BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class FernetCipher:
    """Fernet encryption keyed by a password."""

    def __init__(self, iterations: int = 390_000):
        self.iterations = iterations

    def _fernet(self, password: str, salt: bytes) -> Fernet:
        kdf = PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=32,
            salt=salt,
            iterations=self.iterations,
        )
        key = kdf.derive(password.encode("utf-8", "surrogateescape"))
        return Fernet(base64.urlsafe_b64encode(key))

    def encrypt(self, plaintext: str, password: str) -> str:
        salt = os.urandom(SALT_SIZE)
        token = self._fernet(password, salt).encrypt(plaintext.encode("utf-8", "surrogateescape"))
        return base64.urlsafe_b64encode(salt + token).decode("ascii")

    def decrypt(self, ciphertext: str, password: str) -> str:
        try:
            raw = base64.urlsafe_b64decode(ciphertext.encode("ascii"))
        except (binascii.Error, UnicodeEncodeError) as exc:
            raise BackendError("Ciphertext is not valid base64") from exc
        if len(raw) <= SALT_SIZE:
            raise BackendError("Ciphertext is too short")

        salt, token = raw[:SALT_SIZE], raw[SALT_SIZE:]
        try:
            plaintext = self._fernet(password, salt).decrypt(token)
        except InvalidToken as exc:
            logger.debug("Decryption failed: wrong password or tampered ciphertext")
            raise BackendError("Decryption failed: wrong password or corrupted data") from exc
        return plaintext.decode("utf-8", "surrogateescape")


class BcryptHasher:
    """bcrypt password hashing; ``crypt`` accepts bcrypt salts only."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, password: str, rounds: int | None = None) -> str:
        salt = bcrypt.gensalt(rounds=rounds or self.rounds)
        return self._hashpw(password, salt)

    def crypt(self, password: str, salt: str) -> str:
        if not salt.startswith(BCRYPT_PREFIXES):
            raise BackendError(
                f"Unsupported crypt salt {salt[:4]!r}; expected one of {', '.join(BCRYPT_PREFIXES)}"
            )
        return self._hashpw(password, salt.encode("ascii"))

    def _hashpw(self, password: str, salt: bytes) -> str:
        try:
            hashed = bcrypt.hashpw(password.encode("utf-8", "surrogateescape"), salt)
        except ValueError as exc:
            raise BackendError(f"bcrypt failed: {exc}") from exc
        return hashed.decode("ascii")
