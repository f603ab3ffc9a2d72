from __future__ import annotations

from passlib.context import CryptContext

from guestnama.application.ports.password_hasher_port import PasswordHasherPort


class PasswordHasher(PasswordHasherPort):
    # Stored hashes are unsalted SHA-256 hex digests written by the sheet backend.
    def __init__(self):
        self._ctx = CryptContext(schemes=["hex_sha256"])

    def hash(self, plain_password: str) -> str:
        return self._ctx.hash(plain_password)
