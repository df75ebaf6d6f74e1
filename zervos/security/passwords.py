"""Account password hashes.

Stored as ``pbkdf2_sha256$<iterations>$<salt hex>$<digest hex>``. Hashes made
with fewer iterations than currently configured are upgraded on the next
successful login (see ``needs_rehash``).
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
import secrets
from typing import NamedTuple

from ..config import settings

SCHEME = "pbkdf2_sha256"
SALT_BYTES = 16


class PasswordHash(NamedTuple):
    iterations: int
    salt: bytes
    digest: bytes

    def render(self) -> str:
        return "$".join((SCHEME, str(self.iterations), self.salt.hex(), self.digest.hex()))


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def parse_hash(stored_hash: str) -> PasswordHash | None:
    """Split a stored hash into its parts; None if it is not ours or is corrupt."""
    parts = (stored_hash or "").split("$")
    if len(parts) != 4 or parts[0] != SCHEME:
        return None
    try:
        return PasswordHash(int(parts[1]), binascii.unhexlify(parts[2]), binascii.unhexlify(parts[3]))
    except (ValueError, binascii.Error):
        return None


def hash_password(password: str, iterations: int | None = None) -> str:
    if not password:
        raise ValueError("Password is required")
    iterations = iterations or settings.password_hash_iterations
    salt = secrets.token_bytes(SALT_BYTES)
    return PasswordHash(iterations, salt, _derive(password, salt, iterations)).render()


def verify_password(password: str, stored_hash: str) -> bool:
    parsed = parse_hash(stored_hash)
    if not password or parsed is None:
        return False
    return hmac.compare_digest(_derive(password, parsed.salt, parsed.iterations), parsed.digest)


def needs_rehash(stored_hash: str) -> bool:
    parsed = parse_hash(stored_hash)
    return parsed is None or parsed.iterations < settings.password_hash_iterations
