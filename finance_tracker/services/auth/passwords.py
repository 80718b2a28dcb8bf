"""Hash e verifica delle password (PBKDF2-SHA256 con salt casuale).

Formato memorizzato: ``pbkdf2_sha256$<iterazioni>$<salt b64>$<hash b64>``.
"""
import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

ALGORITHM = 'pbkdf2_sha256'
DEFAULT_ITERATIONS = 600000
SALT_BYTES = 16
KEY_LENGTH = 32


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(algorithm=hashes.SHA256(), length=KEY_LENGTH, salt=salt, iterations=iterations)


def hash_password(password: str, iterations: int = DEFAULT_ITERATIONS) -> str:
    """Return the encoded PBKDF2 hash for ``password``."""
    salt = os.urandom(SALT_BYTES)
    digest = _kdf(salt, iterations).derive(password.encode('utf-8'))
    return '$'.join([
        ALGORITHM,
        str(iterations),
        base64.b64encode(salt).decode('ascii'),
        base64.b64encode(digest).decode('ascii'),
    ])


def verify_password(password: str, stored_hash: str) -> bool:
    """Verify a candidate password against an encoded hash.

    Malformed or foreign hashes never verify.
    """
    try:
        algorithm, iterations, salt_b64, digest_b64 = stored_hash.split('$')
        if algorithm != ALGORITHM:
            return False
        salt = base64.b64decode(salt_b64)
        digest = base64.b64decode(digest_b64)
        kdf = _kdf(salt, int(iterations))
    except (AttributeError, ValueError):
        return False
    try:
        kdf.verify(password.encode('utf-8'), digest)
        return True
    except InvalidKey:
        return False
