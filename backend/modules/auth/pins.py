"""
PIN hashing with bcrypt.

The work factor is fixed. Plaintext PINs only ever exist in memory for the
duration of a hash or check call.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

PIN_HASH_ROUNDS = 10

# bcrypt ignores input past 72 bytes and newer releases reject it outright
_BCRYPT_MAX_BYTES = 72


def _encode(pin: str) -> bytes:
    return pin.encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_pin(pin: str) -> str:
    """Hash a PIN with a fresh salt."""
    hashed = bcrypt.hashpw(_encode(pin), bcrypt.gensalt(rounds=PIN_HASH_ROUNDS))
    return hashed.decode("utf-8")


def check_pin(pin: str, pin_hash: str) -> bool:
    """
    Verify a PIN against a stored hash using bcrypt's own comparison.

    Returns False for empty input or a stored value that is not a bcrypt hash.
    """
    if not pin or not pin_hash:
        return False

    try:
        return bcrypt.checkpw(_encode(pin), pin_hash.encode("utf-8"))
    except ValueError:
        logger.error("Stored PIN hash is not a valid bcrypt hash")
        return False
