"""
Password hashing helpers backed by bcrypt.

Each call to ``hash_password`` generates a fresh salt, so hashing the same
plaintext twice yields different strings that both verify. bcrypt only reads
the first 72 bytes of its input; longer passwords are rejected instead of
being truncated.
"""

import logging

import bcrypt

from ..exceptions import InvalidInputError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
MAX_PASSWORD_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode(ENCODING)


def hash_password(plaintext: str) -> str:
    """
    Hash a plaintext password with a random salt.

    Args:
        plaintext: Password as entered by the user

    Returns:
        The bcrypt hash as text, suitable for the users.password column

    Raises:
        InvalidInputError: If the password is longer than 72 bytes once encoded
    """
    encoded = _encode(plaintext)
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise InvalidInputError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long")
    return bcrypt.hashpw(encoded, bcrypt.gensalt()).decode(ENCODING)


def verify_password(plaintext: str, hashed: str) -> bool:
    """
    Check a plaintext password against a stored hash.

    Returns:
        True when the password matches; False on mismatch, for passwords that
        could never have been hashed, or when the stored value is not a
        bcrypt hash
    """
    encoded = _encode(plaintext)
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, hashed.encode(ENCODING))
    except ValueError as e:
        logger.warning(f"Stored password hash could not be checked: {e}")
        return False
