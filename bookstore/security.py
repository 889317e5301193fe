"""
Bookstore Backend — Password Hashing
======================================

What:  Salted adaptive password hashing with bcrypt, plus the placeholder
       login token.
Who:   Called by UserService on register and login.

bcrypt only looks at the first 72 bytes of its input (and recent releases
of the `bcrypt` package refuse longer input), so passwords are encoded as
UTF-8 and truncated to that limit in both directions.

The login token is NOT a credential: it is derived from the user id and
carries no cryptographic guarantee. Endpoints identify callers through the
plain User-Id header instead.
"""

from typing import Optional

import bcrypt

from bookstore.config import settings

BCRYPT_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Return a bcrypt hash of `password` (cost from settings, 12 by default)."""
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check `password` against a stored bcrypt hash.

    Returns False for a mismatch and for any hash bcrypt cannot parse
    (empty, truncated, not a bcrypt string); never raises for bad input.
    """
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # "Invalid salt" and friends: treat as a failed verification
        return False


def issue_token(user_id: int) -> str:
    """Placeholder session token returned by /login."""
    return f"fake-token-{user_id}"
