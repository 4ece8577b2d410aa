"""
Security helpers for password hashing and caller identity.

Passwords are hashed with PBKDF2‑HMAC over SHA‑256 using a fresh
random salt per password.  The stored value keeps the salt next to
the digest so it can be verified later.  The API has no login
operation; ``verify_password`` exists for maintenance scripts and
tests.

There is no authentication layer either.  The identity of the caller
is taken from the ``X-User-Id`` request header and, failing that, from
the configured default creator.
"""

import hashlib
import hmac
import os
from typing import Optional

from fastapi import Request


SALT_BYTES = 16
ITERATIONS = 100_000
CALLER_HEADER = "X-User-Id"


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    Parameters
    ----------
    password : str
        The plain text password to hash.

    Returns
    -------
    str
        ``"<salt hex>$<digest hex>"``.
    """
    if not isinstance(password, str):
        raise TypeError("password must be a string")
    salt = os.urandom(SALT_BYTES)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a value produced by ``hash_password``."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except (AttributeError, ValueError):
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)


def get_caller_id(request: Request, default: Optional[str] = None) -> Optional[str]:
    """Return the identifier of the user on whose behalf the request runs."""
    caller = request.headers.get(CALLER_HEADER, "").strip()
    return caller or default or None
