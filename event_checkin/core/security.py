"""Password hashing for per-event admin passwords."""
from typing import Optional

import argon2

ph = argon2.PasswordHasher(
    time_cost=2,
    memory_cost=65536,
    parallelism=1,
    hash_len=32,
    salt_len=16
)


def get_password_hash(password: str) -> str:
    """Hash a password using Argon2."""
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its Argon2 hash."""
    try:
        return ph.verify(password_hash, password)
    except argon2.exceptions.VerificationError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


def verify_event_password(candidate: str, stored_password: Optional[str]) -> bool:
    """Check a candidate against an event's stored Argon2 admin password hash."""
    if not stored_password:
        return False

    return verify_password(candidate, stored_password)
