"""Password hashing and verification for stored user credentials."""

import bcrypt

# Default bcrypt cost (rounds); Settings.BCRYPT_ROUNDS overrides it per deployment.
BCRYPT_ROUNDS = 12

# Bounds for signup/login input validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128
# bcrypt only reads the first 72 bytes; longer secrets are rejected, never truncated.
PASSWORD_MAX_BYTES = 72


def password_too_long(plain_password: str) -> bool:
    """True if the UTF-8 encoding exceeds what bcrypt can compare exactly."""
    return len(plain_password.encode("utf-8")) > PASSWORD_MAX_BYTES


def hash_password(plain_password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """
    Hash a plain-text password for storage. Do not store plain passwords.

    Raises ValueError for passwords over PASSWORD_MAX_BYTES.
    """
    if password_too_long(plain_password):
        raise ValueError(f"Password must be at most {PASSWORD_MAX_BYTES} bytes in UTF-8")
    return bcrypt.hashpw(
        plain_password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)
    ).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash. Over-long passwords never match."""
    if password_too_long(plain_password):
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False
