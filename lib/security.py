# =============================================================================
# lib/security.py - Password Policy and Hashing
# =============================================================================
# Password strength rules applied at sign-up and the bcrypt context used to
# store and compare passwords.
# =============================================================================

import string

from passlib.context import CryptContext


def is_strong_password(
    password: str,
    min_length: int = 8,
    min_lowercase: int = 1,
    min_uppercase: int = 1,
    min_numbers: int = 1,
    min_symbols: int = 0,
) -> bool:
    """
    Check a password against the strength policy.

    Symbols are any printable character that is not a letter or digit.

    Example:
        is_strong_password("Secret123")  # True
        is_strong_password("secret123")  # False, no uppercase letter
    """
    if len(password) < min_length:
        return False

    lowercase = sum(1 for c in password if c in string.ascii_lowercase)
    uppercase = sum(1 for c in password if c in string.ascii_uppercase)
    numbers = sum(1 for c in password if c.isdigit())
    symbols = sum(1 for c in password if not c.isalnum() and not c.isspace())

    return (
        lowercase >= min_lowercase
        and uppercase >= min_uppercase
        and numbers >= min_numbers
        and symbols >= min_symbols
    )


def build_password_context(rounds: int = 12) -> CryptContext:
    """Create the bcrypt context used for stored passwords."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def hash_password(context: CryptContext, password: str) -> str:
    """Hash a plaintext password."""
    return context.hash(password)


def verify_password(context: CryptContext, password: str, hashed: str | None) -> bool:
    """One-way comparison of a plaintext password against a stored hash."""
    if not hashed:
        return False
    try:
        return context.verify(password, hashed)
    except ValueError:
        # Stored value is not a recognised hash
        return False
