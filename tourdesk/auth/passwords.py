"""Password hashing for tourdesk.

Hashes are Argon2id encoded strings; the random salt and the cost parameters are
embedded in the hash, so raising the cost later does not invalidate old hashes.
"""

from functools import lru_cache

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError
from dotenv import load_dotenv

from tourdesk.config import int_env

load_dotenv()


def build_password_hasher() -> PasswordHasher:
    """Build the hasher from PASSWORD_HASH_* (library defaults unless overridden).

    Raises:
        ConfigError: If a cost value is not an integer
    """
    return PasswordHasher(
        time_cost=int_env("PASSWORD_HASH_TIME_COST", "3"),
        memory_cost=int_env("PASSWORD_HASH_MEMORY_COST", "65536"),  # KiB
        parallelism=int_env("PASSWORD_HASH_PARALLELISM", "4"),
    )


_password_hasher = build_password_hasher()


def hash_password(password: str) -> str:
    """Hash a password with a fresh random salt."""
    return _password_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash.

    Returns False for a wrong password and for a corrupt or foreign hash.
    """
    try:
        return _password_hasher.verify(password_hash, password)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False


@lru_cache()
def _dummy_hash() -> str:
    return _password_hasher.hash("tourdesk-dummy-password")


def burn_password_check(password: str) -> None:
    """Spend the cost of one verification without a real hash.

    Used when the login email is unknown, so that case takes as long as a wrong password.
    """
    verify_password(password, _dummy_hash())
