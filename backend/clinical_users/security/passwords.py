"""One-way password hashing for stored credentials."""

import hashlib
import logging

from clinical_users.exceptions import PasswordHashError

logger = logging.getLogger(__name__)


def hash_password(password: str, algorithm: str = "md5") -> str:
    """
    Hash a plaintext password to a hex digest.

    The digest is deterministic, so a stored hash can be compared against a
    freshly hashed candidate.

    Args:
        password: Plaintext password
        algorithm: Any algorithm name accepted by hashlib

    Returns:
        Lower-case hex digest

    Raises:
        PasswordHashError: If the algorithm is not available on this platform
    """
    try:
        digest = hashlib.new(algorithm)
    except (ValueError, TypeError) as e:
        logger.error(f"Password hash algorithm unavailable: {algorithm}")
        raise PasswordHashError(
            f"Hash algorithm '{algorithm}' is not available", algorithm=algorithm
        ) from e

    # shake_* digests have no fixed length
    if digest.digest_size == 0:
        raise PasswordHashError(
            f"Hash algorithm '{algorithm}' has no fixed digest size", algorithm=algorithm
        )

    digest.update(password.encode("utf-8"))
    return digest.hexdigest()
