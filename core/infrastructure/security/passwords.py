"""
Password hashing.

bcrypt with a fixed cost factor. Hashing is CPU-bound, so both calls
run in a worker thread to keep the event loop responsive.
"""
import asyncio
import logging

import bcrypt


logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted, slow password hashing backed by bcrypt."""

    def __init__(self, rounds: int = 10) -> None:
        """
        Args:
            rounds: bcrypt cost factor (log2 of iterations)
        """
        self._rounds = rounds

    async def hash(self, plain: str) -> str:
        """Return the bcrypt hash of `plain` as text."""
        return await asyncio.to_thread(self._hash_sync, plain)

    async def verify(self, plain: str, hashed: str) -> bool:
        """
        Check `plain` against a stored hash.

        Returns False for a mismatch or an unusable hash; never raises.
        """
        try:
            return await asyncio.to_thread(
                bcrypt.checkpw, plain.encode("utf-8"), hashed.encode("utf-8")
            )
        except (ValueError, TypeError) as e:
            logger.warning(f"Password verification failed: {type(e).__name__}")
            return False

    def _hash_sync(self, plain: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(plain.encode("utf-8"), salt).decode("utf-8")
