"""
Password service for registration and login flows.

Runs bcrypt work in a worker thread so event-loop hosts keep serving
requests while a hash is computed.
"""

from fastapi.concurrency import run_in_threadpool

from credcore.core.errors import WeakPasswordError
from credcore.core.logging import get_logger
from credcore.domain.models import StrengthAssessment
from credcore.domain.services import PasswordStrengthScorer
from credcore.infrastructure.crypto.hashing import PasswordHasher

logger = get_logger(__name__)


class PasswordService:
    """
    Async facade over PasswordHasher and PasswordStrengthScorer.

    Cancelling an awaiting caller raises CancelledError in that caller;
    a hash is only ever returned whole.

    Example:
        service = PasswordService()
        stored = await service.register("Abcdef1!")
        ok = await service.verify_password("Abcdef1!", stored)
    """

    def __init__(
        self,
        hasher: PasswordHasher | None = None,
        scorer: PasswordStrengthScorer | None = None,
    ):
        """
        Initialize password service.

        Args:
            hasher: Password hasher (defaults to configured policy).
            scorer: Strength scorer used by ``register``.
        """
        self._hasher = hasher or PasswordHasher.from_settings()
        self._scorer = scorer or PasswordStrengthScorer()

    def assess(self, password: str) -> StrengthAssessment:
        """Score a password without hashing it."""
        return self._scorer.assess(password)

    async def hash_password(self, password: str, work_factor: int | None = None) -> str:
        """
        Hash a password in a worker thread.

        Args:
            password: Plain text password.
            work_factor: Optional bcrypt cost.

        Returns:
            str: Encoded bcrypt hash.
        """
        return await run_in_threadpool(self._hasher.hash, password, work_factor)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        """
        Verify a password in a worker thread.

        Args:
            password: Candidate password.
            password_hash: Stored hash.

        Returns:
            bool: True if the password matches.
        """
        return await run_in_threadpool(self._hasher.verify, password, password_hash)

    async def register(self, password: str) -> str:
        """
        Gate a new password on strength, then hash it.

        Args:
            password: Password chosen at registration.

        Returns:
            str: Encoded bcrypt hash for storage.

        Raises:
            WeakPasswordError: If the password scores below the threshold.
        """
        assessment = self._scorer.assess(password)
        if not assessment.is_valid:
            logger.info(
                "password_rejected",
                score=assessment.score,
                strength=assessment.strength.value,
            )
            raise WeakPasswordError(
                assessment,
                "Password must meet at least 3 of: 8+ characters, uppercase, "
                "lowercase, number, special character",
            )
        return await self.hash_password(password)

    async def login(self, password: str, password_hash: str) -> tuple[bool, str | None]:
        """
        Verify a login and produce an upgraded hash when the cost changed.

        Args:
            password: Candidate password.
            password_hash: Stored hash.

        Returns:
            tuple: (matched, new_hash). ``new_hash`` is set only when the
            password matched and the stored cost differs from the default.
        """
        matched = await self.verify_password(password, password_hash)
        if not matched:
            return False, None

        if self._hasher.needs_rehash(password_hash):
            logger.info(
                "password_rehash_scheduled",
                old_work_factor=self._hasher.work_factor_of(password_hash),
            )
            return True, await self.hash_password(password)

        return True, None
