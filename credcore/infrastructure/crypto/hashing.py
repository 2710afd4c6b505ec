"""
Password hashing with bcrypt.

Wraps passlib's bcrypt handler with an enforced work factor range. Hashes
are modular-crypt strings (``$2b$<cost>$<salt><digest>``) carrying their
own algorithm, cost and salt, so verification needs nothing but the
stored string.
"""

from dataclasses import dataclass

from passlib.context import CryptContext
from passlib.hash import bcrypt

from credcore.core.config import Settings, get_settings
from credcore.core.errors import InvalidArgumentError, InvalidHashFormatError
from credcore.core.logging import get_logger

logger = get_logger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Absolute limits of the bcrypt algorithm
BCRYPT_MIN_ROUNDS = 4
BCRYPT_MAX_ROUNDS = 31


@dataclass
class PasswordHasher:
    """
    Hashes and verifies passwords with a bounded bcrypt cost.

    Hashing is CPU-bound (tens to hundreds of milliseconds at the
    default cost). Async callers should go through PasswordService,
    which runs it in a worker thread.

    Attributes:
        default_work_factor: Cost used when none is given.
        min_work_factor: Lowest accepted cost.
        max_work_factor: Highest accepted cost.

    Example:
        >>> hasher = PasswordHasher()
        >>> stored = hasher.hash("correct horse")
        >>> hasher.verify("correct horse", stored)
        True
    """

    default_work_factor: int = 12
    min_work_factor: int = 10
    max_work_factor: int = 16

    def __post_init__(self) -> None:
        if not (
            BCRYPT_MIN_ROUNDS
            <= self.min_work_factor
            <= self.max_work_factor
            <= BCRYPT_MAX_ROUNDS
        ):
            raise InvalidArgumentError(
                f"Work factor bounds must satisfy {BCRYPT_MIN_ROUNDS} <= min <= max "
                f"<= {BCRYPT_MAX_ROUNDS}"
            )
        self._check_work_factor(self.default_work_factor)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "PasswordHasher":
        """Create a hasher using the configured work factor policy."""
        settings = settings or get_settings()
        return cls(
            default_work_factor=settings.password_work_factor,
            min_work_factor=settings.min_work_factor,
            max_work_factor=settings.max_work_factor,
        )

    def hash(self, password: str, work_factor: int | None = None) -> str:
        """
        Hash a password with a fresh random salt.

        Args:
            password: Plain text password, must be non-empty.
            work_factor: bcrypt cost; defaults to ``default_work_factor``.

        Returns:
            str: Encoded bcrypt hash.

        Raises:
            InvalidArgumentError: If the password is empty or the work
                factor is outside the accepted range.
        """
        if not isinstance(password, str) or not password:
            raise InvalidArgumentError("Password must be a non-empty string")
        if "\x00" in password:
            raise InvalidArgumentError("Password must not contain NUL characters")

        if work_factor is None:
            work_factor = self.default_work_factor
        self._check_work_factor(work_factor)

        return bcrypt.using(rounds=work_factor, ident="2b").hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Verify a password against a stored hash.

        Digest comparison is constant-time inside passlib.

        Args:
            password: Candidate password.
            password_hash: Encoded hash produced by ``hash``.

        Returns:
            bool: True only if the password matches.

        Raises:
            InvalidHashFormatError: If the stored hash cannot be parsed.
        """
        self._parse(password_hash)

        if not isinstance(password, str) or "\x00" in password:
            return False

        try:
            return pwd_context.verify(password, password_hash)
        except ValueError as e:
            logger.warning("password_hash_unparseable", error=type(e).__name__)
            raise InvalidHashFormatError() from e

    def work_factor_of(self, password_hash: str) -> int:
        """
        Read the bcrypt cost embedded in a stored hash.

        Raises:
            InvalidHashFormatError: If the stored hash cannot be parsed.
        """
        return self._parse(password_hash).rounds

    def needs_rehash(self, password_hash: str) -> bool:
        """
        Check if a stored hash was made with a different cost than the default.

        Callers typically rehash on the next successful login.
        """
        return self.work_factor_of(password_hash) != self.default_work_factor

    def _parse(self, password_hash: str) -> bcrypt:
        if not isinstance(password_hash, str) or not pwd_context.identify(password_hash):
            raise InvalidHashFormatError()
        try:
            return bcrypt.from_string(password_hash)
        except ValueError as e:
            raise InvalidHashFormatError() from e

    def _check_work_factor(self, work_factor: int) -> None:
        if isinstance(work_factor, bool) or not isinstance(work_factor, int):
            raise InvalidArgumentError("Work factor must be an integer")
        if not self.min_work_factor <= work_factor <= self.max_work_factor:
            raise InvalidArgumentError(
                f"Work factor must be between {self.min_work_factor} "
                f"and {self.max_work_factor}"
            )


def hash_password(password: str, work_factor: int | None = None) -> str:
    """
    Hash a password using the configured policy.

    Args:
        password: Plain text password to hash.
        work_factor: Optional bcrypt cost.

    Returns:
        str: Bcrypt hashed password.
    """
    return PasswordHasher.from_settings().hash(password, work_factor)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against its hash.

    Args:
        plain_password: The password to verify.
        hashed_password: The bcrypt hashed password.

    Returns:
        bool: True if password matches, False otherwise.
    """
    return PasswordHasher.from_settings().verify(plain_password, hashed_password)
