"""Password hashing using Argon2.

Provides password hashing and verification using the Argon2id algorithm.
Every hash gets its own random salt, embedded in the encoded output, so no
salt is shared between accounts.
"""

from argon2 import PasswordHasher as Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from gatekeeper.core.config import Settings
from gatekeeper.core.exceptions import MalformedHashError


class PasswordHasher:
    """Hashes and verifies plaintext passwords.

    The work factor is fixed at construction from configuration and shared
    by every call.
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ) -> None:
        """Initialize the hasher.

        Args:
            time_cost: Number of Argon2 iterations.
            memory_cost: Memory usage in KiB.
            parallelism: Number of parallel lanes.
        """
        self._hasher = Argon2Hasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        """Build a hasher from the configured work factor."""
        return cls(
            time_cost=settings.hash_time_cost,
            memory_cost=settings.hash_memory_cost,
            parallelism=settings.hash_parallelism,
        )

    def hash(self, password: str) -> str:
        """Hash a password using Argon2id.

        Args:
            password: The plaintext password to hash.

        Returns:
            The encoded hash, including algorithm parameters and salt.

        Example:
            >>> hasher = PasswordHasher()
            >>> hasher.hash("secret1").startswith("$argon2id$")
            True
        """
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        """Verify a password against a stored hash.

        Uses constant-time comparison. A mismatch returns False; only a
        stored hash that cannot be parsed raises.

        Args:
            password: The plaintext password to verify.
            hashed: The encoded hash to verify against.

        Returns:
            True if the password matches, False otherwise.

        Raises:
            MalformedHashError: If the stored hash is not a valid Argon2 hash.
        """
        try:
            return self._hasher.verify(hashed, password)
        except VerifyMismatchError:
            return False
        except InvalidHashError as e:
            raise MalformedHashError(explanation="Stored password hash could not be parsed") from e
        except VerificationError:
            return False
