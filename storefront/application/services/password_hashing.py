"""Password hashing strategies."""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2Hasher
from argon2 import Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from storefront.domain.admins.exceptions import InvalidPasswordHashError
from storefront.domain.admins.repositories import PasswordHasher

# Fixed cost parameters (OWASP Argon2id baseline: 19 MiB, t=2, p=1).
MEMORY_COST_KIB = 19456
TIME_COST = 2
PARALLELISM = 1
HASH_LEN = 32


class Argon2PasswordHasher(PasswordHasher):
    def __init__(self) -> None:
        self._hasher = _Argon2Hasher(
            time_cost=TIME_COST,
            memory_cost=MEMORY_COST_KIB,
            parallelism=PARALLELISM,
            hash_len=HASH_LEN,
            type=Type.ID,
        )

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bool(self._hasher.verify(hashed, password))
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError) as exc:
            raise InvalidPasswordHashError() from exc
