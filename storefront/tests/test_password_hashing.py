from __future__ import annotations

import pytest

from storefront.application.services.password_hashing import Argon2PasswordHasher
from storefront.domain.admins.exceptions import InvalidPasswordHashError


@pytest.fixture(scope="module")
def hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher()


def test_hash_uses_argon2id_with_fixed_cost(hasher: Argon2PasswordHasher) -> None:
    hashed = hasher.hash("correct-horse")

    assert hashed.startswith("$argon2id$")
    assert "m=19456,t=2,p=1" in hashed
    assert "correct-horse" not in hashed


def test_hashes_are_salted(hasher: Argon2PasswordHasher) -> None:
    assert hasher.hash("same-password") != hasher.hash("same-password")


def test_verify_accepts_matching_password(hasher: Argon2PasswordHasher) -> None:
    hashed = hasher.hash("correct-horse")

    assert hasher.verify("correct-horse", hashed) is True
    assert hasher.verify("wrong-horse", hashed) is False


@pytest.mark.parametrize("hashed", ["", "plaintext", "$argon2id$v=19$broken"])
def test_malformed_hash_raises(hasher: Argon2PasswordHasher, hashed: str) -> None:
    with pytest.raises(InvalidPasswordHashError) as exc_info:
        hasher.verify("anything", hashed)

    assert exc_info.value.code == "invalid_password_hash"
