from __future__ import annotations

import json

import pytest

from storefront.infrastructure.container import Container
from storefront.scripts.manage_admins import main

pytestmark = pytest.mark.usefixtures("database")

CREATE_ARGS = [
    "create",
    "--username",
    "owner",
    "--email",
    "Owner@Example.com",
    "--password",
    "long-enough-secret",
]


@pytest.fixture()
def deps() -> Container:
    return Container()


def test_create_then_check(deps: Container, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(CREATE_ARGS, deps) == 0
    assert "Admin 'owner' created" in capsys.readouterr().out

    assert main(["check", "--username", "owner"], deps) == 0
    record = json.loads(capsys.readouterr().out)

    assert record["username"] == "owner"
    assert record["email"] == "owner@example.com"
    assert record["is_active"] is True
    assert "password_hash" not in record

    stored = deps.admin_repository.find_by_username("owner")
    assert stored is not None
    assert stored.password_hash.startswith("$argon2id$")


def test_duplicate_admin_is_reported(deps: Container, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(CREATE_ARGS, deps) == 0
    capsys.readouterr()

    assert main(CREATE_ARGS, deps) == 2
    assert "admin_already_exists" in capsys.readouterr().err


def test_short_password_is_rejected(deps: Container, capsys: pytest.CaptureFixture[str]) -> None:
    args = CREATE_ARGS[:-1] + ["short"]

    assert main(args, deps) == 2
    assert "password_too_short" in capsys.readouterr().err
    assert deps.admin_repository.find_by_username("owner") is None


def test_check_unknown_admin(deps: Container, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["check", "--username", "nobody"], deps) == 1
    assert "not found" in capsys.readouterr().err


def test_revoke_and_cleanup_sessions(
    deps: Container, capsys: pytest.CaptureFixture[str]
) -> None:
    main(CREATE_ARGS, deps)
    first = deps.auth_service.login("owner", "long-enough-secret")
    second = deps.auth_service.login("owner", "long-enough-secret")
    assert first is not None and second is not None
    capsys.readouterr()

    assert main(["revoke-sessions", "--username", "owner"], deps) == 0
    assert "Revoked 2 sessions" in capsys.readouterr().out
    assert deps.auth_service.validate_session(first.session.id) is None

    assert main(["cleanup-sessions"], deps) == 0
    assert "Removed 0 expired sessions" in capsys.readouterr().out


def test_create_prompts_for_password(
    deps: Container, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    answers = iter(["prompted-secret", "prompted-secret"])
    monkeypatch.setattr("getpass.getpass", lambda prompt="": next(answers))

    assert main(CREATE_ARGS[:-2], deps) == 0
    assert deps.auth_service.login("owner", "prompted-secret") is not None


def test_create_prompt_mismatch_aborts(
    deps: Container, monkeypatch: pytest.MonkeyPatch
) -> None:
    answers = iter(["prompted-secret", "different-secret"])
    monkeypatch.setattr("getpass.getpass", lambda prompt="": next(answers))

    with pytest.raises(SystemExit):
        main(CREATE_ARGS[:-2], deps)
