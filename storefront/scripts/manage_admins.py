# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Out-of-band administrator provisioning and session maintenance."""

from __future__ import annotations

import argparse
import getpass
import json
import sys
from collections.abc import Sequence

from storefront.infrastructure.audit import AuditAction, audit_log
from storefront.infrastructure.container import Container
from storefront.infrastructure.db import init_db
from storefront.shared.errors.base import AppError
from storefront.shared.logging import setup_logging


def _read_password(args: argparse.Namespace) -> str:
    if args.password:
        return args.password
    password = getpass.getpass("Password: ")
    confirm = getpass.getpass("Repeat password: ")
    if password != confirm:
        raise SystemExit("Passwords do not match")
    return password


def cmd_create(deps: Container, args: argparse.Namespace) -> int:
    admin = deps.provision_admin_use_case.execute(
        username=args.username,
        email=args.email,
        password=_read_password(args),
        first_name=args.first_name,
        last_name=args.last_name,
    )
    audit_log(AuditAction.ADMIN_CREATED, admin_id=admin.id, details={"source": "cli"})
    print(f"Admin '{admin.username}' created with id {admin.id}")
    return 0


def cmd_check(deps: Container, args: argparse.Namespace) -> int:
    admin = deps.admin_repository.find_by_username(args.username)
    if admin is None:
        print(f"Admin '{args.username}' not found", file=sys.stderr)
        return 1
    print(json.dumps(admin.sanitized().to_dict(), indent=2))
    return 0


def cmd_cleanup_sessions(deps: Container, args: argparse.Namespace) -> int:
    removed = deps.auth_service.cleanup_expired_sessions()
    audit_log(AuditAction.SESSIONS_CLEANED, details={"removed": removed})
    print(f"Removed {removed} expired sessions")
    return 0


def cmd_revoke_sessions(deps: Container, args: argparse.Namespace) -> int:
    admin = deps.admin_repository.find_by_username(args.username)
    if admin is None:
        print(f"Admin '{args.username}' not found", file=sys.stderr)
        return 1
    removed = deps.auth_service.delete_all_sessions(admin.id)
    audit_log(AuditAction.SESSIONS_REVOKED, admin_id=admin.id, details={"removed": removed})
    print(f"Revoked {removed} sessions for '{admin.username}'")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storefront-admin", description="Manage storefront administrators"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Provision a new administrator")
    create.add_argument("--username", required=True)
    create.add_argument("--email", required=True)
    create.add_argument("--first-name", default=None)
    create.add_argument("--last-name", default=None)
    create.add_argument(
        "--password", default=None, help="Prompted for when omitted (recommended)"
    )
    create.set_defaults(handler=cmd_create)

    check = sub.add_parser("check", help="Show an administrator record")
    check.add_argument("--username", required=True)
    check.set_defaults(handler=cmd_check)

    cleanup = sub.add_parser("cleanup-sessions", help="Delete expired sessions")
    cleanup.set_defaults(handler=cmd_cleanup_sessions)

    revoke = sub.add_parser("revoke-sessions", help="Delete every session of an admin")
    revoke.add_argument("--username", required=True)
    revoke.set_defaults(handler=cmd_revoke_sessions)

    return parser


def main(argv: Sequence[str] | None = None, deps: Container | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("WARNING")
    init_db()
    try:
        return args.handler(deps or Container(), args)
    except AppError as exc:
        print(f"Error: {exc.code}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
