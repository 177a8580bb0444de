#!/usr/bin/env python3
"""
Create the first back-office administrator.

Usage:
    python scripts/create_admin.py "Jane Doe" jane@autohaus.example
    # the password is prompted for (or read from ADMIN_PASSWORD)
"""

from __future__ import annotations

import argparse
import getpass
import os
import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from autohaus.adapters.postgres_staff_user_repository import PostgresStaffUserRepository
from autohaus.domain.errors import ConflictError
from autohaus.infra.config import get_settings
from autohaus.infra.db.session import Database
from autohaus.use_cases.manage_staff import CreateStaffUser, CreateStaffUserRequest

MIN_PASSWORD_LENGTH = 8


def main() -> int:
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("name")
    parser.add_argument("email")
    args = parser.parse_args()

    password = os.getenv("ADMIN_PASSWORD") or getpass.getpass("Password: ")
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"❌ Password must be at least {MIN_PASSWORD_LENGTH} characters", file=sys.stderr)
        return 1

    database = Database(get_settings().database_url())
    database.connect()
    try:
        use_case = CreateStaffUser(PostgresStaffUserRepository(database))
        user = use_case.execute(
            CreateStaffUserRequest(name=args.name, email=args.email, password=password, is_admin=True)
        )
    except ConflictError as e:
        print(f"❌ {e.message}", file=sys.stderr)
        return 1
    finally:
        database.disconnect()

    print(f"✅ Administrator {user.email} created (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
