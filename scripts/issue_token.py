#!/usr/bin/env python3
"""Mint a bearer token for an existing user.

Credentials are normally issued by the identity service; this is for
operators and local development.

Usage:
    python scripts/issue_token.py alice@example.edu
    python scripts/issue_token.py 4f6c0a3e-5d1b-4e8e-9a55-2b7f1d0c9e21
"""

import argparse
import asyncio
import sys
from uuid import UUID

import logfire
from dishka import Scope

from projectlink.config import Settings
from projectlink.domain.model import User
from projectlink.domain.repository import UserRepository
from projectlink.domain.service import JWTService
from projectlink.domain.value import UserId
from projectlink.util.di.container import create_container
from projectlink.util.observability import configure_logfire


async def find_user(repository: UserRepository, identifier: str) -> User | None:
    try:
        user_id = UUID(identifier)
    except ValueError:
        return await repository.find_by_email(identifier)
    return await repository.find_by_id(UserId(user_id))


async def issue(identifier: str) -> str | None:
    container = create_container()
    try:
        async with container(scope=Scope.REQUEST) as request_container:
            repository = await request_container.get(UserRepository)
            jwt_service = await request_container.get(JWTService)
            user = await find_user(repository, identifier)
            if user is None:
                return None
            return jwt_service.create_token(str(user.id), is_admin=user.is_admin)
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("user", help="User ID or email address")
    args = parser.parse_args()

    configure_logfire(Settings())

    token = asyncio.run(issue(args.user))
    if token is None:
        logfire.warn("User not found", user=args.user)
        print(f"No user matches {args.user!r}", file=sys.stderr)
        return 1

    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
