#!/usr/bin/env python3
"""Repair the follow graph.

Adds the missing half of asymmetric follow pairs and drops edges that point
at deleted users. Safe to run repeatedly.
"""

import asyncio
import sys

import logfire
from dishka import Scope

from projectlink.config import Settings
from projectlink.domain.service import UserService
from projectlink.util.di.container import create_container
from projectlink.util.observability import configure_logfire


async def reconcile() -> int:
    container = create_container()
    try:
        # One request scope, so all repairs commit together
        async with container(scope=Scope.REQUEST) as request_container:
            user_service = await request_container.get(UserService)
            return await user_service.reconcile_follow_graph()
    finally:
        await container.close()


def main() -> int:
    configure_logfire(Settings())

    try:
        repaired = asyncio.run(reconcile())
    except Exception as e:
        logfire.error(
            "Follow graph reconciliation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Follow graph reconciled", repaired=repaired)
    print(f"Repaired {repaired} user record(s)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
