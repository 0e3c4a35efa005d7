#!/usr/bin/env python3
"""Approve a pending account so it can log in.

Usage:
    python scripts/approve_user.py <email>
"""

import asyncio
import sys

import logfire

from guard.application.usecase.user import ApproveUserRequest, ApproveUserUseCase
from guard.config import Settings
from guard.domain.error import NotFoundError
from guard.util.di.container import create_container
from guard.util.observability import configure_logfire


async def approve(email: str) -> int:
    container = create_container()
    try:
        # Request scope commits the session on exit
        async with container() as request_container:
            use_case = await request_container.get(ApproveUserUseCase)
            result = await use_case.execute(ApproveUserRequest(email=email))
    except NotFoundError:
        print(f"No user with email {email}", file=sys.stderr)
        return 1
    finally:
        await container.close()

    if result.previous_status == result.status:
        print(f"{result.email} was already approved")
    else:
        print(f"Approved {result.email} ({result.user_id})")
    return 0


def main() -> int:
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2

    configure_logfire(Settings())

    with logfire.span("approve_user_script"):
        return asyncio.run(approve(sys.argv[1]))


if __name__ == "__main__":
    sys.exit(main())
