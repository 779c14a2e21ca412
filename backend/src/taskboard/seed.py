"""Seed the demo users: ``python -m taskboard.seed``."""

import asyncio

from .core.logging import setup_logging
from .core.seed import seed_users
from .database import AsyncSessionLocal, create_tables, engine


async def _main() -> None:
    await create_tables()
    async with AsyncSessionLocal() as session:
        users = await seed_users(session)
    await engine.dispose()
    print(f"Seeded {len(users)} user(s)")


def main() -> None:
    setup_logging()
    asyncio.run(_main())


if __name__ == "__main__":
    main()
