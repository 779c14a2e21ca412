"""Demo users. Users are never created through the API."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from .logging import get_logger
from .models.user import User
from .repositories.user_repository import UserRepository

logger = get_logger("seed")

SEED_USERS = [
    {"username": "alex", "display_name": "Alex Johnson"},
    {"username": "maria", "display_name": "Maria Garcia"},
    {"username": "james", "display_name": "James Wilson"},
    {"username": "sarah", "display_name": "Sarah Chen"},
    {"username": "jamal", "display_name": "Jamal Ahmed"},
]


async def seed_users(session: AsyncSession) -> List[User]:
    """Insert the demo users whose usernames are not taken yet."""
    repo = UserRepository(session)
    created = []
    for data in SEED_USERS:
        if await repo.is_username_taken(data["username"]):
            continue
        created.append(await repo.create_user(dict(data)))

    logger.info(
        "Users seeded",
        extra={"seeded": [user.username for user in created], "total": len(SEED_USERS)},
    )
    return created
