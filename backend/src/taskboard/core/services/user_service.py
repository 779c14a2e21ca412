"""User service implementation."""

from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import NotFoundError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from ..schemas.users import UserResponse
from .interfaces import IUserService

logger = get_logger("services.users")


class UserService(IUserService):
    """User service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def get_all_users(self) -> List[UserResponse]:
        users = await self.user_repo.find_all()
        return [UserResponse.model_validate(user) for user in users]

    async def get_user_by_pid(self, pid: str) -> UserResponse:
        user = await self.user_repo.find_by_pid(pid)
        if not user:
            logger.error(f"User not found for pid: {pid}")
            raise NotFoundError("User not found")
        return UserResponse.model_validate(user)
