"""Users API endpoints."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ApiResponse
from ..core.schemas.users import UserResponse
from ..core.services import UserService
from ..database import get_db_session

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=ApiResponse[List[UserResponse]])
async def get_users(session: AsyncSession = Depends(get_db_session)):
    """List all users."""
    user_service = UserService(session)
    return ApiResponse.ok(await user_service.get_all_users())


@router.get("/{pid}", response_model=ApiResponse[UserResponse])
async def get_user_by_pid(pid: str, session: AsyncSession = Depends(get_db_session)):
    """Get one user."""
    user_service = UserService(session)
    return ApiResponse.ok(await user_service.get_user_by_pid(pid))
