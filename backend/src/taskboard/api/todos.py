"""Todos API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ApiResponse, MessageResponse
from ..core.schemas.todos import TodoCreate, TodoResponse, TodoUpdate, TodoWithNotesResponse
from ..core.services import TodoService
from ..database import get_db_session

router = APIRouter(prefix="/todos", tags=["todos"])


@router.post("", response_model=ApiResponse[TodoResponse], status_code=201)
async def create_todo(request: TodoCreate, session: AsyncSession = Depends(get_db_session)):
    """Create a new todo."""
    todo_service = TodoService(session)
    return ApiResponse.ok(await todo_service.create_todo(request))


@router.get("", response_model=ApiResponse[List[TodoWithNotesResponse]])
async def get_todos(
    user_pid: Optional[str] = Query(None, alias="userPid"),
    session: AsyncSession = Depends(get_db_session),
):
    """List todos with notes, optionally only one user's."""
    todo_service = TodoService(session)
    return ApiResponse.ok(await todo_service.get_todos(user_pid))


@router.get("/{pid}", response_model=ApiResponse[TodoWithNotesResponse])
async def get_todo_by_pid(pid: str, session: AsyncSession = Depends(get_db_session)):
    """Get a todo with its notes."""
    todo_service = TodoService(session)
    return ApiResponse.ok(await todo_service.get_todo_by_pid(pid))


@router.patch("/{pid}", response_model=ApiResponse[TodoWithNotesResponse])
async def update_todo(
    pid: str,
    request: TodoUpdate,
    session: AsyncSession = Depends(get_db_session),
):
    """Partially update a todo."""
    todo_service = TodoService(session)
    return ApiResponse.ok(await todo_service.update_todo(pid, request))


@router.delete("/{pid}", response_model=MessageResponse)
async def delete_todo(pid: str, session: AsyncSession = Depends(get_db_session)):
    """Delete a todo and its notes."""
    todo_service = TodoService(session)
    await todo_service.delete_todo(pid)
    # plain body, not the envelope; clients depend on this shape
    return MessageResponse(message="Successfully deleted")


@router.patch("/{pid}/toggle", response_model=ApiResponse[TodoWithNotesResponse])
async def toggle_todo_completion(pid: str, session: AsyncSession = Depends(get_db_session)):
    """Flip the completed flag."""
    todo_service = TodoService(session)
    return ApiResponse.ok(await todo_service.toggle_todo_completion(pid))
