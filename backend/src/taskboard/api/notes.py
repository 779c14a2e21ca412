"""Notes API endpoints."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.common import ApiResponse
from ..core.schemas.notes import NoteCreate, NoteResponse
from ..core.services import NoteService
from ..database import get_db_session

router = APIRouter(tags=["notes"])


@router.post("/notes", response_model=ApiResponse[NoteResponse], status_code=201)
async def create_note(request: NoteCreate, session: AsyncSession = Depends(get_db_session)):
    """Add a note to a todo."""
    note_service = NoteService(session)
    return ApiResponse.ok(await note_service.create_note(request))


@router.get("/todos/{pid}/notes", response_model=ApiResponse[List[NoteResponse]])
async def get_notes_by_todo_pid(pid: str, session: AsyncSession = Depends(get_db_session)):
    """List the notes of a todo."""
    note_service = NoteService(session)
    return ApiResponse.ok(await note_service.get_notes_by_todo_pid(pid))
