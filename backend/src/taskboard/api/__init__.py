"""API routers for Taskboard."""

from .errors import register_exception_handlers
from .health import router as health_router
from .notes import router as notes_router
from .todos import router as todos_router
from .users import router as users_router

__all__ = [
    "users_router",
    "todos_router",
    "notes_router",
    "health_router",
    "register_exception_handlers",
]
