"""Public identifier generation."""

import uuid
from enum import Enum


class PublicIdPrefix(str, Enum):
    """Prefixes for externally visible ids."""

    USER = "user"
    TODO = "todo"
    NOTE = "note"


def generate_public_id(prefix: PublicIdPrefix) -> str:
    """Build an opaque public id like ``todo_3f2a...``."""
    return f"{prefix.value}_{uuid.uuid4().hex}"
