"""
Turn pydantic error details into human-readable messages.
"""

from typing import Any, Dict, Iterable, List

# wire field name -> label used in messages
FIELD_LABELS = {
    "title": "Title",
    "description": "Description",
    "priority": "Priority",
    "completed": "Completed",
    "tags": "Tags",
    "mentions": "Mentions",
    "userPid": "User PID",
    "todoPid": "Todo PID",
    "content": "Note content",
}


def _label(loc: Iterable[Any]) -> str:
    # drop the "body" prefix FastAPI adds
    parts = [str(p) for p in loc if p != "body"]
    if not parts:
        return "Request body"
    head = FIELD_LABELS.get(parts[0], parts[0])
    if len(parts) > 1:
        return f"{head}[{']['.join(parts[1:])}]"
    return head


def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> List[str]:
    """Build one message per pydantic error."""
    messages: List[str] = []
    for err in errors:
        label = _label(err.get("loc", ()))
        kind = err.get("type", "")
        if kind == "missing":
            messages.append(f"{label} is required")
        elif kind == "extra_forbidden":
            messages.append(f"{label} is not allowed")
        elif kind == "string_type":
            messages.append(f"{label} must be a string")
        elif kind == "literal_error" or kind == "enum":
            messages.append(f"{label} must be one of high, medium, low")
        else:
            msg = err.get("msg", "is invalid")
            # pydantic prefixes custom ValueError messages
            msg = msg.removeprefix("Value error, ")
            messages.append(f"{label}: {msg}")
    return messages
