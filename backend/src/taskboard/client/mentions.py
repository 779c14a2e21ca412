"""Helpers for ``@username`` mentions."""

import re
from typing import Iterable, List, Sequence

MENTION_PATTERN = re.compile(r"@([a-zA-Z0-9_]+)")
MAX_SUGGESTIONS = 5


def extract_mentions(text: str) -> List[str]:
    """Usernames mentioned in ``text``, in order, without the ``@``."""
    return MENTION_PATTERN.findall(text)


def filter_users_for_mentions(
    users: Sequence, value: str, already_mentioned: Iterable[str] = ()
) -> list:
    """Suggest users for a partially typed ``@name``."""
    if not value.startswith("@"):
        return []

    term = value[1:].lower()
    taken = set(already_mentioned)
    matches = [
        user
        for user in users
        if user.username not in taken and term in user.username.lower()
    ]
    return matches[:MAX_SUGGESTIONS]
