"""Random identifiers for cart sub-documents."""

import secrets
from collections.abc import Callable

UNMISTAKABLE_CHARS = "23456789ABCDEFGHJKLMNPQRSTWXYZabcdefghijkmnopqrstuvwxyz"
ID_LENGTH = 17

IdGenerator = Callable[[], str]


def random_id(length: int = ID_LENGTH) -> str:
    return "".join(secrets.choice(UNMISTAKABLE_CHARS) for _ in range(length))
