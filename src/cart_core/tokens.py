"""Anonymous cart token hashing."""

import base64
import hashlib


def hash_token(token: str | None) -> str | None:
    """Hash an anonymous access token the way it is stored on the cart row.

    Returns the base64-encoded SHA-256 digest, or None for a missing token.
    """
    if not token:
        return None
    digest = hashlib.sha256(token.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")
