"""Identifier generation for clients and contracts"""

import uuid


def new_id(prefix: str = "") -> str:
    """Return a new unique identifier, optionally prefixed ("cl-", "ct-")."""
    return f"{prefix}{uuid.uuid4().hex[:12]}"
