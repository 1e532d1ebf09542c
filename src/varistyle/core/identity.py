"""Element identifiers for associating labels with their controls."""

from __future__ import annotations

import uuid

DEFAULT_PREFIX = "input"


def ensure_identity(supplied_id: str | None = None, prefix: str = DEFAULT_PREFIX) -> str:
    """Return the caller's id, or generate one unique within the process.

    Examples:
        >>> ensure_identity("email")
        'email'
        >>> ensure_identity().startswith("input-")
        True
    """
    if supplied_id:
        return supplied_id
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
