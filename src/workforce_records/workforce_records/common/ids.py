from __future__ import annotations

import uuid


def new_id() -> str:
    """Random 128-bit identifier, hex encoded."""
    return uuid.uuid4().hex
