"""
==============================================================================
JSON Serialization Module
==============================================================================

JSON encoding that writes Decimal values as bare JSON numbers with their
exact digits (`1200.50` stays `1200.50`, never a binary float).

The standard encoder has no hook for raw number tokens, so each Decimal is
first written as a quoted marker carrying a per-call nonce, and the quoted
marker is then replaced by the decimal's digits.

==============================================================================
"""

from __future__ import annotations

import json
import re
import uuid
from decimal import Decimal
from typing import Any, Optional


class DecimalJSONEncoder(json.JSONEncoder):
    """Encoder that marks Decimal values for raw substitution."""

    def __init__(self, *args, marker: str, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._marker = marker

    def default(self, o: Any) -> Any:
        if isinstance(o, Decimal):
            if not o.is_finite():
                raise ValueError(f"Non-finite decimal is not JSON compliant: {o}")
            return f"{self._marker}{o}"
        return super().default(o)


def dumps(content: Any, indent: Optional[int] = None) -> str:
    """
    Serialize content to JSON text.

    Args:
        content: JSON-compatible content, Decimal values allowed anywhere
        indent: Spaces per level, or None for compact output

    Returns:
        JSON text
    """
    marker = f"@decimal-{uuid.uuid4().hex}:"
    text = json.dumps(
        content,
        cls=DecimalJSONEncoder,
        marker=marker,
        ensure_ascii=False,
        allow_nan=False,
        indent=indent,
        separators=(",", ": ") if indent else (",", ":"),
    )
    return re.sub(f'"{re.escape(marker)}([^"]+)"', r"\1", text)
