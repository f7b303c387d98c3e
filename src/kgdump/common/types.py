# kgdump/common/types.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any


@dataclass
class Result:
    """
    Lightweight return container for operations that may succeed or fail.

    Attributes:
        ok: True if the operation succeeded, False if it failed.
        value: The result value when ok is True; otherwise None.
        error: An error message or short description when ok is False.

    Notes:
        - Returned by parse attempts inside the literal decoders, where a bad
          piece of input should fall back to verbatim output instead of
          interrupting the whole normalization.
        - Callers check `if result.ok:` to branch on success.
    """
    ok: bool
    value: Any | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: Any) -> Result:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> Result:
        return cls(ok=False, error=error)
