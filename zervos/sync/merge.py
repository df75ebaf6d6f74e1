"""Field merge rules for sync updates.

``legacy`` mode is the long-standing API contract: a falsy incoming text value
(missing, null, "") falls back to the stored value, so clients cannot clear a
field through sync. Counters and flags fall back only on null so ``0`` and
``false`` still apply. ``presence`` mode lets any field the client sent win,
including empty strings and explicit nulls.
"""

from __future__ import annotations

from typing import Any

from ..schemas.sync import SyncRecord

MERGE_MODES = ("legacy", "presence")


def or_default(value: Any, default: Any) -> Any:
    """Insert-time default for text fields (``value || default``)."""
    return value or default


def none_default(value: Any, default: Any) -> Any:
    """Insert-time default for counters and flags (``value ?? default``)."""
    return default if value is None else value


class FieldMerger:
    """Merges an incoming sync record onto an existing row."""

    def __init__(self, mode: str = "legacy") -> None:
        if mode not in MERGE_MODES:
            raise ValueError(f"Unknown merge mode {mode!r}; expected one of {MERGE_MODES}")
        self.mode = mode

    def value(self, record: SyncRecord, field: str, existing: Any, *, nullable_only: bool = False) -> Any:
        incoming = getattr(record, field)
        if self.mode == "presence":
            return incoming if record.sent(field) else existing
        if nullable_only:
            return none_default(incoming, existing)
        return incoming or existing

    def apply(
        self,
        row: Any,
        record: SyncRecord,
        fields: tuple[str, ...],
        *,
        nullable_only: tuple[str, ...] = (),
    ) -> None:
        """Overwrite ``fields`` on ``row`` with the merged values."""
        for name in fields:
            merged = self.value(record, name, getattr(row, name), nullable_only=name in nullable_only)
            setattr(row, name, merged)
