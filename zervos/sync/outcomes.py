"""Per-record outcomes and the batch summary."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

from ..schemas.sync import ENTITY_KINDS


class SkipReason(str, Enum):
    MISSING_EMAIL = "missing_email"
    MISSING_NAME = "missing_name"
    MISSING_LABEL_KEY = "missing_label_key"
    UNRESOLVED_CUSTOMER = "unresolved_customer"


@dataclass(frozen=True)
class Processed:
    kind: str
    action: Literal["inserted", "updated"]
    record_id: int


@dataclass(frozen=True)
class Skipped:
    kind: str
    reason: SkipReason


RecordOutcome = Processed | Skipped


@dataclass
class KindTally:
    inserted: int = 0
    updated: int = 0
    skipped: Counter = field(default_factory=Counter)

    def to_dict(self, include_skipped: bool = False) -> dict:
        data: dict = {"inserted": self.inserted, "updated": self.updated}
        if include_skipped:
            data["skipped"] = {reason.value: n for reason, n in self.skipped.items()}
        return data


@dataclass
class SyncSummary:
    """Insert/update tallies per entity kind for one sync batch."""

    kinds: dict[str, KindTally] = field(
        default_factory=lambda: {kind: KindTally() for kind in ENTITY_KINDS}
    )
    customers_created_by_appointments: int = 0

    def record(self, outcome: RecordOutcome) -> None:
        tally = self.kinds[outcome.kind]
        if isinstance(outcome, Skipped):
            tally.skipped[outcome.reason] += 1
        elif outcome.action == "inserted":
            tally.inserted += 1
        else:
            tally.updated += 1

    def __getitem__(self, kind: str) -> KindTally:
        return self.kinds[kind]

    @property
    def total_written(self) -> int:
        return sum(t.inserted + t.updated for t in self.kinds.values())

    def to_dict(self, include_skipped: bool = False) -> dict:
        data = {kind: tally.to_dict(include_skipped) for kind, tally in self.kinds.items()}
        if include_skipped:
            data["customers_created_by_appointments"] = self.customers_created_by_appointments
        return data
