#!/usr/bin/env python3
"""
Data models for repository view statistics.

Contains the core data classes used throughout the application.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List


@dataclass
class ViewRecord:
    """Represents a single view record with count, timestamp, and unique views."""
    count: int
    timestamp: str
    uniques: int

    def __str__(self) -> str:
        return f"{self.count} {self.timestamp} {self.uniques}"

    @property
    def date(self) -> date:
        """Calendar day of the record in UTC, time of day discarded."""
        parsed = datetime.fromisoformat(self.timestamp.replace("Z", "+00:00"))
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc)
        return parsed.date()

    @classmethod
    def from_github_entry(cls, entry: Dict[str, Any]) -> 'ViewRecord':
        """Create a ViewRecord from GitHub API response entry."""
        return cls(entry["count"], entry["timestamp"], entry["uniques"])


@dataclass
class StoredRecord:
    """A row in the kintone app: one project's views for one day."""
    project: str
    date: str
    count: int
    uniques: int

    def to_kintone_record(self) -> Dict[str, Dict[str, Any]]:
        return {
            "project": {"value": self.project},
            "date": {"value": self.date},
            "count": {"value": self.count},
            "uniques": {"value": self.uniques},
        }


@dataclass
class SyncResult:
    """Outcome of a single sync run."""
    project: str
    cutoff: date
    today: date
    pending: List[StoredRecord] = field(default_factory=list)
    record_ids: List[str] = field(default_factory=list)
    skipped: int = 0
    dry_run: bool = False

    @property
    def message(self) -> str:
        if not self.pending:
            return "[COMPLETE] nothing to do"
        if self.dry_run:
            return "[DRY RUN] would post: " + ", ".join(record.date for record in self.pending)
        return "[COMPLETE] record id: " + ", ".join(self.record_ids)
