"""
Result Storage

Keyed storage for finished analyses and the history listing built from it.
Stored results are immutable: an id can be written once.
"""

import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Protocol

from .analyzer import AnalysisResult
from .exceptions import DuplicateResultError, ResultNotFoundError


@dataclass(frozen=True)
class StoredAnalysis:
    """An analysis result with its storage metadata."""
    id: str
    result: AnalysisResult
    timestamp: datetime
    job_description: str = ""

    def to_dict(self) -> dict:
        data = self.result.to_dict()
        data.update({
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "jobDescription": self.job_description,
        })
        return data


@dataclass(frozen=True)
class HistoryEntry:
    """Row of the analysis history listing."""
    id: str
    timestamp: datetime
    resume_count: int
    top_score: int

    @classmethod
    def from_stored(cls, stored: StoredAnalysis) -> "HistoryEntry":
        scores = [r.score for r in stored.result.ranked_resumes]
        return cls(
            id=stored.id,
            timestamp=stored.timestamp,
            resume_count=len(scores),
            top_score=max(scores) if scores else 0,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "resumeCount": self.resume_count,
            "topScore": self.top_score,
        }


class ResultStore(Protocol):
    def put(self, analysis_id: str, result: AnalysisResult, job_description: str = "") -> StoredAnalysis:
        ...

    def get(self, analysis_id: str) -> StoredAnalysis:
        ...

    def list(self) -> list[HistoryEntry]:
        ...


class InMemoryResultStore:
    """Process-local ResultStore. Thread-safe; contents are lost on exit."""

    def __init__(self):
        self._items: dict[str, StoredAnalysis] = {}
        self._lock = threading.Lock()

    def put(
        self,
        analysis_id: str,
        result: AnalysisResult,
        job_description: str = "",
        timestamp: Optional[datetime] = None,
    ) -> StoredAnalysis:
        stored = StoredAnalysis(
            id=analysis_id,
            result=result,
            timestamp=timestamp or datetime.now(timezone.utc),
            job_description=job_description,
        )
        with self._lock:
            if analysis_id in self._items:
                raise DuplicateResultError(f"Analysis {analysis_id} is already stored")
            self._items[analysis_id] = stored
        return stored

    def save(self, result: AnalysisResult, job_description: str = "") -> StoredAnalysis:
        """Store under a freshly generated id."""
        return self.put(str(uuid.uuid4()), result, job_description)

    def get(self, analysis_id: str) -> StoredAnalysis:
        with self._lock:
            stored = self._items.get(analysis_id)
        if stored is None:
            raise ResultNotFoundError(f"Analysis not found: {analysis_id}")
        return stored

    def list(self) -> list[HistoryEntry]:
        """History rows, newest first."""
        with self._lock:
            items = list(self._items.values())
        entries = [HistoryEntry.from_stored(s) for s in items]
        return sorted(entries, key=lambda e: e.timestamp, reverse=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
