"""Validation result data structures"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class RecordResult:
    """Outcome of validating one converter record

    Attributes:
        record_id: the record's id, or `converter-<index>` when it has none
        index: position in the input array
        errors: error strings in check order
        warnings: non-fatal notes (never affect pass/fail)
        word_count: words counted for the content-volume gate
    """
    record_id: str
    index: int
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    word_count: int = 0

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class ValidationReport:
    """Result of one validation run over a records array"""
    total: int
    failed_ids: List[str] = field(default_factory=list)
    word_counts: Dict[str, int] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: Dict[str, List[str]] = field(default_factory=dict)
    results: List[RecordResult] = field(default_factory=list)
    min_word_count: int = 1000

    @property
    def failed(self) -> int:
        return len(self.failed_ids)

    @property
    def valid(self) -> int:
        return self.total - self.failed

    @property
    def is_valid(self) -> bool:
        return not self.failed_ids

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly report using the published key names"""
        return {
            "isValid": self.is_valid,
            "total": self.total,
            "valid": self.valid,
            "failed": self.failed,
            "failedIds": list(self.failed_ids),
            "wordCounts": dict(self.word_counts),
            "warnings": list(self.warnings),
            "errors": {record_id: list(errors) for record_id, errors in self.errors.items()},
        }
