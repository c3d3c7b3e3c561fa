"""
StoreResult: outcome of a single call to the score-persistence collaborator.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class StoreResult:
    """
    Success payload or failure marker returned by every score store call.

    Attributes:
        success (bool): True when the collaborator answered with a valid best score.
        best_score (Optional[int]): Authoritative best score; set only on success.
        error (Optional[str]): Short failure reason (e.g. 'NETWORK_ERROR', 'MALFORMED').
    """
    success: bool
    best_score: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, best_score: int) -> "StoreResult":
        return cls(success=True, best_score=best_score)

    @classmethod
    def failed(cls, error: str) -> "StoreResult":
        return cls(success=False, error=error)
