"""
relay — Score relay between the game and the high-score store
=============================================================

Forwards finished runs to an external score-persistence collaborator
without blocking the frame loop, and reconciles the authoritative best
score into the local cache.

Modules
-------
result
    :class:`StoreResult` dataclass.
store
    :class:`ScoreStore` protocol, :class:`BoardScoreStore` and :class:`HttpScoreStore`.
score_relay
    :class:`ScoreRelay` fire-and-forget worker.
metrics
    :class:`RelayMetrics` counter snapshot.
"""

from .result import StoreResult
from .metrics import RelayMetrics
from .store import BoardScoreStore, HttpScoreStore, MalformedResponse, ScoreStore, parse_tool_result
from .score_relay import ScoreRelay

__all__ = [
    "StoreResult",
    "RelayMetrics",
    "ScoreStore",
    "BoardScoreStore",
    "HttpScoreStore",
    "MalformedResponse",
    "parse_tool_result",
    "ScoreRelay",
]
