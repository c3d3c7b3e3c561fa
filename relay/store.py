"""
Score stores: the external persistence collaborator seen from the game.

    - ScoreStore protocol (submit / get / launch, all returning StoreResult)
    - BoardScoreStore: in-process adapter around HighScoreBoard
    - HttpScoreStore: client for the FastAPI tool server (aiohttp)

Stores never raise for collaborator problems; every failure is folded
into a ``StoreResult`` with ``success=False``.
"""

import asyncio
import json
import logging
from typing import Any, Optional, Protocol

import aiohttp

from config import (
    RELAY_TIMEOUT_S,
    TOOL_GET_HIGH_SCORE,
    TOOL_PLAY,
    TOOL_SUBMIT_SCORE,
)
from server.board import HighScoreBoard, InvalidScoreError
from .result import StoreResult

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    """Operations offered by the score-persistence collaborator."""

    def submit(self, score: int) -> StoreResult: ...

    def get(self) -> StoreResult: ...

    def launch(self) -> StoreResult: ...


class MalformedResponse(ValueError):
    """The tool server answered with something that is not a tool result."""


def parse_tool_result(payload: Any) -> int:
    """
    Extract ``highScore`` from a tool-result envelope.

    Args:
        payload: Decoded JSON body, expected to look like
            ``{"content": [{"type": "text", "text": "{\\"highScore\\": 3}"}]}``.

    Returns:
        int: The authoritative best score.

    Raises:
        MalformedResponse: If any level of the envelope is missing or of the wrong type.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse("tool result is not an object")
    content = payload.get("content")
    if not isinstance(content, list):
        raise MalformedResponse("tool result has no content list")
    text = next(
        (
            item.get("text")
            for item in content
            if isinstance(item, dict) and item.get("type") == "text"
        ),
        None,
    )
    if not isinstance(text, str):
        raise MalformedResponse("tool result has no text item")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"text item is not JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedResponse("text item is not a JSON object")
    high_score = data.get("highScore")
    if isinstance(high_score, bool) or not isinstance(high_score, int) or high_score < 0:
        raise MalformedResponse(f"invalid highScore {high_score!r}")
    return high_score


class BoardScoreStore:
    """
    Talks to a HighScoreBoard living in the same process.

    Used when no tool server is configured, and in tests.
    """

    def __init__(self, board: Optional[HighScoreBoard] = None):
        self.board = board if board is not None else HighScoreBoard()

    def submit(self, score: int) -> StoreResult:
        try:
            return StoreResult.ok(self.board.submit(score))
        except InvalidScoreError as e:
            logger.warning(f"Board rejected score: {e}")
            return StoreResult.failed("INVALID_SCORE")

    def get(self) -> StoreResult:
        return StoreResult.ok(self.board.get())

    def launch(self) -> StoreResult:
        return StoreResult.ok(self.board.launch()["highScore"])


class HttpScoreStore:
    """
    Client for the high-score tool server.

    Each call opens a short-lived aiohttp session and runs it to
    completion with ``asyncio.run``, so it must be called from a thread
    without a running event loop (the relay worker thread).
    """

    def __init__(self, base_url: str, timeout: float = RELAY_TIMEOUT_S):
        """
        Initialize the store.

        Args:
            base_url: Root URL of the tool server, e.g. ``http://localhost:3001``.
            timeout: Total timeout per call in seconds.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def submit(self, score: int) -> StoreResult:
        return self._call(TOOL_SUBMIT_SCORE, {"score": score})

    def get(self) -> StoreResult:
        return self._call(TOOL_GET_HIGH_SCORE, {})

    def launch(self) -> StoreResult:
        return self._call(TOOL_PLAY, {})

    def _call(self, tool: str, arguments: dict) -> StoreResult:
        return asyncio.run(self._call_async(tool, arguments))

    async def _call_async(self, tool: str, arguments: dict) -> StoreResult:
        url = f"{self._base_url}/tools/{tool}"
        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout),
                headers={"Content-Type": "application/json"},
            ) as session:
                async with session.post(url, json=arguments) as response:
                    if response.status != 200:
                        body = await response.text()
                        logger.warning(
                            f"Tool {tool} answered HTTP {response.status}: {body[:200]}"
                        )
                        return StoreResult.failed(f"HTTP {response.status}")
                    data = await response.json(content_type=None)

            return StoreResult.ok(parse_tool_result(data))

        except asyncio.TimeoutError:
            logger.warning(f"Timeout calling tool {tool}")
            return StoreResult.failed("TIMEOUT")
        except aiohttp.ClientError as e:
            logger.warning(f"Network error calling tool {tool}: {e}")
            return StoreResult.failed("NETWORK_ERROR")
        except ValueError as e:
            logger.warning(f"Malformed reply from tool {tool}: {e}")
            return StoreResult.failed("MALFORMED")
