"""
server/api.py
=============
FastAPI tool server that exposes the game as a callable application and
persists a single high score.

Start the server::

    python -m server.api          # → http://localhost:3001/tools

Every tool is invoked with ``POST /tools/<name>`` and answers with a
tool-result envelope ``{"content": [{"type": "text", "text": <json>}]}``
whose text carries ``highScore``.

.. note::

   This server is **not** required to play the game.  Without it the
   game keeps its best score locally.
"""

import json
import logging
from typing import Any, Dict, List, Optional

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, StrictInt

from config import (
    SCORE_SERVER_HOST,
    SCORE_SERVER_PORT,
    TOOL_GET_HIGH_SCORE,
    TOOL_PLAY,
    TOOL_SUBMIT_SCORE,
)
from server.board import HighScoreBoard, InvalidScoreError

log = logging.getLogger(__name__)

# ── Pydantic schemas ─────────────────────────────────────────────────────────


class SubmitScoreRequest(BaseModel):
    """Body of ``/tools/submit-score``."""
    score: StrictInt = Field(..., ge=0)


class TextContent(BaseModel):
    type: str = "text"
    text: str


class ToolResult(BaseModel):
    """Envelope returned by every tool."""
    content: List[TextContent]


class ToolInfo(BaseModel):
    name: str
    title: str
    description: str


TOOLS: List[ToolInfo] = [
    ToolInfo(
        name=TOOL_PLAY,
        title="Play Flappy Bird",
        description=(
            "Launch a game of Flappy Bird! A classic side-scrolling game "
            "where you tap to keep the bird flying through gaps in pipes."
        ),
    ),
    ToolInfo(
        name=TOOL_SUBMIT_SCORE,
        title="Submit score",
        description="Submit a score from the Flappy Bird game",
    ),
    ToolInfo(
        name=TOOL_GET_HIGH_SCORE,
        title="Get high score",
        description="Get the current Flappy Bird high score",
    ),
]


def text_result(data: Dict[str, Any]) -> ToolResult:
    """Wrap *data* as the single JSON text item of a tool result."""
    return ToolResult(content=[TextContent(text=json.dumps(data))])


# ── FastAPI application ──────────────────────────────────────────────────────


def create_app(board: Optional[HighScoreBoard] = None) -> FastAPI:
    """Build the tool server around *board* (a fresh one when *None*)."""
    board = board if board is not None else HighScoreBoard()

    app = FastAPI(
        title="Flappy Bird Tool Server",
        description="Launches the game and keeps its high score.",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.board = board

    @app.get("/tools", response_model=List[ToolInfo])
    def list_tools():
        """Describe every callable tool."""
        return TOOLS

    @app.post(f"/tools/{TOOL_PLAY}", response_model=ToolResult)
    def play():
        """Launch a session; the client seeds its best score from the reply."""
        return text_result(board.launch())

    @app.post(f"/tools/{TOOL_SUBMIT_SCORE}", response_model=ToolResult)
    def submit_score(request: SubmitScoreRequest):
        """Record a finished run and return the authoritative best."""
        try:
            high_score = board.submit(request.score)
        except InvalidScoreError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        log.info("submit score=%d high=%d", request.score, high_score)
        return text_result({"highScore": high_score, "submitted": request.score})

    @app.post(f"/tools/{TOOL_GET_HIGH_SCORE}", response_model=ToolResult)
    def get_high_score():
        return text_result({"highScore": board.get()})

    return app


app = create_app()


# ── Standalone entry point ───────────────────────────────────────────────────

if __name__ == "__main__":
    from logging_setup import setup_logging

    setup_logging(logging.INFO)
    log.info(
        "Flappy Bird tool server running at http://localhost:%d/tools",
        SCORE_SERVER_PORT,
    )
    uvicorn.run(app, host=SCORE_SERVER_HOST, port=SCORE_SERVER_PORT)
