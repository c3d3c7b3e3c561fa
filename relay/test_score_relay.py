#!/usr/bin/env python3
"""
Tests for the score relay, the stores and tool-result parsing.
"""

import asyncio
import json
import socket
import threading
import unittest

from aiohttp import web

from relay.result import StoreResult
from relay.score_relay import ScoreRelay
from relay.store import (
    BoardScoreStore,
    HttpScoreStore,
    MalformedResponse,
    parse_tool_result,
)
from server.board import HighScoreBoard
from sim.best_score import BestScore


def envelope(data) -> dict:
    return {"content": [{"type": "text", "text": json.dumps(data)}]}


class RaisingStore:
    def submit(self, score):
        raise RuntimeError("store exploded")

    def get(self):
        raise RuntimeError("store exploded")

    def launch(self):
        raise RuntimeError("store exploded")


class FailingStore:
    def __init__(self):
        self.calls = 0

    def submit(self, score):
        self.calls += 1
        return StoreResult.failed("NETWORK_ERROR")

    def get(self):
        self.calls += 1
        return StoreResult.failed("TIMEOUT")

    def launch(self):
        self.calls += 1
        return StoreResult.failed("TIMEOUT")


class BlockingStore:
    """Holds every call until released, to check the caller never waits."""

    def __init__(self):
        self.release = threading.Event()
        self.seen = []

    def submit(self, score):
        self.release.wait(5)
        self.seen.append(score)
        return StoreResult.ok(max(self.seen))

    def get(self):
        return StoreResult.ok(0)


class ParseToolResultTests(unittest.TestCase):
    def test_valid_envelope(self):
        self.assertEqual(parse_tool_result(envelope({"highScore": 12, "submitted": 3})), 12)

    def test_malformed_envelopes(self):
        bad = [
            None,
            [],
            {},
            {"content": "nope"},
            {"content": []},
            {"content": [{"type": "image", "data": "x"}]},
            {"content": [{"type": "text", "text": "not json"}]},
            {"content": [{"type": "text", "text": "[1, 2]"}]},
            envelope({"score": 3}),
            envelope({"highScore": -1}),
            envelope({"highScore": 2.5}),
            envelope({"highScore": True}),
            envelope({"highScore": "7"}),
        ]
        for payload in bad:
            with self.subTest(payload=payload):
                with self.assertRaises(MalformedResponse):
                    parse_tool_result(payload)


class BoardScoreStoreTests(unittest.TestCase):
    def test_submit_and_get(self):
        store = BoardScoreStore(HighScoreBoard(10))
        self.assertEqual(store.submit(4), StoreResult.ok(10))
        self.assertEqual(store.submit(15), StoreResult.ok(15))
        self.assertEqual(store.get(), StoreResult.ok(15))

    def test_invalid_score_becomes_failure(self):
        store = BoardScoreStore()
        result = store.submit(-1)
        self.assertFalse(result.success)
        self.assertEqual(result.error, "INVALID_SCORE")
        self.assertEqual(store.get().best_score, 0)

    def test_launch_reports_current_best(self):
        store = BoardScoreStore(HighScoreBoard(6))
        self.assertEqual(store.launch(), StoreResult.ok(6))


class InlineRelayTests(unittest.TestCase):
    def test_submit_raises_local_best(self):
        best = BestScore(3)
        relay = ScoreRelay(BoardScoreStore(HighScoreBoard(10)), best=best, background=False)

        relay.report_score(15)

        self.assertEqual(best.value, 15)
        self.assertEqual(relay.store.board.get(), 15)
        self.assertEqual(relay.metrics.report()["submitted"], 1)

    def test_lower_score_still_reconciles_to_remote_best(self):
        best = BestScore(0)
        relay = ScoreRelay(BoardScoreStore(HighScoreBoard(10)), best=best, background=False)

        relay.report_score(2)

        self.assertEqual(best.value, 10)
        self.assertEqual(relay.metrics.report()["raised"], 1)

    def test_refresh_never_lowers_best(self):
        best = BestScore(20)
        relay = ScoreRelay(BoardScoreStore(HighScoreBoard(5)), best=best, background=False)

        relay.refresh_best()

        self.assertEqual(best.value, 20)
        self.assertEqual(relay.metrics.report()["refreshed"], 1)
        self.assertEqual(relay.metrics.report()["raised"], 0)

    def test_launch_seeds_local_best(self):
        best = BestScore(1)
        relay = ScoreRelay(BoardScoreStore(HighScoreBoard(33)), best=best, background=False)

        relay.launch()

        self.assertEqual(best.value, 33)
        self.assertEqual(relay.metrics.report()["refreshed"], 1)

    def test_raising_store_is_contained(self):
        best = BestScore(7)
        relay = ScoreRelay(RaisingStore(), best=best, background=False)

        with self.assertLogs("relay.score_relay", level="ERROR"):
            relay.report_score(30)
            relay.refresh_best()

        self.assertEqual(best.value, 7)
        self.assertEqual(relay.metrics.report()["failed"], 2)

    def test_failure_result_keeps_best(self):
        best = BestScore(7)
        relay = ScoreRelay(FailingStore(), best=best, background=False)

        relay.report_score(30)
        relay.refresh_best()

        self.assertEqual(best.value, 7)
        self.assertEqual(relay.metrics.report()["failed"], 2)

    def test_rejected_score_keeps_best(self):
        best = BestScore(7)
        relay = ScoreRelay(BoardScoreStore(), best=best, background=False)

        relay.report_score(-4)

        self.assertEqual(best.value, 7)
        self.assertEqual(relay.metrics.report()["failed"], 1)

    def test_closed_relay_drops_work(self):
        store = FailingStore()
        relay = ScoreRelay(store, background=False)
        relay.close()

        relay.report_score(1)

        self.assertEqual(store.calls, 0)


class BackgroundRelayTests(unittest.TestCase):
    def test_report_does_not_block_and_flush_drains(self):
        store = BlockingStore()
        best = BestScore()
        relay = ScoreRelay(store, best=best)
        try:
            relay.report_score(9)
            relay.report_score(4)
            self.assertEqual(best.value, 0)
            self.assertFalse(relay.flush(timeout=0.05))

            store.release.set()
            self.assertTrue(relay.flush(timeout=5))
            self.assertEqual(store.seen, [9, 4])
            self.assertEqual(best.value, 9)
        finally:
            store.release.set()
            relay.close()

    def test_flush_without_work_returns_immediately(self):
        relay = ScoreRelay(FailingStore())
        self.assertTrue(relay.flush(timeout=0))
        relay.close()

    def test_close_joins_worker(self):
        relay = ScoreRelay(BoardScoreStore(HighScoreBoard(2)))
        relay.refresh_best()
        relay.close()
        self.assertFalse(relay._thread.is_alive())
        self.assertEqual(relay.best_score, 2)


class FakeToolServer:
    """aiohttp app answering every tool call with a canned reply.

    Runs on its own event loop in a background thread so the synchronous
    store under test can call it.
    """

    def __init__(self):
        self.requests = []
        self.reply = (200, envelope({"highScore": 0}))
        self.port = None
        self._loop = asyncio.new_event_loop()
        self._thread = threading.Thread(target=self._loop.run_forever, daemon=True)
        self._runner = None

    async def _handle_tool(self, request: web.Request) -> web.Response:
        text = await request.text()
        self.requests.append((request.path, json.loads(text or "{}")))
        status, body = self.reply
        if isinstance(body, str):
            return web.Response(text=body, status=status, content_type="application/json")
        return web.json_response(body, status=status)

    async def _start(self):
        app = web.Application()
        app.router.add_post("/tools/{tool}", self._handle_tool)
        self._runner = web.AppRunner(app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, "127.0.0.1", 0)
        await site.start()
        self.port = self._runner.addresses[0][1]

    def start(self):
        self._thread.start()
        asyncio.run_coroutine_threadsafe(self._start(), self._loop).result(5)

    def stop(self):
        asyncio.run_coroutine_threadsafe(self._runner.cleanup(), self._loop).result(5)
        self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(5)
        self._loop.close()


class HttpScoreStoreTests(unittest.TestCase):
    def setUp(self):
        self.server = FakeToolServer()
        self.server.start()
        self.store = HttpScoreStore(f"http://127.0.0.1:{self.server.port}/", timeout=2.0)

    def tearDown(self):
        self.server.stop()

    def test_submit_posts_score_and_parses_envelope(self):
        self.server.reply = (200, envelope({"highScore": 15, "submitted": 15}))
        result = self.store.submit(15)
        self.assertEqual(result, StoreResult.ok(15))
        self.assertEqual(self.server.requests, [("/tools/submit-score", {"score": 15})])

    def test_get_and_launch(self):
        self.server.reply = (200, envelope({"highScore": 4}))
        self.assertEqual(self.store.get(), StoreResult.ok(4))
        self.assertEqual(self.store.launch(), StoreResult.ok(4))
        paths = [path for path, _ in self.server.requests]
        self.assertEqual(paths, ["/tools/get-high-score", "/tools/play-flappy-bird"])

    def test_http_error_status(self):
        self.server.reply = (422, {"detail": "bad score"})
        result = self.store.submit(1)
        self.assertFalse(result.success)
        self.assertEqual(result.error, "HTTP 422")

    def test_malformed_body(self):
        self.server.reply = (200, "definitely not json")
        self.assertEqual(self.store.get().error, "MALFORMED")

        self.server.reply = (200, envelope({"highScore": "high"}))
        self.assertEqual(self.store.get().error, "MALFORMED")

    def test_unreachable_server(self):
        sock = socket.socket()
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
        sock.close()

        store = HttpScoreStore(f"http://127.0.0.1:{port}", timeout=2.0)
        result = store.submit(3)
        self.assertFalse(result.success)
        self.assertIn(result.error, ("NETWORK_ERROR", "TIMEOUT"))

    def test_relay_over_http(self):
        self.server.reply = (200, envelope({"highScore": 40, "submitted": 12}))
        best = BestScore(12)
        relay = ScoreRelay(self.store, best=best, background=False)
        relay.report_score(12)
        self.assertEqual(best.value, 40)


if __name__ == "__main__":
    unittest.main()
