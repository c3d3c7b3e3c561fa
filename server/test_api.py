#!/usr/bin/env python3
"""
HTTP tests for the tool server.
"""

import json
import unittest

from fastapi.testclient import TestClient

from server.api import create_app
from server.board import HighScoreBoard, InvalidScoreError, validate_score


def payload(response) -> dict:
    body = response.json()
    item = body["content"][0]
    assert item["type"] == "text"
    return json.loads(item["text"])


class ValidateScoreTests(unittest.TestCase):
    def test_accepts_non_negative_int(self):
        self.assertEqual(validate_score(0), 0)
        self.assertEqual(validate_score(41), 41)

    def test_rejects_everything_else(self):
        for value in (-1, 1.0, 2.5, True, False, "3", None):
            with self.subTest(value=value):
                with self.assertRaises(InvalidScoreError):
                    validate_score(value)


class ToolServerTests(unittest.TestCase):
    def setUp(self):
        self.board = HighScoreBoard()
        self.client = TestClient(create_app(self.board))

    def submit(self, score):
        return self.client.post("/tools/submit-score", json={"score": score})

    def test_lists_tools(self):
        response = self.client.get("/tools")
        self.assertEqual(response.status_code, 200)
        names = [tool["name"] for tool in response.json()]
        self.assertEqual(names, ["play-flappy-bird", "submit-score", "get-high-score"])

    def test_fresh_board_reports_zero(self):
        response = self.client.post("/tools/get-high-score")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(payload(response), {"highScore": 0})

    def test_submit_keeps_maximum(self):
        self.assertEqual(payload(self.submit(12)), {"highScore": 12, "submitted": 12})
        self.assertEqual(payload(self.submit(7)), {"highScore": 12, "submitted": 7})
        self.assertEqual(payload(self.submit(30)), {"highScore": 30, "submitted": 30})
        self.assertEqual(self.board.get(), 30)

    def test_zero_is_a_valid_score(self):
        response = self.submit(0)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(payload(response), {"highScore": 0, "submitted": 0})

    def test_invalid_scores_rejected_without_changing_board(self):
        self.submit(5)
        for bad in (-1, 2.5, True, "9", None):
            with self.subTest(score=bad):
                response = self.submit(bad)
                self.assertEqual(response.status_code, 422)
        missing = self.client.post("/tools/submit-score", json={})
        self.assertEqual(missing.status_code, 422)
        self.assertEqual(self.board.get(), 5)

    def test_play_returns_current_best(self):
        self.submit(17)
        response = self.client.post("/tools/play-flappy-bird")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(payload(response), {"highScore": 17})

    def test_board_rejection_maps_to_bad_request(self):
        class StrictBoard(HighScoreBoard):
            def submit(self, score):
                raise InvalidScoreError("rejected")

        client = TestClient(create_app(StrictBoard()))
        response = client.post("/tools/submit-score", json={"score": 3})
        self.assertEqual(response.status_code, 400)

    def test_cors_headers_present(self):
        response = self.client.get("/tools", headers={"Origin": "http://example.com"})
        self.assertEqual(response.headers.get("access-control-allow-origin"), "*")


if __name__ == "__main__":
    unittest.main()
