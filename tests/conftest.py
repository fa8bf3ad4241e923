"""Pytest configuration and shared fixtures.

Payloads mirror the JSON returned by the public API so models, the httpx
transport and the client are exercised with realistic shapes.
"""

from unittest.mock import AsyncMock

import pytest


def make_record(defid: int = 1, word: str = "YOLO", **overrides) -> dict:
    record = {
        "definition": "[You only live once].",
        "permalink": f"http://yolo.urbanup.com/{defid}",
        "thumbs_up": 12,
        "thumbs_down": 3,
        "author": "someone",
        "word": word,
        "defid": defid,
        "current_vote": "",
        "written_on": "2012-03-01T00:00:00.000Z",
        "example": "YOLO, said nobody careful.",
        "sound_urls": [],
    }
    record.update(overrides)
    return record


@pytest.fixture
def define_payload() -> dict:
    return {"list": [make_record(1, "YOLO"), make_record(2, "YOLO", thumbs_up=4)]}


@pytest.fixture
def random_payload() -> dict:
    return {"list": [make_record(10, "yeet"), make_record(11, "sus"), make_record(12, "rizz")]}


@pytest.fixture
def transport() -> AsyncMock:
    """Transport double: tests set `execute.return_value` / `side_effect`."""
    fake = AsyncMock()
    fake.execute = AsyncMock()
    fake.aclose = AsyncMock()
    return fake


@pytest.fixture
def record_factory():
    return make_record
