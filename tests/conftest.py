"""Shared test fixtures for redeemlog."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from redeemlog.models.log_entry import CoalescedEntry
from redeemlog.models.redemption import RedemptionRecord

MARKER = "REWARD REDEMPTION EVENT RECEIVED"


def make_payload(**overrides) -> dict:
    payload = {
        "id": "c0ffee",
        "broadcaster_user_id": "1",
        "broadcaster_user_login": "streamer",
        "broadcaster_user_name": "Streamer",
        "user_id": "9",
        "user_login": "alice",
        "user_name": "Alice",
        "user_input": "",
        "status": "unfulfilled",
        "reward": {"id": "r1", "title": "Dailyおみくじ", "cost": 100, "prompt": ""},
        "redeemed_at": "2024-01-01T00:00:00Z",
    }
    payload.update(overrides)
    return payload


def redemption_message(payload: dict | None = None, prefix: str = "[TCPR] ") -> str:
    body = json.dumps(payload if payload is not None else make_payload(), ensure_ascii=False)
    return f"{prefix}{MARKER}: {body}"


@pytest.fixture
def payload_factory() -> Callable[..., dict]:
    return make_payload


@pytest.fixture
def message_factory() -> Callable[..., str]:
    return redemption_message


@pytest.fixture
def coalesced_redemptions() -> list[CoalescedEntry]:
    """Three redemption entries, out of chronological payload order."""
    return [
        CoalescedEntry(
            timestamp="2024-01-02T00:00:00.000Z",
            message=redemption_message(
                make_payload(user_id="2", user_login="bob", user_name="Bob",
                             redeemed_at="2024-01-02T00:00:00Z")
            ),
        ),
        CoalescedEntry(
            timestamp="2024-01-01T00:00:00.000Z",
            message=redemption_message(
                make_payload(user_id="1", user_login="alice", user_name="Alice",
                             redeemed_at="2024-01-01T00:00:00Z",
                             reward={"title": "Hydrate"})
            ),
        ),
        CoalescedEntry(timestamp="2024-01-01T12:00:00.000Z", message="Connected to chat"),
    ]


@pytest.fixture
def sample_records() -> list[RedemptionRecord]:
    return [
        RedemptionRecord(
            redeemed_at="2024-01-01 00:00:00",
            user_id="1",
            user_login="alice",
            user_name="Alice",
            reward_title="Dailyおみくじ",
        ),
        RedemptionRecord(
            redeemed_at="2024-01-01 08:30:00",
            user_id="2",
            user_login="bob_1",
            user_name="ボブ",
            reward_title="Hydrate",
        ),
        RedemptionRecord(
            redeemed_at="2024-01-02 21:15:00",
            user_id="3",
            user_login="carol",
            user_name="Carol, \"the\" Great",
            reward_title="Dailyおみくじ",
        ),
    ]


@pytest.fixture
def log_export_file(tmp_path: Path) -> Path:
    """A realistic export: one event split across two entries 1 ms apart."""
    payload = json.dumps(
        make_payload(user_id="42", user_login="dave", user_name="Dave",
                     redeemed_at="2024-03-05T10:20:30.123456789Z"),
        ensure_ascii=False,
    )
    # Split between tokens, as the logger does.
    half = payload.index('"user_id"')
    entries = [
        {"timestamp": "2024-03-05T10:20:29.000Z", "level": "info", "message": "Listening for events"},
        {"timestamp": "2024-03-05T10:20:31.231Z", "message": f"{MARKER}: {payload[:half]}"},
        {"timestamp": "2024-03-05T10:20:31.232Z", "message": payload[half:]},
        {"timestamp": "2024-03-05T10:25:00.000Z", "message": redemption_message(
            make_payload(user_id="7", user_login="erin", user_name="Erin",
                         reward={"title": "Hydrate"}, redeemed_at="2024-03-05T10:25:00Z"))},
        {"timestamp": "2024-03-05T10:26:00.000Z", "message": f"{MARKER}: {{\"broadcaster_user_id\": \"1\", \"user_id\": }}"},
        {"timestamp": "2024-03-05T10:27:00.000Z"},
    ]
    path = tmp_path / "export.json"
    path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
    return path



@pytest.fixture
def export_factory(tmp_path: Path) -> Callable[..., Path]:
    """Writes an export holding one redemption built from payload overrides."""

    def _write(name: str = "single.json", **overrides) -> Path:
        entries = [{"timestamp": "2024-01-01T00:00:00.000Z",
                    "message": redemption_message(make_payload(**overrides))}]
        path = tmp_path / name
        path.write_text(json.dumps(entries, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
