"""Tests for Slack body parsing and profile normalization."""

from __future__ import annotations

import json

import pytest
from slack_auth import ApiError, ParseError, normalize_profile, parse_body
from slack_auth.profile import merge_extended

IDENTITY = {
    "ok": True,
    "user": {
        "id": "U1",
        "name": "Alice Liddell",
        "email": "alice@example.com",
        "image_24": "https://img/24.png",
        "image_192": "https://img/192.png",
    },
    "team": {"id": "T1", "name": "Wonderland", "domain": "wonder"},
}


def test_parse_body_rejects_invalid_json():
    with pytest.raises(ParseError) as exc:
        parse_body("<html>nope</html>")
    assert exc.value.body == "<html>nope</html>"


def test_parse_body_rejects_non_object():
    with pytest.raises(ParseError):
        parse_body("[1, 2]")


def test_parse_body_surfaces_slack_error_field():
    with pytest.raises(ApiError) as exc:
        parse_body('{"ok": false, "error": "invalid_auth"}')
    assert exc.value.code == "invalid_auth"
    assert exc.value.payload == {"ok": False, "error": "invalid_auth"}


def test_parse_body_falls_back_to_raw_body_without_error_field():
    with pytest.raises(ApiError) as exc:
        parse_body('{"ok": false}')
    assert exc.value.code == '{"ok": false}'


def test_normalize_flat_auth_test_shape():
    data = {"ok": True, "user_id": "U1", "user": "alice"}
    profile = normalize_profile(json.dumps(data), data)

    assert profile["provider"] == "Slack"
    assert profile["id"] == "U1"
    assert profile["displayName"] == "alice"
    assert profile["_json"] is data


def test_normalize_identity_shape():
    body = json.dumps(IDENTITY)
    profile = normalize_profile(body, IDENTITY)

    assert profile["id"] == "U1"
    assert profile["displayName"] == "Alice Liddell"
    assert profile["emails"] == [{"value": "alice@example.com"}]
    assert profile["photos"] == [{"value": "https://img/192.png"}, {"value": "https://img/24.png"}]
    assert profile["team"] == {"id": "T1", "name": "Wonderland", "domain": "wonder"}
    assert profile["_raw"] == body


def test_normalize_requires_id_and_name():
    data = {"ok": True, "user": {"name": "no id"}}
    with pytest.raises(ParseError):
        normalize_profile(json.dumps(data), data)


def test_merge_extended_keeps_basic_fields_and_fills_gaps():
    basic = {"ok": True, "user_id": "U1", "user": "alice"}
    profile = normalize_profile(json.dumps(basic), basic)
    extended = {
        "ok": True,
        "user": {"id": "U1", "real_name": "Alice L", "profile": {"email": "a@example.com"}},
    }

    merge_extended(profile, json.dumps(extended), extended)

    assert profile["displayName"] == "alice"
    assert profile["_json"] is basic
    assert profile["_json_extended"] is extended
    assert profile["extended"]["real_name"] == "Alice L"
    assert profile["emails"] == [{"value": "a@example.com"}]


def test_parse_body_requires_boolean_ok():
    with pytest.raises(ApiError):
        parse_body('{"ok": "false", "user_id": "U1", "user": "alice"}')


@pytest.mark.parametrize(
    "extended",
    [
        {"ok": True, "user": "U1"},
        {"ok": True, "user": {"id": "U1", "profile": "x"}},
    ],
)
def test_merge_extended_rejects_malformed_user(extended):
    basic = {"ok": True, "user_id": "U1", "user": "alice"}
    profile = normalize_profile(json.dumps(basic), basic)

    with pytest.raises(ParseError):
        merge_extended(profile, json.dumps(extended), extended)
    assert "extended" not in profile
