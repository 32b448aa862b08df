"""Tests for the example app's verify callback."""

from __future__ import annotations

import importlib

import pytest


@pytest.fixture
def main_module(monkeypatch):
    monkeypatch.setenv("SLACK_CLIENT_ID", "123-456")
    monkeypatch.setenv("SLACK_CLIENT_SECRET", "shhh")
    return importlib.import_module("main")


def test_verify_rejects_missing_profile(main_module):
    assert main_module.verify("abc", None, None) is None


def test_verify_maps_profile_to_session_user(main_module):
    profile = {"provider": "Slack", "id": "U1", "displayName": "alice", "team": {"id": "T1"}}

    assert main_module.verify("abc", None, profile) == {"id": "U1", "name": "alice", "team": "T1"}
