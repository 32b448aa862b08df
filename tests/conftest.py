"""Shared fixtures for slack_auth tests."""

from __future__ import annotations

import pytest
from slack_auth import SlackStrategy, SlackStrategyConfig

PROFILE_URL = "https://slack.com/api/users.identity"
EXTENDED_URL = "https://slack.com/api/users.info"


def make_config(**overrides) -> SlackStrategyConfig:
    values = {"client_id": "123-456", "client_secret": "shhh", "callback_url": "https://app.example/cb"}
    values.update(overrides)
    return SlackStrategyConfig(**values)


def verify(access_token, refresh_token, profile):
    return {"id": profile["id"], "token": access_token}


@pytest.fixture
def strategy():
    return SlackStrategy(make_config(), verify)


@pytest.fixture
def extended_strategy():
    return SlackStrategy(make_config(extended_profile=True), verify)
