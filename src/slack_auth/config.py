"""
Configuration for the Slack strategy.

Defaults follow Slack's "Sign in with Slack" endpoints. Profile retrieval via
users.identity needs the identity.basic scope; scope_warnings() reports when it
is missing so the strategy can log it at construction time.
"""

import os
from dataclasses import dataclass
from typing import List

AUTHORIZATION_URL = "https://slack.com/oauth/authorize"
TOKEN_URL = "https://slack.com/api/oauth.access"
PROFILE_URL = "https://slack.com/api/users.identity"
EXTENDED_PROFILE_URL = "https://slack.com/api/users.info"
DEFAULT_SCOPE = ("identity.basic", "identity.email", "identity.avatar", "identity.team")
SCOPE_SEPARATOR = ","
REQUIRED_PROFILE_SCOPE = "identity.basic"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


@dataclass(frozen=True)
class SlackStrategyConfig:
    """Immutable settings for one SlackStrategy instance."""

    client_id: str | None
    client_secret: str | None
    callback_url: str | None = None
    authorization_url: str = AUTHORIZATION_URL
    token_url: str = TOKEN_URL
    scope: tuple = DEFAULT_SCOPE
    scope_separator: str = SCOPE_SEPARATOR
    profile_url: str = PROFILE_URL
    extended_profile_url: str = EXTENDED_PROFILE_URL
    team: str | None = None
    extended_profile: bool = False
    skip_user_profile: bool = False
    name: str = "slack"
    http_timeout: float = 20

    def __post_init__(self):
        # Accept "a,b" or ["a", "b"]; store as a tuple so the config stays hashable.
        scope = self.scope
        if scope is None:
            scope = DEFAULT_SCOPE
        elif isinstance(scope, str):
            scope = [s.strip() for s in scope.split(self.scope_separator) if s.strip()]
        object.__setattr__(self, "scope", tuple(scope))

    @classmethod
    def from_env(cls, **overrides) -> "SlackStrategyConfig":
        """Build a config from SLACK_* environment variables; keyword overrides win."""
        values = {
            "client_id": os.getenv("SLACK_CLIENT_ID"),
            "client_secret": os.getenv("SLACK_CLIENT_SECRET"),
            "callback_url": os.getenv("SLACK_CALLBACK_URL"),
            "team": os.getenv("SLACK_TEAM") or None,
            "extended_profile": _env_flag("SLACK_EXTENDED_PROFILE"),
            "skip_user_profile": _env_flag("SLACK_SKIP_USER_PROFILE"),
        }
        if os.getenv("SLACK_SCOPE"):
            values["scope"] = os.getenv("SLACK_SCOPE")
        values.update(overrides)
        return cls(**values)

    @property
    def scope_string(self) -> str:
        """Scope as sent in the authorize request."""
        return self.scope_separator.join(self.scope)

    def scope_warnings(self) -> List[str]:
        """Return diagnostics for scopes that would make profile retrieval fail."""
        if self.skip_user_profile:
            return []
        if REQUIRED_PROFILE_SCOPE not in self.scope:
            return [f"Scope '{REQUIRED_PROFILE_SCOPE}' is required to retrieve Slack user profile"]
        return []
