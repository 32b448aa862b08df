"""
Slack authentication strategy.

Exposes the strategy (SlackStrategy) and its configuration, the error types it
raises, profile normalization helpers, and the FastAPI auth router factory
(create_auth_router).
"""

from .config import SlackStrategyConfig
from .errors import ApiError, ConfigurationError, ParseError, SlackAuthError, TransportError
from .profile import PROVIDER, normalize_profile, parse_body
from .protocol import OAuthProvider
from .router import create_auth_router
from .slack import SlackStrategy

__all__ = [
    "SlackStrategy",
    "SlackStrategyConfig",
    "OAuthProvider",
    "SlackAuthError",
    "ConfigurationError",
    "TransportError",
    "ParseError",
    "ApiError",
    "PROVIDER",
    "parse_body",
    "normalize_profile",
    "create_auth_router",
]
