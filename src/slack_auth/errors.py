"""
Errors raised by the Slack strategy.

TransportError wraps httpx failures and non-2xx responses, ParseError covers
bodies that are not a JSON object, ApiError carries Slack's ``ok: false``
payload. Authlib's own OAuthError (token exchange) is not wrapped.
"""


class SlackAuthError(Exception):
    """Base class for errors raised by slack_auth."""


class ConfigurationError(SlackAuthError):
    """Strategy was constructed with missing or invalid settings."""


class TransportError(SlackAuthError):
    """The HTTP request to Slack failed or returned a non-2xx status."""


class ParseError(SlackAuthError):
    """Slack returned a body that could not be parsed into a profile."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class ApiError(SlackAuthError):
    """Slack answered with ``ok: false``.

    ``code`` is Slack's ``error`` field when present, otherwise the raw body.
    ``payload`` is the parsed response.
    """

    def __init__(self, code: str, payload: dict | None = None):
        super().__init__(code)
        self.code = code
        self.payload = payload or {}
