"""
Slack OAuth 2.0 provider.

Uses Authlib for the authorization-code flow (authorize redirect and token
exchange) and a plain httpx client for Slack Web API profile calls.

Decisions:
- Profile requests send the access token only as the ``token`` query
  parameter. Authlib's session would also add an Authorization: Bearer
  header, so it is not used for these calls.
- The extended profile (users.info) is fetched after users.identity, never
  concurrently, since it needs the user id from the first response.
- One Authlib registry per strategy instance; no module-level client.
"""

import inspect
import logging
from typing import Any, Callable, Optional

import httpx
from authlib.integrations.starlette_client import OAuth

from .config import SlackStrategyConfig
from .errors import ConfigurationError, TransportError
from .profile import merge_extended, normalize_profile, parse_body

logger = logging.getLogger(__name__)


class SlackStrategy:
    """OAuth provider that signs users in with Slack and normalizes their profile.

    ``verify`` is called as ``verify(access_token, refresh_token, profile)``
    after a successful callback and returns the host's user object, or a
    falsy value if the credentials should be rejected. It may be a coroutine
    function.
    """

    def __init__(self, config: SlackStrategyConfig, verify: Callable[..., Any]):
        if not config.client_id:
            raise ConfigurationError("SlackStrategy requires a client_id")
        if not config.client_secret:
            raise ConfigurationError("SlackStrategy requires a client_secret")
        if not callable(verify):
            raise TypeError("SlackStrategy requires a verify callback")

        self.name = config.name
        self.config = config
        self._verify = verify

        self._oauth = OAuth()
        self._oauth.register(
            name=self.name,
            client_id=config.client_id,
            client_secret=config.client_secret,
            authorize_url=config.authorization_url,
            access_token_url=config.token_url,
            client_kwargs={"scope": config.scope_string},
        )

        # Details on Slack's identity scope: https://api.slack.com/methods/users.identity
        for message in config.scope_warnings():
            logger.warning(message)

    @property
    def client(self):
        """The Authlib client registered for this strategy."""
        return self._oauth.create_client(self.name)

    def authorization_params(self, options: Optional[dict] = None) -> dict:
        """Return extra Slack parameters for the authorize request (``team``)."""
        options = options or {}
        team = options.get("team") or self.config.team
        if team:
            return {"team": team}
        return {}

    async def login_redirect(self, request, redirect_uri: str, team: Optional[str] = None):
        """Return RedirectResponse to Slack's authorize page."""
        params = self.authorization_params({"team": team})
        return await self.client.authorize_redirect(request, str(redirect_uri), **params)

    async def _get(self, client: httpx.AsyncClient, url: str, params: dict) -> tuple[str, dict]:
        """GET a Slack Web API method; return (body, parsed body) for an ok response."""
        logger.debug("GET %s", url)
        try:
            r = await client.get(url, params=params)
            r.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Slack request to {url} failed: {e}") from e
        return r.text, parse_body(r.text)

    async def user_profile(self, access_token: str) -> dict:
        """
        Retrieve the user's profile from Slack.

        Returns a dict with ``provider`` ("Slack"), ``id``, ``displayName``,
        optional ``emails``/``photos``/``team``, and the raw response under
        ``_raw``/``_json``. With ``extended_profile`` enabled the users.info
        response is merged in as ``extended``. Raises TransportError,
        ParseError or ApiError; nothing is retried.
        """
        async with httpx.AsyncClient(timeout=self.config.http_timeout) as client:
            body, data = await self._get(client, self.config.profile_url, {"token": access_token})
            profile = normalize_profile(body, data)

            if self.config.extended_profile:
                ext_body, ext_data = await self._get(
                    client,
                    self.config.extended_profile_url,
                    {"user": profile["id"], "token": access_token},
                )
                merge_extended(profile, ext_body, ext_data)

        return profile

    async def handle_callback(self, request) -> tuple[Any, Optional[dict]]:
        """Exchange code for token, fetch the profile and run verify. Return (user, profile)."""
        token = await self.client.authorize_access_token(request)
        access_token = token["access_token"]

        profile = None
        if not self.config.skip_user_profile:
            profile = await self.user_profile(access_token)

        user = self._verify(access_token, token.get("refresh_token"), profile)
        if inspect.isawaitable(user):
            user = await user
        return user, profile
