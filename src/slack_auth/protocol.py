"""
Protocol for OAuth providers used by the auth router.

Implementations (e.g. SlackStrategy) redirect to the IdP, handle the callback,
and turn an access token into a normalized profile.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class OAuthProvider(Protocol):
    """Protocol for an OAuth 2.0 provider strategy (e.g. Slack)."""

    name: str

    async def login_redirect(self, request, redirect_uri: str, team: Optional[str] = None):
        """Redirect the user to the identity provider authorize page."""
        ...

    async def handle_callback(self, request) -> tuple[Any, Optional[dict]]:
        """Handle the OAuth callback: exchange code for token, return (user, profile)."""
        ...

    async def user_profile(self, access_token: str) -> dict:
        """Fetch and normalize the authenticated user's profile."""
        ...

    def authorization_params(self, options: Optional[dict] = None) -> dict:
        """Extra query parameters for the authorize redirect."""
        ...
