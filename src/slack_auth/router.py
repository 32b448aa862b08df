"""
FastAPI auth router: login, callback, /me, logout.

Builds an APIRouter around a Slack strategy. The verify callback's return value
is stored in the session as the signed-in user.
"""

from authlib.integrations.starlette_client import OAuthError
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from .errors import SlackAuthError
from .protocol import OAuthProvider


def create_auth_router(provider: OAuthProvider):
    """Create an APIRouter with /login, /auth/callback, /me, and /logout endpoints."""
    router = APIRouter()

    @router.get("/login")
    async def login(request: Request, team: str | None = None):
        """Redirect the user to Slack's authorize page, optionally pinned to a workspace."""
        return await provider.login_redirect(request, request.url_for("auth_callback"), team=team)

    @router.get("/auth/callback", name="auth_callback")
    async def auth_callback(request: Request):
        """Handle OAuth callback: exchange code, fetch profile, verify, store user, redirect to /me."""
        try:
            user, profile = await provider.handle_callback(request)
        except (OAuthError, SlackAuthError) as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        if not user:
            return JSONResponse({"error": "Authentication rejected"}, status_code=401)

        # Persist user identity in session
        request.session["user"] = user
        if profile:
            request.session["profile"] = {
                "provider": profile["provider"],
                "id": profile["id"],
                "displayName": profile["displayName"],
            }
        return RedirectResponse(url="/me")

    @router.get("/me")
    async def me(request: Request):
        """Return current user and profile; redirect to /login if not authenticated."""
        if "user" not in request.session:
            return RedirectResponse(url="/login")
        return {
            "user": request.session["user"],
            "profile": request.session.get("profile"),
        }

    @router.get("/logout")
    async def logout(request: Request):
        """Clear session and redirect to home."""
        request.session.clear()
        return RedirectResponse(url="/")

    return router
