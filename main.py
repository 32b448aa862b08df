"""
FastAPI app: Sign in with Slack + session-based login.

Decisions:
- .env is loaded before importing slack_auth so SLACK_* and SESSION_SECRET are
  available when the strategy is created (Ruff E402 suppressed for that).
- The verify callback keeps only the Slack id, name and team in the session;
  a real app would look up or create its own user record here.
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

# Load .env before slack_auth so SLACK_* and SESSION_SECRET are set; Ruff E402.
from slack_auth import SlackStrategy, SlackStrategyConfig, create_auth_router  # noqa: E402

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")


def verify(access_token, refresh_token, profile):
    """Map a Slack profile to the session user."""
    if profile is None:
        return None
    return {
        "id": profile["id"],
        "name": profile["displayName"],
        "team": profile.get("team", {}).get("id"),
    }


strategy = SlackStrategy(SlackStrategyConfig.from_env(), verify)

app = FastAPI()
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)
app.include_router(create_auth_router(strategy))


@app.get("/")
async def home(request: Request):
    user = request.session.get("user")
    return {"logged_in": bool(user), "user": user}
