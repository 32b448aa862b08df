"""
Slack API body parsing and profile normalization.

Slack answers every Web API call with HTTP 200 and a JSON object carrying an
``ok`` flag. Two profile shapes are accepted:

- users.identity: {"ok": true, "user": {"id": ..., "name": ...}, "team": {...}}
- auth.test:      {"ok": true, "user_id": ..., "user": "<username>", ...}
"""

import json

from .errors import ApiError, ParseError

PROVIDER = "Slack"

# users.identity / users.info image keys, largest first
_IMAGE_KEYS = ("image_512", "image_192", "image_72", "image_48", "image_32", "image_24")


def parse_body(body: str) -> dict:
    """Decode a Slack response body and check its ``ok`` flag.

    Raises ParseError for anything that is not a JSON object and ApiError when
    Slack reports failure.
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise ParseError(f"Slack returned invalid JSON: {e}", body) from e
    if not isinstance(data, dict):
        raise ParseError("Slack returned a JSON value that is not an object", body)

    if data.get("ok") is not True:
        raise ApiError(data.get("error") or body, data)
    return data


def _photos(user: dict) -> list:
    return [{"value": user[key]} for key in _IMAGE_KEYS if user.get(key)]


def normalize_profile(body: str, data: dict) -> dict:
    """Build the normalized profile from a successful profile response."""
    user = data.get("user")
    if isinstance(user, dict):
        user_id = user.get("id")
        display_name = user.get("name")
    else:
        user_id = data.get("user_id")
        display_name = user

    if not user_id or not display_name:
        raise ParseError("Slack profile response has no user id or name", body)

    profile = {
        "provider": PROVIDER,
        "id": user_id,
        "displayName": display_name,
    }

    if isinstance(user, dict):
        if user.get("email"):
            profile["emails"] = [{"value": user["email"]}]
        photos = _photos(user)
        if photos:
            profile["photos"] = photos

    team = data.get("team")
    if isinstance(team, dict):
        profile["team"] = {k: team[k] for k in ("id", "name", "domain") if k in team}
    elif data.get("team_id"):
        profile["team"] = {"id": data["team_id"], "name": team}

    profile["_raw"] = body
    profile["_json"] = data
    return profile


def merge_extended(profile: dict, body: str, data: dict) -> dict:
    """Attach a users.info response to ``profile`` and fill gaps from it."""
    user = data.get("user") or {}
    if not isinstance(user, dict):
        raise ParseError("Slack users.info response has no user object", body)
    details = user.get("profile") or {}
    if not isinstance(details, dict):
        raise ParseError("Slack users.info user profile is not an object", body)

    profile["_raw_extended"] = body
    profile["_json_extended"] = data
    profile["extended"] = user

    if "emails" not in profile and details.get("email"):
        profile["emails"] = [{"value": details["email"]}]
    if "photos" not in profile:
        photos = _photos(details)
        if photos:
            profile["photos"] = photos
    return profile
