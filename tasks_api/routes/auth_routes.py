import requests
from flask import Blueprint, current_app, jsonify, request, session
from flask_jwt_extended import create_access_token


auth_bp = Blueprint("auth", __name__)


def _bearer_token():
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _session_user():
    if "user_id" not in session:
        return None
    return {
        "id": session["user_id"],
        "email": session.get("user_email"),
        "name": session.get("user_name"),
    }


@auth_bp.post("", strict_slashes=False)
def create_session():
    """Exchange an identity-provider ID token for a server session.

    The login page signs in with Firebase (Google popup or email/password)
    and posts the resulting ID token here as a bearer token. The token is
    checked against the Identity Toolkit lookup endpoint; on success the
    user is stored in the Flask session and a JWT is returned as well.
    """
    api_key = current_app.config.get("FIREBASE_API_KEY")
    if not api_key:
        return jsonify(error="Identity provider not configured"), 500

    id_token = _bearer_token()
    if not id_token:
        return jsonify(error="Missing bearer token"), 401

    try:
        resp = requests.post(
            current_app.config["IDENTITY_LOOKUP_URL"],
            params={"key": api_key},
            json={"idToken": id_token},
            timeout=10,
        )
    except requests.RequestException as exc:
        current_app.logger.exception("Error verifying ID token: %s", exc)
        return jsonify(error="Failed to verify ID token"), 502

    # The lookup endpoint answers 400 for expired or forged tokens
    if resp.status_code == 400:
        return jsonify(error="Invalid ID token"), 401

    try:
        resp.raise_for_status()
        users = resp.json().get("users") or []
    except (requests.HTTPError, ValueError) as exc:
        current_app.logger.exception("Unexpected identity provider response: %s", exc)
        return jsonify(error="Failed to verify ID token"), 502

    if not users:
        return jsonify(error="Invalid ID token"), 401

    account = users[0]
    user_id = account.get("localId")
    if not user_id:
        return jsonify(error="Invalid ID token"), 401
    email = account.get("email")
    name = account.get("displayName") or email or "User"

    session["user_id"] = user_id
    session["user_email"] = email
    session["user_name"] = name
    session.permanent = True

    access_token = create_access_token(identity=user_id, additional_claims={"email": email})
    current_app.logger.info("Session opened for user_id=%s", user_id)
    return jsonify(access_token=access_token, user=_session_user()), 200


@auth_bp.get("", strict_slashes=False)
def current_session():
    user = _session_user()
    if user is None:
        return jsonify(error="Not authenticated"), 401
    return jsonify(user=user), 200


@auth_bp.delete("", strict_slashes=False)
def delete_session():
    session.clear()
    return "", 204
