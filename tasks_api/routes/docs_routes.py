from flask import Blueprint, current_app, jsonify, render_template, request, url_for

from tasks_api.openapi import build_openapi_spec


# JSON document, mounted under API_PREFIX
docs_bp = Blueprint("docs", __name__)

# HTML pages served at the site root
pages_bp = Blueprint("pages", __name__)


@docs_bp.get("/docs")
def openapi_document():
    server_url = request.host_url.rstrip("/") + current_app.config["API_PREFIX"]
    return jsonify(build_openapi_spec(server_url)), 200


@pages_bp.get("/docs")
def explorer():
    """Swagger UI explorer for the OpenAPI document."""
    return render_template(
        "docs.html",
        spec_url=url_for("docs.openapi_document"),
        swagger_cdn=current_app.config["SWAGGER_UI_CDN"],
    )


@pages_bp.get("/login")
def login_page():
    cfg = current_app.config
    firebase_config = {
        "apiKey": cfg.get("FIREBASE_API_KEY"),
        "authDomain": cfg.get("FIREBASE_AUTH_DOMAIN"),
        "projectId": cfg.get("FIREBASE_PROJECT_ID"),
    }
    return render_template(
        "login.html",
        firebase_config=firebase_config,
        session_url=url_for("auth.create_session"),
        redirect_to=cfg["LOGIN_REDIRECT"],
    )
