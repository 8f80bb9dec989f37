import logging
import os

from flask import Flask, jsonify
from flask_cors import CORS
from flask.logging import default_handler
from flask_jwt_extended import JWTManager


def create_app(config_overrides=None, store=None):
    app = Flask(__name__)
    app.config.from_object("tasks_api.config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    app.json.sort_keys = False

    # LOG_LEVEL applies to every tasks_api.* logger, app.logger included
    level = getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO)
    package_logger = logging.getLogger("tasks_api")
    package_logger.setLevel(level)
    if default_handler not in package_logger.handlers:
        package_logger.addHandler(default_handler)
    app.logger.setLevel(level)

    api_prefix = app.config["API_PREFIX"].rstrip("/")
    if not api_prefix:
        # The JSON document and the explorer page would both claim /docs
        raise ValueError("API_PREFIX must be a non-empty path such as '/api'")
    app.config["API_PREFIX"] = api_prefix

    # Core extensions
    CORS(app, resources={rf"{api_prefix}/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)
    JWTManager(app)

    # Ensure sessions are secure by default (can be overridden via env/config)
    app.config.setdefault("SESSION_COOKIE_HTTPONLY", True)
    # For local development over HTTP we keep SECURE = False; enable it in production.
    app.config.setdefault("SESSION_COOKIE_SECURE", False)

    from tasks_api.utils.store import init_app as init_store

    task_store = init_store(app, store)
    app.logger.info("Task store ready with %d task(s)", len(task_store))

    # Register blueprints
    from tasks_api.routes.auth_routes import auth_bp
    from tasks_api.routes.docs_routes import docs_bp, pages_bp
    from tasks_api.routes.task_routes import tasks_bp

    app.register_blueprint(tasks_bp, url_prefix=f"{api_prefix}/tasks")
    app.register_blueprint(auth_bp, url_prefix=f"{api_prefix}/session")
    app.register_blueprint(docs_bp, url_prefix=api_prefix)
    app.register_blueprint(pages_bp)

    if not app.config.get("FIREBASE_API_KEY"):
        app.logger.warning(
            "Identity provider is not configured; FIREBASE_API_KEY missing. Login is disabled."
        )

    @app.get(f"{api_prefix}/health")
    def health():
        return jsonify(status="ok", service="Tasks API"), 200

    @app.errorhandler(404)
    def not_found(_):
        return jsonify(error="Not Found"), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify(error="Method Not Allowed"), 405

    @app.errorhandler(500)
    def server_error(_):
        return jsonify(error="Internal Server Error"), 500

    return app


if __name__ == "__main__":
    # Direct run support: python -m tasks_api.app
    create_app().run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )
