import os

from tasks_api.app import create_app


# Expose a module-level `app` for WSGI servers (gunicorn expects `app:app`).
# The task store lives in this process only, so run a single worker.
app = create_app()


if __name__ == "__main__":
    # Local development only: run the built-in server.
    app.run(
        host=os.environ.get("HOST", "127.0.0.1"),
        port=int(os.environ.get("PORT", "5000")),
        debug=os.environ.get("FLASK_DEBUG", "1") == "1",
    )
