import os
from datetime import timedelta

from dotenv import load_dotenv

# Load .env from the working directory so local settings are picked up
load_dotenv()


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "change-this-jwt-secret")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(hours=int(os.environ.get("JWT_EXPIRES_HOURS", "12")))

    API_PREFIX = os.environ.get("API_PREFIX", "/api")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    SEED_TASKS = os.environ.get("SEED_TASKS", "1") == "1"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Firebase web config, rendered into the login page
    FIREBASE_API_KEY = os.environ.get("FIREBASE_API_KEY")
    FIREBASE_AUTH_DOMAIN = os.environ.get("FIREBASE_AUTH_DOMAIN")
    FIREBASE_PROJECT_ID = os.environ.get("FIREBASE_PROJECT_ID")
    IDENTITY_LOOKUP_URL = os.environ.get(
        "IDENTITY_LOOKUP_URL",
        "https://identitytoolkit.googleapis.com/v1/accounts:lookup",
    )
    LOGIN_REDIRECT = os.environ.get("LOGIN_REDIRECT", "/docs")

    SWAGGER_UI_CDN = os.environ.get("SWAGGER_UI_CDN", "https://unpkg.com/swagger-ui-dist@5")

    ENV = os.environ.get("FLASK_ENV", "development")
    DEBUG = os.environ.get("FLASK_DEBUG", "1") == "1"
