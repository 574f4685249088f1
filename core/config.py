from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


INSECURE_JWT_SECRET = "dev-only-change-me"


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "PoolOps Authorization API"
    ENV: str = "development"
    API_PREFIX: str = "/api"

    # -------------------------------------------------
    # CORS
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = ["http://localhost:5000"]

    # -------------------------------------------------
    # JWT / auth
    # -------------------------------------------------
    JWT_SECRET_KEY: str = Field(INSECURE_JWT_SECRET)
    JWT_ALGORITHM: str = "HS256"

    # -------------------------------------------------
    # Frontend routes used by the route guard
    # -------------------------------------------------
    LOGIN_ROUTE: str = "/login"
    ROOT_ROUTE: str = "/"
    UNAUTHORIZED_ROUTE: str = "/unauthorized"

    # Unauthenticated visitors may land here mid-login
    OAUTH_CALLBACK_ROUTES: List[str] = [
        "/auth/callback",
        "/api/auth/google/callback",
        "/organization-selection",
    ]

    # -------------------------------------------------
    # Redirect-loop throttle
    # -------------------------------------------------
    REDIRECT_LOOP_MAX: int = Field(3, description="Redirects allowed inside one window (default: 3)")
    REDIRECT_LOOP_WINDOW_MS: int = Field(5000, description="Trailing window in milliseconds (default: 5000)")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    model_config = SettingsConfigDict(case_sensitive=True)


# Instantiate settings
settings = Settings()
