# src/config.py
import os
from typing import List


class Settings:
    """Application configuration settings."""
    SECRET_KEY: str = os.getenv("SECRET_KEY", "your-secret-key-for-jwt")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))
    CORS_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGIN", "http://localhost:5173").split(",")
    ]
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Activity feed
    ACTIVITY_FEED_LIMIT: int = 10

    # Seeded admin account
    ADMIN_USERNAME: str = os.getenv("ADMIN_USERNAME", "36xfinance")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD", "36xfinance")
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL", "admin@36xfinance.com")
    ADMIN_PERMISSIONS: List[str] = ["blogs", "videos", "contacts", "enquiries", "users", "activities"]

    # Login tracking fallbacks
    DEFAULT_IP_ADDRESS: str = "127.0.0.1"
    DEFAULT_USER_AGENT: str = "Unknown"


settings = Settings()
