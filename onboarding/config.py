import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent  # -> project root

# Load .env explicitly from project root
load_dotenv(BASE_DIR / ".env")


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() == "true"


class Settings:
    PROJECT_NAME = "Employee Onboarding"

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./onboarding.db")

    JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))
    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", 12))

    SMTP_HOST = os.getenv("SMTP_HOST")
    SMTP_PORT = int(os.getenv("SMTP_PORT", 587))
    SMTP_USER = os.getenv("SMTP_USER")
    SMTP_PASS = os.getenv("SMTP_PASS")
    FROM_EMAIL = os.getenv("FROM_EMAIL", "no-reply@onboarding.local")

    # Schemes accepted by the access gate, e.g. "bearer,basic"
    AUTH_SCHEMES = [
        scheme.strip().lower()
        for scheme in os.getenv("AUTH_SCHEMES", "bearer,basic").split(",")
        if scheme.strip()
    ]
    REQUIRE_ACTIVE_LOGIN = _flag("REQUIRE_ACTIVE_LOGIN")
    HASH_TEMPORARY_PASSWORDS = _flag("HASH_TEMPORARY_PASSWORDS")

    SEED_ADMIN_EMAIL = os.getenv("SEED_ADMIN_EMAIL")
    SEED_ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD")
    SEED_ADMIN_NAME = os.getenv("SEED_ADMIN_NAME", "Administrator")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    cors_origins = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]


settings = Settings()
