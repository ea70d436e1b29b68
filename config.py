import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./template_manager.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    # Shared by the password pepper and the session token signature.
    # Rotating it invalidates every outstanding session token and stored hash.
    AUTH_SECRET = data.get("AUTH_SECRET", "dev-secret-key-change-in-production")
    SESSION_TOKEN_TTL_DAYS = int(data.get("SESSION_TOKEN_TTL_DAYS", 7))
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    DEFAULT_ADMIN_NAME = data.get("DEFAULT_ADMIN_NAME", "Admin User")
    DEFAULT_ADMIN_EMAIL = data.get("DEFAULT_ADMIN_EMAIL", "admin@templatemanager.com")
    DEFAULT_ADMIN_PASSWORD = data.get("DEFAULT_ADMIN_PASSWORD", "")
    AVATAR_URL_TEMPLATE = data.get(
        "AVATAR_URL_TEMPLATE", "https://api.dicebear.com/7.x/avataaars/svg?seed={email}"
    )
