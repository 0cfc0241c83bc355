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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./support_desk.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    CREATE_TABLES_ON_STARTUP = bool(data.get("CREATE_TABLES_ON_STARTUP", False))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    INTERNAL_API_KEY = data.get("INTERNAL_API_KEY", "test-internal-key-12345")

    # Access policy switches
    SUPERADMIN_EMAIL_FALLBACK = bool(data.get("SUPERADMIN_EMAIL_FALLBACK", False))
    SUPERADMIN_OWNER_OVERRIDE = bool(data.get("SUPERADMIN_OWNER_OVERRIDE", False))
    SESSION_HARD_DELETE = bool(data.get("SESSION_HARD_DELETE", False))

    # Outbound email (Resend)
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    EMAIL_FROM_ADDRESS = data.get("EMAIL_FROM_ADDRESS", "support@example.com")
    CHAT_URL_TEMPLATE = data.get("CHAT_URL_TEMPLATE", "https://{slug}.example.com?chat=open")
    DASHBOARD_URL = data.get("DASHBOARD_URL", "https://dashboard.example.com")

    # Web push
    VAPID_PRIVATE_KEY = data.get("VAPID_PRIVATE_KEY", "")
    VAPID_CLAIMS_EMAIL = data.get("VAPID_CLAIMS_EMAIL", "mailto:support@example.com")
