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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./billing.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")
    EXPOSE_ERROR_DETAILS = bool(data.get("EXPOSE_ERROR_DETAILS", False))

    # Invoice numbering: re-allocations after a unique index conflict
    INVOICE_NUMBER_MAX_RETRIES = int(data.get("INVOICE_NUMBER_MAX_RETRIES", 1))

    # Receipt header and footer
    SHOP_NAME = data.get("SHOP_NAME", "My Shop")
    SHOP_ADDRESS = data.get("SHOP_ADDRESS", "")
    SHOP_PHONE = data.get("SHOP_PHONE", "")
    RECEIPT_TERMS = data.get("RECEIPT_TERMS", ["Goods once sold will not be taken back."])
