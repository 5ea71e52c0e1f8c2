import os

API_URL = os.getenv("API_URL", "http://localhost:8443")

APP_NAME = "Team Board"

# Value assigned on account creation and admin reset
DEFAULT_PASSWORD = os.getenv("DEFAULT_PASSWORD", "Hallo123")

STORE_TIMEOUT = float(os.getenv("STORE_TIMEOUT", "10"))

HASH_PASSWORDS = os.getenv("HASH_PASSWORDS", "true").lower() in ("1", "true", "yes")
