import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    """Application settings and configuration."""
    # Firebase service account key, as a JSON string
    FIREBASE_SERVICE_ACCOUNT_KEY_JSON = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY_JSON")

    # Firebase Realtime Database URL
    FIREBASE_DATABASE_URL = os.getenv("FIREBASE_DATABASE_URL")

    # Used when Firebase is not configured or fails to initialize
    LOCAL_STORE_PATH = os.getenv("LOCAL_STORE_PATH") or os.path.join("data", "packing_store.json")

    LOG_LEVEL = os.getenv("LOG_LEVEL") or "INFO"

    CORS_ORIGINS = [
        origin.strip()
        for origin in (
            os.getenv("CORS_ORIGINS")
            or "http://localhost,http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000"
        ).split(",")
        if origin.strip()
    ]

    @property
    def firebase_configured(self) -> bool:
        return bool(self.FIREBASE_SERVICE_ACCOUNT_KEY_JSON and self.FIREBASE_DATABASE_URL)

settings = Settings()
