import os
from dotenv import load_dotenv, find_dotenv

# Look for .env from where the script is run, not where the package is installed
load_dotenv(find_dotenv(usecwd=True))

DEFAULT_PROJECT_ID = "hc-petty-cash-report"
DEFAULT_LOGIN_COMMAND = "firebase login:ci --no-localhost"

def _getenv(name: str, default: str) -> str:
    """Like os.getenv, but a blank value counts as unset."""
    value = os.getenv(name, "").strip()
    return value or default

PROJECT_ID = _getenv("FIREBASE_PROJECT_ID", DEFAULT_PROJECT_ID)

# Firebase names the default bucket after the project
BUCKET_NAME = _getenv("FIREBASE_STORAGE_BUCKET", f"{PROJECT_ID}.firebasestorage.app")

LOGIN_COMMAND = _getenv("FIREBASE_LOGIN_COMMAND", DEFAULT_LOGIN_COMMAND)

VERBOSE = os.getenv("CORS_SETUP_VERBOSE", "").strip().lower() in ("1", "true", "yes")
