import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

# category name -> [synthetic row name, share of the category's spend]
DEFAULT_SPLIT_RULES = {
    "Car Insurance": [["Auto (Mazda)", "1/2"], ["Auto (Elantra)", "1/2"]],
}


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", f"sqlite:///{BASE_DIR / 'budget.db'}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Unset password disables the login gate entirely
    APP_PASSWORD = os.getenv("APP_PASSWORD") or None
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SEED_DEFAULTS = _env_flag("SEED_DEFAULTS", True)
    # JSON text; parsed and checked by create_app. "{}" switches the rules off
    VIRTUAL_SPLIT_RULES = os.getenv("VIRTUAL_SPLIT_RULES") or DEFAULT_SPLIT_RULES
