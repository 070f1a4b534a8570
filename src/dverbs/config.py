import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


class Settings:
    PROJECT_NAME: str = "Danish Verbs Practice"
    DEBUG: bool = False
    LOG_DIR: str = "log"
    LOG_FILE: str = "dverbs.log"
    LOG_TO_DB: bool = False
    DB_DIR: str = "db"
    DB_FILE: str = "dverbs.db"
    VERBS_FILE: str = str(BASE_DIR / "data" / "verbs.json")
    TEMPLATE_DIR: str = str(BASE_DIR / "templates")
    STATIC_DIR: str = str(BASE_DIR / "static")
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ROOT_PATH: str = os.environ.get("ROOT_PATH", "")


settings = Settings()
