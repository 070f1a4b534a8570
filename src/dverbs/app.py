import logging
import os
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .config import settings
from .database import init_db
from .engine import QuizEngine
from .log_handler import SQLiteHandler
from .repository import VerbRepository
from .router import router

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


# --- Logging Setup ---
def setup_logging():
    logger = logging.getLogger("dverbs")
    logger.setLevel(logging.INFO)
    if logger.handlers:
        return logger

    if not os.path.exists(settings.LOG_DIR):
        os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE)
    file_handler = RotatingFileHandler(log_path, maxBytes=5_000_000, backupCount=3)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)

    if settings.LOG_TO_DB:
        init_db()
        db_handler = SQLiteHandler()
        db_handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(db_handler)

    # Also configure root logger to see logs from other libraries
    logging.basicConfig(level=logging.INFO)
    return logger


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger("dverbs")
    verbs = app.state.verb_repository.load()
    engine = QuizEngine(seed=app.state.seed)
    engine.initialize(verbs)
    if engine.is_empty:
        logger.warning("Starting without verbs; the quiz will show an empty state.")
    app.state.quiz_engine = engine
    yield


# --- App Factory ---
def create_app(
    repository: Optional[VerbRepository] = None, seed: Optional[int] = None
) -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
        root_path=settings.ROOT_PATH,
    )
    app.state.verb_repository = repository or VerbRepository(settings.VERBS_FILE)
    app.state.seed = seed

    app.mount("/static", StaticFiles(directory=settings.STATIC_DIR), name="static")

    app.include_router(router)

    return app
