import os
import sqlite3

from .config import settings


def get_db_connection():
    """Opens the SQLite database that collects application log records."""
    db_path = os.path.join(settings.DB_DIR, settings.DB_FILE)
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def create_log_table():
    conn = get_db_connection()
    try:
        with conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp DATETIME DEFAULT CURRENT_TIMESTAMP,
                    logger TEXT,
                    level TEXT,
                    message TEXT
                );
            """
            )
    finally:
        conn.close()


def init_db():
    os.makedirs(settings.DB_DIR, exist_ok=True)
    create_log_table()
