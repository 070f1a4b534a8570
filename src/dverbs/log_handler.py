import logging

from .database import get_db_connection


class SQLiteHandler(logging.Handler):
    """
    A logging handler that appends records to the `logs` table.
    Call `database.init_db()` before attaching it.
    """

    def emit(self, record):
        try:
            conn = get_db_connection()
            try:
                with conn:
                    conn.execute(
                        "INSERT INTO logs (logger, level, message) VALUES (?, ?, ?)",
                        (record.name, record.levelname, self.format(record)),
                    )
            finally:
                conn.close()
        except Exception:
            self.handleError(record)
