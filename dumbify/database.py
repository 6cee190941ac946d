import sqlite3
import logging
from contextlib import closing
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from dumbify.errors import PersistenceError

DB_NAME = ".explanations.db"


def get_connection():
    """Get a database connection with row factory for dict-like access."""
    conn = sqlite3.connect(DB_NAME)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_name: Optional[str] = None):
    global DB_NAME
    if db_name:
        DB_NAME = db_name

    try:
        with closing(get_connection()) as conn:
            cursor = conn.cursor()

            cursor.execute("""
                CREATE TABLE IF NOT EXISTS explanations (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id TEXT NOT NULL,
                    code TEXT NOT NULL,
                    tone TEXT NOT NULL,
                    explanation TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)

            cursor.execute("CREATE INDEX IF NOT EXISTS idx_explanations_user ON explanations(user_id, created_at)")
            conn.commit()
    except sqlite3.Error as e:
        logging.error(f"Failed to initialize database: {e}")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def save_explanation(user_id: str, code: str, tone: str, explanation: str) -> Dict[str, Any]:
    try:
        with closing(get_connection()) as conn:
            cursor = conn.cursor()
            now = _now()
            cursor.execute("""
                INSERT INTO explanations (user_id, code, tone, explanation, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
            """, (user_id, code, tone, explanation, now, now))
            conn.commit()
            cursor.execute("SELECT * FROM explanations WHERE id = ?", (cursor.lastrowid,))
            return dict(cursor.fetchone())
    except sqlite3.Error as e:
        logging.error(f"Failed to save explanation for {user_id}: {e}")
        raise PersistenceError(f"Failed to save explanation: {e}") from e


def get_user_explanations(user_id: str, limit: int = 50, offset: int = 0) -> List[Dict[str, Any]]:
    try:
        with closing(get_connection()) as conn:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT * FROM explanations
                WHERE user_id = ?
                ORDER BY created_at DESC, id DESC
                LIMIT ? OFFSET ?
            """, (user_id, limit, offset))
            return [dict(row) for row in cursor.fetchall()]
    except sqlite3.Error as e:
        logging.error(f"Failed to load explanations for {user_id}: {e}")
        raise PersistenceError(f"Failed to load explanations: {e}") from e


def get_latest_explanation(user_id: str) -> Optional[Dict[str, Any]]:
    rows = get_user_explanations(user_id, limit=1)
    return rows[0] if rows else None


def delete_explanation(explanation_id: str, user_id: str) -> bool:
    """Delete one explanation, only if it belongs to ``user_id``."""
    try:
        with closing(get_connection()) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "DELETE FROM explanations WHERE id = ? AND user_id = ?",
                (explanation_id, user_id),
            )
            conn.commit()
            return cursor.rowcount > 0
    except sqlite3.Error as e:
        logging.error(f"Failed to delete explanation {explanation_id} for {user_id}: {e}")
        raise PersistenceError(f"Failed to delete explanation: {e}") from e


def delete_user_explanations(user_id: str) -> int:
    try:
        with closing(get_connection()) as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM explanations WHERE user_id = ?", (user_id,))
            conn.commit()
            return cursor.rowcount
    except sqlite3.Error as e:
        logging.error(f"Failed to clear explanations for {user_id}: {e}")
        raise PersistenceError(f"Failed to clear explanations: {e}") from e
