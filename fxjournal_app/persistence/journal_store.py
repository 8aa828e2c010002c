"""Journal persistence layer: JSON blobs under named keys in SQLite."""

import json
import sqlite3
import threading
from collections.abc import Mapping
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from ..data.models import Strategy
from ..errors import PersistenceError
from ..logging.config import get_logger

STRATEGIES_KEY = "tradingStrategies"
CURRENT_STRATEGY_KEY = "currentStrategy"
ACTIVE_VIEW_KEY = "activeView"

DEFAULT_ACTIVE_VIEW = "dashboard"


class JournalStore:
    """SQLite-backed key/value store for journal state."""

    def __init__(self, db_path: str = "journal.db", timeout: float = 30.0):
        self.db_path = Path(db_path)
        self.timeout = timeout
        self.logger = get_logger("journal.store")
        self._lock = threading.Lock()

        self._init_database()

    def _init_database(self) -> None:
        """Initialize database schema."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS journal_kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                )
            """)
            conn.commit()

    @contextmanager
    def _get_connection(self):
        """Get database connection, converting sqlite failures to PersistenceError."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path, timeout=self.timeout)
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as e:
            if conn:
                conn.rollback()
            self.logger.error("Database error", db_path=str(self.db_path), error=str(e))
            raise PersistenceError(
                f"Database error: {e}", operation="sqlite", target=str(self.db_path)
            ) from e
        finally:
            if conn:
                conn.close()

    def set_value(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under key, replacing any previous value."""
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise PersistenceError(
                f"Value for {key} is not JSON serializable: {e}", operation="encode", target=key
            ) from e

        with self._lock:
            with self._get_connection() as conn:
                conn.execute("""
                    INSERT INTO journal_kv (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                """, (key, payload, datetime.now(timezone.utc).isoformat()))
                conn.commit()

        self.logger.debug("Value stored", key=key, size=len(payload))

    def get_value(self, key: str, default: Any = None) -> Any:
        """
        Load the value stored under key.

        Args:
            key: Storage key
            default: Returned when nothing is stored under key

        Returns:
            Decoded JSON value or default

        Raises:
            PersistenceError: If the stored payload is not valid JSON
        """
        with self._get_connection() as conn:
            row = conn.execute(
                "SELECT value FROM journal_kv WHERE key = ?", (key,)
            ).fetchone()

        if row is None:
            return default

        try:
            return json.loads(row["value"])
        except json.JSONDecodeError as e:
            self.logger.error("Corrupt journal payload", key=key, error=str(e))
            raise PersistenceError(
                f"Stored value for {key} is not valid JSON", operation="decode", target=key
            ) from e

    def delete_value(self, key: str) -> bool:
        """Remove key; returns True if something was deleted."""
        with self._lock:
            with self._get_connection() as conn:
                cursor = conn.execute("DELETE FROM journal_kv WHERE key = ?", (key,))
                conn.commit()
                return cursor.rowcount > 0

    def keys(self) -> list[str]:
        """All stored keys, sorted."""
        with self._get_connection() as conn:
            rows = conn.execute("SELECT key FROM journal_kv ORDER BY key").fetchall()
        return [row["key"] for row in rows]

    def save_strategies(self, strategies: Mapping[str, Strategy]) -> None:
        """
        Persist all strategies.

        An empty mapping clears the stored strategies and the current
        strategy selection.
        """
        if not strategies:
            self.delete_value(STRATEGIES_KEY)
            self.delete_value(CURRENT_STRATEGY_KEY)
            self.logger.info("Strategies cleared")
            return

        self.set_value(
            STRATEGIES_KEY,
            {strategy_id: strategy.to_dict() for strategy_id, strategy in strategies.items()},
        )
        self.logger.info("Strategies saved", count=len(strategies))

    def load_strategies(self, default_balance: float = 10000.0) -> dict[str, Strategy]:
        """Load all strategies in their stored order; empty if none were saved."""
        raw = self.get_value(STRATEGIES_KEY, default={})
        if not isinstance(raw, dict):
            raise PersistenceError(
                "Stored strategies are not a JSON object",
                operation="decode",
                target=STRATEGIES_KEY,
            )

        try:
            return {
                strategy_id: Strategy.from_dict(data, default_balance=default_balance)
                for strategy_id, data in raw.items()
            }
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self.logger.error("Malformed strategy record", error=str(e))
            raise PersistenceError(
                f"Malformed strategy record: {e}", operation="decode", target=STRATEGIES_KEY
            ) from e

    def set_current_strategy(self, strategy_id: Optional[str]) -> None:
        """Remember the selected strategy; None forgets the selection."""
        if strategy_id is None:
            self.delete_value(CURRENT_STRATEGY_KEY)
        else:
            self.set_value(CURRENT_STRATEGY_KEY, strategy_id)

    def get_current_strategy(self) -> Optional[str]:
        """
        Last selected strategy id, if any.

        Raises:
            PersistenceError: If the stored selection is not a strategy id
        """
        strategy_id = self.get_value(CURRENT_STRATEGY_KEY)
        if strategy_id is not None and not isinstance(strategy_id, str):
            self.logger.error("Malformed current strategy", value=repr(strategy_id))
            raise PersistenceError(
                "Stored current strategy is not a string",
                operation="decode",
                target=CURRENT_STRATEGY_KEY,
            )
        return strategy_id

    def set_active_view(self, view: str) -> None:
        """Remember the last open view (dashboard, trades, ...)."""
        self.set_value(ACTIVE_VIEW_KEY, view)

    def get_active_view(self) -> str:
        """Last open view, "dashboard" by default."""
        return self.get_value(ACTIVE_VIEW_KEY, default=DEFAULT_ACTIVE_VIEW)
