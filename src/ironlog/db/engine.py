"""Database engine setup, connections and transactions."""

import logging
import sqlite3
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

from ..config import DATA_DIR, DB_FILENAME
from ..errors import ConstraintViolationError, TransientStoreError

logger = logging.getLogger(__name__)

# Fixed width so that lexical order matches chronological order
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

# Largest value SQLite can bind as an INTEGER
SQLITE_MAX_INTEGER = 2**63 - 1


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def to_db_timestamp(value: datetime) -> str:
    """Encode a datetime for storage. Naive values are taken as UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime(TIMESTAMP_FORMAT)


def from_db_timestamp(value: str | None) -> datetime | None:
    """Decode a stored timestamp into an aware UTC datetime."""
    if not value:
        return None
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def build_batch_insert(
    table: str, columns: Sequence[str], rows: Sequence[Sequence]
) -> tuple[str, tuple]:
    """Build a single multi-row INSERT with positional placeholders.

    Returns the SQL text and the flattened parameter tuple. Values are never
    interpolated into the SQL.
    """
    if not rows:
        raise ValueError("build_batch_insert requires at least one row")

    width = len(columns)
    params: list = []
    for row in rows:
        if len(row) != width:
            raise ValueError(f"Expected {width} values per row, got {len(row)}")
        params.extend(row)

    group = "(" + ", ".join("?" for _ in columns) + ")"
    sql = (
        f"INSERT INTO {table} ({', '.join(columns)}) VALUES "
        + ", ".join(group for _ in rows)
    )
    return sql, tuple(params)


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("PRAGMA foreign_keys = ON")

        # Workouts belong to an externally managed user
        await db.execute("""
            CREATE TABLE IF NOT EXISTS workouts (
                workout_id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                created_at TIMESTAMP NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f000', 'now'))
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                exercise_id INTEGER PRIMARY KEY AUTOINCREMENT,
                workout_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                current_weight REAL NOT NULL,
                target_sets INTEGER NOT NULL CHECK (target_sets >= 0),
                target_reps INTEGER NOT NULL CHECK (target_reps >= 0),
                weight_modifier REAL NOT NULL,
                FOREIGN KEY (workout_id) REFERENCES workouts(workout_id) ON DELETE CASCADE
            )
        """)

        # Completed sets, immutable once recorded
        await db.execute("""
            CREATE TABLE IF NOT EXISTS sets (
                set_id INTEGER PRIMARY KEY AUTOINCREMENT,
                exercise_id INTEGER NOT NULL,
                weight REAL NOT NULL,
                reps INTEGER NOT NULL,
                created_at TIMESTAMP NOT NULL DEFAULT (strftime('%Y-%m-%d %H:%M:%f000', 'now')),
                FOREIGN KEY (exercise_id) REFERENCES exercises(exercise_id) ON DELETE CASCADE
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workouts_user_created
            ON workouts(user_id, created_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_workout
            ON exercises(workout_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sets_exercise_created
            ON sets(exercise_id, created_at)
        """)

        await db.commit()

    logger.info("Database schema ready at %s", db_path)


class Database:
    """Handle on the SQLite store.

    Built once at process start and passed to the repositories. Each
    operation checks out its own connection through :meth:`connection`
    or :meth:`transaction`; the connection is closed when the block exits.
    """

    def __init__(self, path: Path | None = None):
        self.path = path or get_db_path()

    async def init(self) -> None:
        """Create the schema if it does not exist yet."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        await init_db(self.path)

    @asynccontextmanager
    async def connection(self) -> AsyncIterator[aiosqlite.Connection]:
        """Check out a connection in autocommit mode.

        Driver errors are translated into the ironlog error hierarchy.
        """
        try:
            async with aiosqlite.connect(self.path, isolation_level=None) as db:
                db.row_factory = aiosqlite.Row
                await db.execute("PRAGMA foreign_keys = ON")
                yield db
        except sqlite3.IntegrityError as e:
            raise ConstraintViolationError(str(e)) from e
        except sqlite3.OperationalError as e:
            raise TransientStoreError(str(e)) from e
        except OverflowError as e:
            raise ConstraintViolationError(f"Value out of range: {e}") from e

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Run the block inside one transaction.

        Commits when the block finishes. Any exception, including task
        cancellation, rolls back every statement issued in the block before
        it propagates.
        """
        async with self.connection() as db:
            await db.execute("BEGIN IMMEDIATE")
            try:
                yield db
            except BaseException:
                if db.in_transaction:
                    await db.execute("ROLLBACK")
                logger.debug("Transaction rolled back")
                raise
            await db.execute("COMMIT")
