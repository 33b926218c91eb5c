"""Tests for the database engine helpers and configuration."""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from ironlog.config import DEFAULT_WINDOW_HOURS, Settings
from ironlog.db.engine import (
    TIMESTAMP_FORMAT,
    build_batch_insert,
    from_db_timestamp,
    to_db_timestamp,
)
from ironlog.errors import ConstraintViolationError, TransientStoreError


class TestBuildBatchInsert:
    """Tests for the multi-row insert builder."""

    def test_placeholders_and_params(self):
        sql, params = build_batch_insert("t", ["a", "b"], [(1, "x"), (2, "y'z")])

        assert sql == "INSERT INTO t (a, b) VALUES (?, ?), (?, ?)"
        assert params == (1, "x", 2, "y'z")

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            build_batch_insert("t", ["a"], [])

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValueError):
            build_batch_insert("t", ["a", "b"], [(1, 2), (3,)])


class TestTimestamps:
    """Tests for the timestamp codec."""

    def test_aware_roundtrip(self):
        value = datetime(2026, 1, 2, 3, 4, 5, 6789, tzinfo=timezone.utc)
        assert from_db_timestamp(to_db_timestamp(value)) == value

    def test_offset_normalized_to_utc(self):
        value = datetime(2026, 1, 2, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert to_db_timestamp(value) == "2026-01-02 10:00:00.000000"

    def test_lexical_order_is_chronological(self):
        earlier = datetime(2026, 1, 2, 9, 59, 59, 999999)
        later = datetime(2026, 1, 2, 10, 0, 0)
        assert to_db_timestamp(earlier) < to_db_timestamp(later)

    def test_reads_sqlite_default_format(self):
        assert from_db_timestamp("2026-01-02 03:04:05") == datetime(
            2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc
        )

    def test_empty(self):
        assert from_db_timestamp(None) is None


class TestDatabase:
    """Tests for connections and transactions."""

    async def test_transaction_rolls_back_on_error(self, database):
        with pytest.raises(RuntimeError):
            async with database.transaction() as db:
                await db.execute(
                    "INSERT INTO workouts (user_id, name, created_at) VALUES (1, 'x', '2026-01-01')"
                )
                raise RuntimeError("boom")

        async with database.connection() as db:
            cursor = await db.execute("SELECT COUNT(*) FROM workouts")
            assert (await cursor.fetchone())[0] == 0

    async def test_transaction_commits(self, database):
        async with database.transaction() as db:
            await db.execute(
                "INSERT INTO workouts (user_id, name, created_at) VALUES (1, 'x', '2026-01-01')"
            )

        async with database.connection() as db:
            cursor = await db.execute("SELECT COUNT(*) FROM workouts")
            assert (await cursor.fetchone())[0] == 1

    async def test_operational_error_translated(self, database):
        with pytest.raises(TransientStoreError):
            async with database.connection() as db:
                await db.execute("SELECT * FROM missing_table")

    async def test_init_is_repeatable(self, database):
        await database.init()

    async def test_default_timestamp_is_fixed_width(self, database):
        """Rows inserted without created_at use the application format."""
        async with database.connection() as db:
            await db.execute("INSERT INTO workouts (user_id, name) VALUES (1, 'x')")
            cursor = await db.execute("SELECT created_at FROM workouts")
            (value,) = await cursor.fetchone()

        assert len(value) == len("2026-01-02 03:04:05.000000")
        datetime.strptime(value, TIMESTAMP_FORMAT)

    async def test_out_of_range_integer_translated(self, database):
        with pytest.raises(ConstraintViolationError):
            async with database.connection() as db:
                await db.execute("SELECT * FROM workouts WHERE user_id = ?", (2**70,))


class TestSettings:
    """Tests for environment configuration."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.window_hours == DEFAULT_WINDOW_HOURS
        assert settings.log_level == "INFO"
        assert settings.database_path.name == "ironlog.db"

    def test_overrides(self, tmp_path):
        settings = Settings.from_env(
            {
                "IRONLOG_DATA_DIR": str(tmp_path),
                "IRONLOG_WINDOW_HOURS": "6",
                "IRONLOG_LOG_LEVEL": "debug",
            }
        )
        assert settings.database_path == tmp_path / "ironlog.db"
        assert settings.window_hours == 6
        assert settings.log_level == "DEBUG"

    def test_explicit_db_path_wins(self, tmp_path):
        settings = Settings.from_env(
            {"IRONLOG_DATA_DIR": str(tmp_path), "IRONLOG_DB_PATH": "/tmp/other.db"}
        )
        assert settings.database_path == Path("/tmp/other.db")

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_window(self, value):
        with pytest.raises(ValueError):
            Settings.from_env({"IRONLOG_WINDOW_HOURS": value})
