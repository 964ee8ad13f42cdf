# /tests/test_dialects.py

import pytest
from sqlalchemy.dialects import mysql, postgresql, sqlite

from lugyi_admin.db.models.media_models import User
from lugyi_admin.models.dashboard_model import Period
from lugyi_admin.services.dashboard_helpers import dialects
from lugyi_admin.services.dashboard_helpers.dialects import (
    BucketDialect,
    MySQLDialect,
    PostgresDialect,
    SQLiteDialect,
    format_label,
    get_dialect,
    register_dialect,
)


def _compile(expression, sa_dialect):
    return str(expression.compile(dialect=sa_dialect, compile_kwargs={"literal_binds": True}))


def test_get_dialect_resolves_known_backends():
    assert isinstance(get_dialect("postgresql"), PostgresDialect)
    assert isinstance(get_dialect("mysql"), MySQLDialect)
    assert isinstance(get_dialect("sqlite"), SQLiteDialect)


def test_mariadb_engines_use_date_format():
    """SQLAlchemy names mariadb:// engines "mariadb"; they need DATE_FORMAT, not strftime."""
    dialect = get_dialect("mariadb")
    assert isinstance(dialect, MySQLDialect)
    assert dialect.bucket_format(Period.YEAR) == "%Y-%m"
    sql = _compile(dialect.bucket_expression(User.created_at, Period.WEEK), mysql.dialect())
    assert sql.lower().startswith("date_format(users.created_at")


def test_dialect_without_bucket_expression_cannot_be_created():
    class IncompleteDialect(BucketDialect):
        name = "incomplete"
        formats = dict(SQLiteDialect.formats)

    with pytest.raises(TypeError):
        IncompleteDialect()


@pytest.mark.parametrize("name", ["oracle", "", None])
def test_unknown_backends_fall_back_to_sqlite(name):
    assert isinstance(get_dialect(name), SQLiteDialect)


@pytest.mark.parametrize(
    "period, postgres_format, strftime_format",
    [
        (Period.DAY, "HH24:00", "%H:00"),
        (Period.WEEK, "YYYY-MM-DD", "%Y-%m-%d"),
        (Period.MONTH, "YYYY-MM-DD", "%Y-%m-%d"),
        (Period.YEAR, "YYYY-MM", "%Y-%m"),
    ],
)
def test_bucket_formats(period, postgres_format, strftime_format):
    assert get_dialect("postgresql").bucket_format(period) == postgres_format
    assert get_dialect("mysql").bucket_format(period) == strftime_format
    assert get_dialect("sqlite").bucket_format(period) == strftime_format


def test_postgres_expression_casts_to_timestamp():
    sql = _compile(PostgresDialect().bucket_expression(User.created_at, Period.YEAR), postgresql.dialect())
    assert sql.startswith("to_char(CAST(users.created_at AS TIMESTAMP")
    assert "'YYYY-MM'" in sql


def test_mysql_expression_uses_date_format():
    sql = _compile(MySQLDialect().bucket_expression(User.created_at, Period.WEEK), mysql.dialect())
    assert sql.lower().startswith("date_format(users.created_at")


def test_sqlite_expression_uses_strftime():
    sql = _compile(SQLiteDialect().bucket_expression(User.created_at, Period.YEAR), sqlite.dialect())
    assert sql == "strftime('%Y-%m', users.created_at)"


@pytest.mark.parametrize(
    "key, period, label",
    [
        ("08:00", Period.DAY, "08:00"),
        ("2024-01-15", Period.WEEK, "2024-01-15"),
        ("2024-01-15", Period.MONTH, "2024-01-15"),
        ("2024-01", Period.YEAR, "2024-01"),
    ],
)
def test_format_label(key, period, label):
    assert format_label(key, period) == label


def test_registered_dialect_is_returned_without_touching_callers():
    class ProxyDialect(BucketDialect):
        name = "custom"
        formats = dict(SQLiteDialect.formats)

        def bucket_expression(self, column, period):
            return SQLiteDialect().bucket_expression(column, period)

    custom = ProxyDialect()
    register_dialect(custom)
    try:
        assert get_dialect("custom") is custom
    finally:
        dialects._DIALECTS.pop("custom")
