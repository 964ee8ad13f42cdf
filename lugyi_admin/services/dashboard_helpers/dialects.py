# /lugyi_admin/services/dashboard_helpers/dialects.py

"""
Database-specific date bucketing for the dashboard time series.

Each supported backend gets a small strategy object that knows how to turn a
timestamp column into a *bucket key*: a zero-padded text value that sorts in
order (`2024-01-15` for a week or month bucket, `2024-01` for a year one).
Grouping and ordering happen on that key inside the database; the label shown
on the chart is rendered afterwards by `format_label`.

The day period buckets by hour of day (`08:00`). Its window spans 24 hours, so
the hour containing `now` is shared by yesterday and today and lands in a
single bucket, and the series reads `00:00` to `23:00`.

To support another backend, subclass `BucketDialect` and pass it to
`register_dialect`. Callers only ever go through `get_dialect`.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Dict, Optional, Union

from sqlalchemy import TIMESTAMP, cast, func

from ...models.dashboard_model import Period
from .date_ranges import resolve_period


class DialectName(str, Enum):
    POSTGRESQL = "postgresql"
    MYSQL = "mysql"
    MARIADB = "mariadb"
    SQLITE = "sqlite"


# Every dialect renders its keys in this shape, so one parser serves them all.
KEY_PARSE_FORMATS = {
    Period.DAY: "%H:%M",
    Period.WEEK: "%Y-%m-%d",
    Period.MONTH: "%Y-%m-%d",
    Period.YEAR: "%Y-%m",
}

LABEL_FORMATS = {
    Period.DAY: "%H:00",
    Period.WEEK: "%Y-%m-%d",
    Period.MONTH: "%Y-%m-%d",
    Period.YEAR: "%Y-%m",
}


def format_label(key: str, period: Union[Period, str]) -> str:
    """Renders a database bucket key as the label shown on the chart."""
    period = resolve_period(period)
    return datetime.strptime(key, KEY_PARSE_FORMATS[period]).strftime(LABEL_FORMATS[period])


class BucketDialect(ABC):
    """Base strategy: a per-period format table plus a SQL formatting function."""
    name: str
    formats: Dict[Period, str] = {}

    def bucket_format(self, period: Union[Period, str]) -> str:
        return self.formats[resolve_period(period)]

    @abstractmethod
    def bucket_expression(self, column, period: Union[Period, str]):
        """Returns a SQL expression rendering `column` as this period's bucket key."""


class PostgresDialect(BucketDialect):
    name = DialectName.POSTGRESQL.value
    formats = {
        Period.DAY: "HH24:00",
        Period.WEEK: "YYYY-MM-DD",
        Period.MONTH: "YYYY-MM-DD",
        Period.YEAR: "YYYY-MM",
    }

    def bucket_expression(self, column, period):
        # TO_CHAR(column::timestamp, 'YYYY-MM-DD')
        return func.to_char(cast(column, TIMESTAMP), self.bucket_format(period))


class MySQLDialect(BucketDialect):
    name = DialectName.MYSQL.value
    formats = {
        Period.DAY: "%H:00",
        Period.WEEK: "%Y-%m-%d",
        Period.MONTH: "%Y-%m-%d",
        Period.YEAR: "%Y-%m",
    }

    def bucket_expression(self, column, period):
        return func.date_format(column, self.bucket_format(period))


class MariaDBDialect(MySQLDialect):
    # Same DATE_FORMAT syntax; SQLAlchemy reports mariadb:// engines separately.
    name = DialectName.MARIADB.value


class SQLiteDialect(BucketDialect):
    name = DialectName.SQLITE.value
    formats = dict(MySQLDialect.formats)

    def bucket_expression(self, column, period):
        return func.strftime(self.bucket_format(period), column)


_DIALECTS: Dict[str, BucketDialect] = {}


def register_dialect(dialect: BucketDialect) -> None:
    _DIALECTS[dialect.name] = dialect


def get_dialect(name: Optional[str]) -> BucketDialect:
    """
    Returns the strategy for a SQLAlchemy dialect name (`engine.dialect.name`).
    Unknown or missing names get the SQLite strategy.
    """
    return _DIALECTS.get(name or "", _DIALECTS[DialectName.SQLITE.value])


for _dialect in (PostgresDialect(), MySQLDialect(), MariaDBDialect(), SQLiteDialect()):
    register_dialect(_dialect)
