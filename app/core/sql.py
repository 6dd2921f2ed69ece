# app/core/sql.py
"""
SQL expressions whose rendering differs per dialect.

Production runs on Postgres (JSONB operators, timestamptz arithmetic);
tests run on SQLite (json_each / julianday). Each construct below is a
plain ColumnElement with one @compiles hook per dialect, so repositories
can build statements without knowing where they will execute.
"""
import json
from datetime import datetime

from sqlalchemy import Boolean, Float, String, literal
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import ColumnElement


class json_array_contains(ColumnElement):
    """
    True when the JSON array in `column` contains the string `value`.

        Postgres: tags @> '["red"]'::jsonb
        SQLite:   EXISTS (SELECT 1 FROM json_each(tags) WHERE value = 'red')
    """

    type = Boolean()
    inherit_cache = False

    def __init__(self, column, value: str):
        self.column = column
        self.value = value


@compiles(json_array_contains)
def _json_array_contains_default(element, compiler, **kw):
    return "EXISTS (SELECT 1 FROM json_each(%s) WHERE json_each.value = %s)" % (
        compiler.process(element.column, **kw),
        compiler.process(literal(element.value, String()), **kw),
    )


@compiles(json_array_contains, "postgresql")
def _json_array_contains_pg(element, compiler, **kw):
    return "%s @> CAST(%s AS JSONB)" % (
        compiler.process(element.column, **kw),
        compiler.process(literal(json.dumps([element.value]), String()), **kw),
    )


# ISO-8601 date or date-time, as written by the catalog feeds.
# Postgres has no safe cast, so anything else must be filtered before CAST.
ISO_TIMESTAMP_PATTERN = (
    r"^\d{4}-(0[1-9]|1[0-2])-(0[1-9]|[12]\d|3[01])"
    r"([T ]([01]\d|2[0-3]):[0-5]\d(:[0-5]\d(\.\d+)?)?(Z|[+-]\d{2}(:?\d{2})?)?)?$"
)


class days_since(ColumnElement):
    """
    Fractional days elapsed between the timestamp string `expr` and `now`.
    NULL when `expr` is NULL or not a timestamp.
    """

    type = Float()
    inherit_cache = False

    def __init__(self, expr, now: datetime):
        self.expr = expr
        self.now = now.isoformat()


@compiles(days_since)
def _days_since_default(element, compiler, **kw):
    # julianday() also accepts "now" and bare day numbers; require a date prefix
    expr = compiler.process(element.expr, **kw)
    return (
        "(CASE WHEN %s GLOB '[0-9][0-9][0-9][0-9]-[0-9][0-9]-[0-9][0-9]*' "
        "THEN julianday(%s) - julianday(%s) END)"
    ) % (
        expr,
        compiler.process(literal(element.now, String()), **kw),
        expr,
    )


@compiles(days_since, "postgresql")
def _days_since_pg(element, compiler, **kw):
    expr = compiler.process(element.expr, **kw)
    return (
        "(CASE WHEN %s ~ %s THEN "
        "EXTRACT(EPOCH FROM (CAST(%s AS TIMESTAMPTZ) - CAST(%s AS TIMESTAMPTZ))) / 86400.0 "
        "END)"
    ) % (
        expr,
        compiler.process(literal(ISO_TIMESTAMP_PATTERN, String()), **kw),
        compiler.process(literal(element.now, String()), **kw),
        expr,
    )
