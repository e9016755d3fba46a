from sqlalchemy import DateTime
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.functions import FunctionElement


class Base(DeclarativeBase):
    pass


class utcnow(FunctionElement):
    """Current UTC time taken from the database clock, not the app server's."""

    type = DateTime(timezone=True)
    inherit_cache = True


@compiles(utcnow)
def _default_utcnow(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


@compiles(utcnow, "postgresql")
def _pg_utcnow(element, compiler, **kw):
    return "now()"


@compiles(utcnow, "sqlite")
def _sqlite_utcnow(element, compiler, **kw):
    # CURRENT_TIMESTAMP only has whole seconds on SQLite
    return "(STRFTIME('%Y-%m-%d %H:%M:%f', 'now'))"
