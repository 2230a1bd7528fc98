import sqlite3

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import event
from sqlalchemy.engine import Engine


db = SQLAlchemy()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # ON DELETE CASCADE is a no-op in SQLite unless enabled per connection.
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def is_unique_violation(error, constraint_name, table, *columns):
    """True when an IntegrityError came from the named unique constraint.

    PostgreSQL and MySQL report the constraint name; SQLite only lists the
    offending ``table.column`` pairs.
    """
    message = str(getattr(error, "orig", error))
    if constraint_name in message:
        return True
    failed = ", ".join(f"{table}.{column}" for column in columns)
    return f"UNIQUE constraint failed: {failed}" in message
