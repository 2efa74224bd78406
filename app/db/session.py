from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session
from app.core.config import settings

# check_same_thread is needed for SQLite, remove for PostgreSQL
connect_args = {"check_same_thread": False} if "sqlite" in settings.DATABASE_URL else {}
engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)

def enable_sqlite_foreign_keys(target: Engine) -> None:
    # SQLite ignores REFERENCES clauses unless asked per connection
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _set_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

enable_sqlite_foreign_keys(engine)

def get_session():
    with Session(engine) as session:
        yield session

def create_db_and_tables(bind: Engine = engine):
    # Register every table with SQLModel.metadata before create_all
    import app.models  # noqa: F401
    SQLModel.metadata.create_all(bind)
