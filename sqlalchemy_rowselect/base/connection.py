from sqlalchemy import create_engine, text
from sqlalchemy.exc import ResourceClosedError

from ..logger import logger
from .cursor import CoreStatement
from .query import RowSelect

MEMORY_PATH = ":memory:"


class Database:
    """
    A SQLite database reached through a SQLAlchemy engine.

    Holds a single connection, opened on first use, that every statement
    prepared by this database runs on.
    """
    def __init__(self, path=MEMORY_PATH, tag=None, engine=None, **engine_options):
        self.path = path
        self.tag = tag

        self._owns_engine = engine is None
        if engine is None:
            url = "sqlite://" if path == MEMORY_PATH else f"sqlite:///{path}"
            engine = create_engine(url, **engine_options)

        self.engine = engine
        self._connection = None
        self.closed = False

    @classmethod
    def from_engine(cls, engine, tag=None):
        if engine.dialect.name != "sqlite":
            raise ValueError(f"Only SQLite engines are supported, got '{engine.dialect.name}'")

        return cls(path=engine.url.database or MEMORY_PATH, tag=tag, engine=engine)

    @property
    def connection(self):
        if self.closed:
            raise ResourceClosedError(f"Database '{self.path}' is closed")
        if self._connection is None:
            logger.debug(f"Opening connection to '{self.path}'")
            self._connection = self.engine.connect()
        return self._connection

    def prepare(self, statement):
        logger.debug(f"Preparing statement on '{self.path}'")
        result = self.connection.execute(statement)
        return CoreStatement(result)

    def execute(self, statement, parameters=None):
        """
        Run a statement that does not return rows (DDL, INSERT, ...) and commit.

        ``parameters`` may be a dict or, for executemany, a list of dicts.
        """
        if isinstance(statement, str):
            statement = text(statement)

        result = self.connection.execute(statement, parameters)
        self.connection.commit()
        return result

    def prepare_row_select(self, results, tables, distinct=False):
        return RowSelect(self, results, tables, distinct=distinct)

    def get_rows(self, results, tables, distinct=False):
        with self.prepare_row_select(results, tables, distinct=distinct) as row_select:
            return row_select.all_rows()

    def get_values(self, result, tables, distinct=False):
        with self.prepare_row_select([result], tables, distinct=distinct) as row_select:
            return row_select.all_values()

    def close(self):
        if self.closed:
            return
        self.closed = True
        if self._connection is not None:
            logger.debug(f"Closing connection to '{self.path}'")
            self._connection.close()
        if self._owns_engine:
            self.engine.dispose()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def __repr__(self):
        return f"Database(path={self.path!r}, tag={self.tag!r})"
