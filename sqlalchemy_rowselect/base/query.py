from ..errors import MisuseError, Operation
from ..logger import logger
from .statement import build_select, as_criterion, as_clause
from .value import ColumnType, Value, ZERO_VALUES


class RowSelect:
    """
    Chain call for row-selecting.

    The SELECT is built when the RowSelect is created but only prepared on
    the database the first time a row or value is requested. The prepared
    statement is owned by this object and finalized by ``release()``, on
    exit of a ``with`` block, or when the object is garbage collected::

        with database.prepare_row_select(["id", "name"], ["items"]) as row_select:
            for row in row_select:
                print(row[0].int32_value, row[1].string_value)

    Once released, a RowSelect cannot be iterated again.
    """
    _core_statement = None
    _released = False

    def __init__(self, database, results, tables, distinct=False):
        self.database = database

        results = list(results)
        tables = list(tables)

        if not tables:
            raise self._misuse("Empty table")

        if not results:
            raise self._misuse("Empty result")

        self.statement = build_select(results, tables, distinct)

    @property
    def tag(self):
        return self.database.tag

    @property
    def path(self):
        return self.database.path

    @property
    def prepared(self):
        return self._core_statement is not None

    @property
    def released(self):
        return self._released

    def _misuse(self, message):
        return MisuseError(
            message,
            tag=self.database.tag,
            path=self.database.path,
            operation=Operation.SELECT,
        )

    def _check_not_released(self):
        if self._released:
            raise self._misuse("Cursor is released")

    def ensure_prepared(self):
        """
        Return the prepared statement, preparing it on first call.
        """
        self._check_not_released()

        if self._core_statement is None:
            self._core_statement = self.database.prepare(self.statement)

        return self._core_statement

    def _next(self):
        return self.ensure_prepared().advance()

    def _extract(self, index):
        core_statement = self.ensure_prepared()
        column_type = core_statement.column_type(index)

        if column_type is ColumnType.NULL:
            return Value.null()

        value = core_statement.value(index, column_type)
        if value is None:
            value = ZERO_VALUES[column_type]

        return Value(column_type, value)

    def _extract_row(self):
        core_statement = self.ensure_prepared()
        return [self._extract(index) for index in range(core_statement.column_count())]

    def next_row(self):
        """
        Return the next row as a list of Value, or None once all rows were read.
        """
        if not self._next():
            return None
        return self._extract_row()

    def all_rows(self):
        rows = []
        while self._next():
            rows.append(self._extract_row())
        return rows

    def next_value(self):
        """
        Return the first column of the next row, or None once all rows were read.
        """
        if not self._next():
            return None
        return self._extract(0)

    def all_values(self):
        values = []
        while self._next():
            values.append(self._extract(0))
        return values

    def _chain(self, method, *args):
        self._check_not_released()
        if self._core_statement is not None:
            raise self._misuse("Statement already prepared")

        self.statement = getattr(self.statement, method)(*args)
        return self

    def where(self, *criteria):
        return self._chain("where", *[as_criterion(c) for c in criteria])

    def order_by(self, *clauses):
        return self._chain("order_by", *[as_clause(c) for c in clauses])

    def group_by(self, *clauses):
        return self._chain("group_by", *[as_clause(c) for c in clauses])

    def having(self, *criteria):
        return self._chain("having", *[as_criterion(c) for c in criteria])

    def limit(self, limit):
        return self._chain("limit", limit)

    def offset(self, offset):
        return self._chain("offset", offset)

    def release(self):
        """
        Finalize the prepared statement, if any. Safe to call more than once.
        """
        self._released = True

        if self._core_statement is not None:
            self._core_statement.finalize()
            self._core_statement = None

    def __iter__(self):
        row = self.next_row()
        while row is not None:
            yield row
            row = self.next_row()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()

    def __del__(self):
        try:
            self.release()
        except Exception as e:
            logger.warning(f"Error finalizing statement of a discarded RowSelect: {e}")

    def __repr__(self):
        state = "released" if self._released else ("prepared" if self.prepared else "lazy")
        return f"RowSelect(path={self.path!r}, {state})"
