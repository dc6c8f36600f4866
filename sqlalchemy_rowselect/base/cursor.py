from ..helpers.utils import fits_int32
from ..logger import logger
from .value import ColumnType, column_type_of

# Typed reads: each returns the stored object converted to the requested
# type, or None when the stored object cannot be read as that type.
COLUMN_READERS = {
    ColumnType.INTEGER32: lambda obj: int(obj) if isinstance(obj, int) and fits_int32(obj) else None,
    ColumnType.INTEGER64: lambda obj: int(obj) if isinstance(obj, int) else None,
    ColumnType.FLOAT: lambda obj: float(obj) if isinstance(obj, (int, float)) else None,
    ColumnType.TEXT: lambda obj: obj if isinstance(obj, str) else None,
    ColumnType.BLOB: lambda obj: bytes(obj) if isinstance(obj, (bytes, bytearray, memoryview)) else None,
}


class CoreStatement:
    """
    A prepared SELECT, positioned on at most one row at a time.

    Wraps the ``CursorResult`` SQLAlchemy returns for the statement and
    exposes the step / inspect / read / finalize protocol RowSelect drives.
    """
    def __init__(self, result):
        self._result = result
        self._row = None
        self._column_count = len(result.keys())
        self.finalized = False

    def advance(self):
        self._row = self._result.fetchone()
        return self._row is not None

    def column_count(self):
        return self._column_count

    def column_type(self, index):
        return column_type_of(self._row[index])

    def value(self, index, column_type):
        obj = self._row[index]
        if obj is None:
            return None

        return COLUMN_READERS[column_type](obj)

    def finalize(self):
        if self.finalized:
            return

        logger.debug("Finalizing statement")
        self._result.close()
        self._row = None
        self.finalized = True
