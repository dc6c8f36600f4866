from .base.connection import Database
from .base.query import RowSelect
from .base.value import ColumnType, Value
from .errors import Error, MisuseError

__all__ = [
    "Database",
    "RowSelect",
    "ColumnType",
    "Value",
    "Error",
    "MisuseError",
]

__version__ = '0.1.0'
