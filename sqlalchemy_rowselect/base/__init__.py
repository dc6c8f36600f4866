from .connection import Database
from .cursor import CoreStatement
from .query import RowSelect
from .statement import build_select
from .value import ColumnType, Value

__all__ = [
    "Database",
    "CoreStatement",
    "RowSelect",
    "build_select",
    "ColumnType",
    "Value",
]
