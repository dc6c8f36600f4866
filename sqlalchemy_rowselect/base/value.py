from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..helpers.utils import fits_int32, wrap_int32, float_to_int64, text_to_int, text_to_float


class ColumnType(Enum):
    INTEGER32 = "integer32"
    INTEGER64 = "integer64"
    FLOAT = "float"
    TEXT = "text"
    BLOB = "blob"
    NULL = "null"


# What a column decodes to when the engine reports a type but yields nothing.
# NULL is deliberately absent: it is never defaulted.
ZERO_VALUES = {
    ColumnType.INTEGER32: 0,
    ColumnType.INTEGER64: 0,
    ColumnType.FLOAT: 0.0,
    ColumnType.TEXT: "",
    ColumnType.BLOB: b"",
}


def column_type_of(obj):
    """
    Return the ColumnType SQLite would report for a Python value.
    """
    if obj is None:
        return ColumnType.NULL

    # bool is an int subclass and is stored as 0/1
    if isinstance(obj, int):
        return ColumnType.INTEGER32 if fits_int32(obj) else ColumnType.INTEGER64

    if isinstance(obj, float):
        return ColumnType.FLOAT

    if isinstance(obj, str):
        return ColumnType.TEXT

    if isinstance(obj, (bytes, bytearray, memoryview)):
        return ColumnType.BLOB

    raise TypeError(f"Unsupported column value type: {type(obj)}")


@dataclass(frozen=True)
class Value:
    """
    One decoded column: a type tag plus the Python object holding its content.
    """
    type: ColumnType
    value: Any = None

    @classmethod
    def null(cls):
        return cls(ColumnType.NULL, None)

    @classmethod
    def from_python(cls, obj):
        column_type = column_type_of(obj)
        if column_type is ColumnType.NULL:
            return cls.null()

        if column_type is ColumnType.BLOB:
            obj = bytes(obj)
        elif isinstance(obj, bool):
            obj = int(obj)

        return cls(column_type, obj)

    @property
    def is_null(self):
        return self.type is ColumnType.NULL

    def to_python(self):
        return self.value

    @property
    def int64_value(self) -> int:
        if self.type in (ColumnType.INTEGER32, ColumnType.INTEGER64):
            return self.value
        if self.type is ColumnType.FLOAT:
            return float_to_int64(self.value)
        if self.type is ColumnType.TEXT:
            return text_to_int(self.value)
        if self.type is ColumnType.BLOB:
            return text_to_int(self.value.decode("utf-8", errors="replace"))
        return 0

    @property
    def int32_value(self) -> int:
        return wrap_int32(self.int64_value)

    @property
    def double_value(self) -> float:
        if self.type in (ColumnType.INTEGER32, ColumnType.INTEGER64, ColumnType.FLOAT):
            return float(self.value)
        if self.type is ColumnType.TEXT:
            return text_to_float(self.value)
        if self.type is ColumnType.BLOB:
            return text_to_float(self.value.decode("utf-8", errors="replace"))
        return 0.0

    @property
    def string_value(self) -> str:
        if self.type is ColumnType.NULL:
            return ""
        if self.type is ColumnType.BLOB:
            return self.value.decode("utf-8", errors="replace")
        return str(self.value)

    @property
    def data_value(self) -> bytes:
        if self.type is ColumnType.BLOB:
            return self.value
        return self.string_value.encode("utf-8")

    def __repr__(self):
        if self.is_null:
            return "Value(null)"
        return f"Value({self.type.value}, {self.value!r})"
