import pytest

from sqlalchemy_rowselect import RowSelect, ColumnType, Value
from sqlalchemy_rowselect.base.value import ZERO_VALUES

from fakes import FakeStatement

ALL_TYPES = [
    ColumnType.INTEGER32,
    ColumnType.INTEGER64,
    ColumnType.FLOAT,
    ColumnType.TEXT,
    ColumnType.BLOB,
    ColumnType.NULL,
]


class TestExtract:
    def test_every_type_is_decodable(self):
        # Each non-null type needs a zero value; NULL must never get one
        assert set(ZERO_VALUES) | {ColumnType.NULL} == set(ColumnType)
        assert ColumnType.NULL not in ZERO_VALUES

    def test_typed_reads(self, fake_database):
        row = (5, 2 ** 40, 1.25, "five", b"\x05", None)
        statement = FakeStatement([row], ALL_TYPES)
        fake_database.prepare.return_value = statement

        row_select = RowSelect(fake_database, ["a", "b", "c", "d", "e", "f"], ["t"])

        assert row_select.next_row() == [
            Value(ColumnType.INTEGER32, 5),
            Value(ColumnType.INTEGER64, 2 ** 40),
            Value(ColumnType.FLOAT, 1.25),
            Value(ColumnType.TEXT, "five"),
            Value(ColumnType.BLOB, b"\x05"),
            Value.null(),
        ]

    def test_absent_reads_fall_back_to_zero(self, fake_database):
        statement = FakeStatement([(None,) * 6], ALL_TYPES, absent=True)
        fake_database.prepare.return_value = statement

        row_select = RowSelect(fake_database, ["a", "b", "c", "d", "e", "f"], ["t"])

        assert row_select.all_rows() == [[
            Value(ColumnType.INTEGER32, 0),
            Value(ColumnType.INTEGER64, 0),
            Value(ColumnType.FLOAT, 0.0),
            Value(ColumnType.TEXT, ""),
            Value(ColumnType.BLOB, b""),
            Value.null(),
        ]]

    @pytest.mark.parametrize("absent", [True, False])
    def test_null_is_never_read_or_defaulted(self, fake_database, absent):
        statement = FakeStatement([(None,), (None,)], [ColumnType.NULL], absent=absent)
        fake_database.prepare.return_value = statement

        row_select = RowSelect(fake_database, ["a"], ["t"])

        values = row_select.all_values()
        assert values == [Value.null(), Value.null()]
        assert all(v.is_null for v in values)
        assert statement.reads == []

    def test_value_reads_column_zero(self, fake_database):
        statement = FakeStatement([("x", 1)], [ColumnType.TEXT, ColumnType.INTEGER32])
        fake_database.prepare.return_value = statement

        row_select = RowSelect(fake_database, ["a", "b"], ["t"])

        assert row_select.next_value() == Value(ColumnType.TEXT, "x")
        assert statement.reads == [(0, ColumnType.TEXT)]
        assert row_select.next_value() is None

    def test_row_follows_column_count(self, fake_database):
        statement = FakeStatement([(1, 2, 3)], [ColumnType.INTEGER32] * 3)
        fake_database.prepare.return_value = statement

        row_select = RowSelect(fake_database, ["*"], ["t"])

        row = row_select.next_row()
        assert [v.int32_value for v in row] == [1, 2, 3]
        assert [index for index, _ in statement.reads] == [0, 1, 2]
