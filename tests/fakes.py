class FakeStatement:
    """
    Statement handle stand-in with scripted rows and column types.

    With ``absent=True`` every typed read yields nothing, like an engine that
    reports a column type but fails to produce the value.
    """
    def __init__(self, rows, column_types, absent=False, finalize_error=None):
        self.rows = rows
        self.column_types = column_types
        self.absent = absent
        self.finalize_error = finalize_error

        self.position = -1
        self.reads = []
        self.finalize_calls = 0

    def advance(self):
        self.position += 1
        return self.position < len(self.rows)

    def column_count(self):
        return len(self.column_types)

    def column_type(self, index):
        return self.column_types[index]

    def value(self, index, column_type):
        self.reads.append((index, column_type))
        if self.absent:
            return None
        return self.rows[self.position][index]

    def finalize(self):
        self.finalize_calls += 1
        if self.finalize_error is not None:
            raise self.finalize_error
