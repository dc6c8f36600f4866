from sqlalchemy import select, table, literal_column, text, type_coerce
from sqlalchemy.sql.sqltypes import NullType
from sqlalchemy.sql.selectable import Select


def as_result_column(expr):
    if isinstance(expr, str):
        return literal_column(expr)
    # Untyped, so rows carry the values exactly as SQLite stored them
    return type_coerce(expr, NullType())


def as_from_clause(name):
    if isinstance(name, str):
        return table(name)
    return name


def as_criterion(criterion):
    if isinstance(criterion, str):
        return text(criterion)
    return criterion


def as_clause(clause):
    if isinstance(clause, str):
        return literal_column(clause)
    return clause


def build_select(results, tables, distinct=False) -> Select:
    """
    Build the SELECT ... FROM ... statement a RowSelect iterates over.

    Plain strings are taken as raw SQL fragments: result strings become
    literal columns and table strings become lightweight table clauses.
    SQLAlchemy expressions and tables are used as-is. Nothing is compiled
    or executed here.
    """
    statement = select(*[as_result_column(r) for r in results])
    statement = statement.select_from(*[as_from_clause(t) for t in tables])

    if distinct:
        statement = statement.distinct()

    return statement
