"""
Tests for the SQL Insert Plan Builder.
"""
from mockgen.export.sql_exporter import build_insert_plan, serialize_value


def test_one_tuple_per_row():
    rows = [{"id": i, "name": f"n{i}"} for i in range(4)]

    plan = build_insert_plan("people", rows)

    assert plan.record_count == 4
    assert plan.statement.startswith('INSERT INTO "people" ("id", "name") VALUES ')
    assert plan.statement.endswith(";")
    assert plan.statement.count("(") == 5  # column list + 4 tuples


def test_apostrophes_are_doubled():
    plan = build_insert_plan("people", [{"name": "O'Brien"}])

    assert plan.statement == 'INSERT INTO "people" ("name") VALUES (\'O\'\'Brien\');'


def test_no_rows_no_plan():
    assert build_insert_plan("people", []) is None


def test_columns_follow_first_row():
    plan = build_insert_plan("t", [{"a": 1, "b": 2}, {"b": 3, "a": 4}])

    assert plan.statement == 'INSERT INTO "t" ("a", "b") VALUES (1, 2), (4, 3);'


def test_serialize_value():
    assert serialize_value(None) == "NULL"
    assert serialize_value(True) == "true"
    assert serialize_value(False) == "false"
    assert serialize_value(12) == "12"
    assert serialize_value(1.5) == "1.5"
    assert serialize_value("it's") == "'it''s'"
    assert serialize_value({"k": "it's"}) == "'{\"k\": \"it''s\"}'"
    assert serialize_value([1, 2]) == "'[1, 2]'"
