"""
Tests for the SQLAlchemy adapter against a real SQLite database.
"""
import itertools
import json

import pytest

from mockgen.database.interfaces import Database, SchemaFetchError
from mockgen.database.sqlalchemy_database import SqlAlchemyDatabase
from mockgen.pipeline import execute_mock_data_generation
from mockgen.schema_analysis.models import FOREIGN_KEY, PRIMARY_KEY
from mockgen.testing import ScriptedTextGenerator


@pytest.fixture
def database(tmp_path):
    db = SqlAlchemyDatabase(f"sqlite:///{tmp_path / 'blog.db'}")
    db.execute(
        "CREATE TABLE users ("
        "id INTEGER PRIMARY KEY, email VARCHAR(255) NOT NULL, created_at TIMESTAMP)"
    )
    db.execute(
        "CREATE TABLE posts ("
        "id INTEGER PRIMARY KEY, title TEXT NOT NULL, "
        "user_id INTEGER NOT NULL REFERENCES users(id))"
    )
    yield db
    db.close()


def _count(prompt):
    return int(prompt.split("Return exactly ")[1].split(" rows")[0])


def test_satisfies_database_protocol(database):
    assert isinstance(database, Database)


def test_schema_reflection(database):
    schema = {table["name"]: table for table in database.get_schema()}

    assert set(schema) == {"users", "posts"}

    users = {col["name"]: col for col in schema["users"]["columns"]}
    assert users["id"]["constraint"] == PRIMARY_KEY
    assert users["email"]["type"] == "varchar(255)"
    assert users["email"]["nullable"] is False

    posts = {col["name"]: col for col in schema["posts"]["columns"]}
    assert posts["user_id"]["constraint"] == FOREIGN_KEY
    assert posts["user_id"]["foreign_table"] == "users"
    assert posts["user_id"]["foreign_column"] == "id"


def test_explicit_transaction_statements(database):
    database.execute("BEGIN;")
    database.execute("INSERT INTO users (id, email) VALUES (1, 'a@b.c');")
    database.execute("ROLLBACK;")

    assert database.execute("SELECT COUNT(*) AS n FROM users") == [{"n": 0}]


def test_end_to_end_insert(database):
    """Rows are generated in dependency order and committed."""
    user_ids = itertools.count(1)

    def responder(prompt):
        count = _count(prompt)
        if "Table: users" in prompt:
            return json.dumps([{"id": next(user_ids), "email": "u@example.com"} for _ in range(count)])
        return json.dumps([{"id": i + 1, "title": "Hello", "user_id": 1} for i in range(count)])

    report = execute_mock_data_generation(
        database,
        ScriptedTextGenerator(responder),
        config={"users": {"count": 15}, "posts": {"count": 3}},
    )

    assert report.success, report
    assert report.message == "Successfully generated 18 records across 2 tables"
    assert database.execute("SELECT COUNT(*) AS n FROM users") == [{"n": 15}]
    assert database.execute("SELECT COUNT(*) AS n FROM posts") == [{"n": 3}]


def test_constraint_violation_rolls_back_only_that_table(database):
    def responder(prompt):
        count = _count(prompt)
        if "Table: users" in prompt:
            return json.dumps([{"id": i + 1, "email": "e"} for i in range(count)])
        # title is NOT NULL
        return json.dumps([{"id": i + 1, "title": None, "user_id": 1} for i in range(count)])

    report = execute_mock_data_generation(database, ScriptedTextGenerator(responder))

    assert report.success
    assert [t.table for t in report.failed_tables] == ["posts"]
    assert report.failed_tables[0].rollback_error is None
    assert database.execute("SELECT COUNT(*) AS n FROM users") == [{"n": 10}]
    assert database.execute("SELECT COUNT(*) AS n FROM posts") == [{"n": 0}]


def test_unreachable_database_raises_schema_fetch_error(tmp_path):
    db = SqlAlchemyDatabase(f"sqlite:///{tmp_path / 'missing' / 'nope.db'}")

    with pytest.raises(SchemaFetchError):
        db.get_schema()
    db.close()


def test_empty_connection_string():
    with pytest.raises(ValueError):
        SqlAlchemyDatabase("")
