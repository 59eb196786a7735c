"""
Tests for the Batch Orchestrator.
"""
from mockgen.data_generation.dataset import GeneratedDataSet
from mockgen.data_generation.orchestrator import generate_table_rows
from mockgen.data_generation.state_machine import BatchGenerator
from mockgen.schema_analysis.analyzer import analyze_schema
from mockgen.testing import ScriptedTextGenerator

from conftest import rows_json


def _count_from_prompt(prompt):
    return int(prompt.split("Return exactly ")[1].split(" rows")[0])


def _user_rows(prompt):
    count = _count_from_prompt(prompt)
    return rows_json(count, lambda i: {"id": i, "email": f"user{i}@example.com"})


def test_count_fifteen_takes_two_batches(blog_schema):
    """15 rows arrive as batches of 10 and 5."""
    users = analyze_schema(blog_schema).tables["users"]
    generator = ScriptedTextGenerator(_user_rows)
    dataset = GeneratedDataSet()

    rows = generate_table_rows(users, 15, dataset, BatchGenerator(generator))

    assert len(rows) == 15
    assert generator.calls == 2
    assert [_count_from_prompt(p) for p in generator.prompts] == [10, 5]
    assert len(dataset.rows_for("users")) == 15


def test_stops_on_empty_batch(blog_schema):
    """Exhausted retries end the table early with what it has."""
    users = analyze_schema(blog_schema).tables["users"]
    first = rows_json(10, lambda i: {"id": i, "email": "a@b.c"})
    generator = ScriptedTextGenerator([first, "garbage"])
    dataset = GeneratedDataSet()

    rows = generate_table_rows(users, 30, dataset, BatchGenerator(generator))

    assert len(rows) == 10
    # One good call, then three failed attempts
    assert generator.calls == 4


def test_extra_rows_are_truncated(blog_schema):
    users = analyze_schema(blog_schema).tables["users"]
    generator = ScriptedTextGenerator([rows_json(8, lambda i: {"id": i, "email": "a@b.c"})])

    rows = generate_table_rows(users, 3, GeneratedDataSet(), BatchGenerator(generator))

    assert len(rows) == 3


def test_short_batches_keep_going(blog_schema):
    """A batch with fewer rows than asked is kept and the loop continues."""
    users = analyze_schema(blog_schema).tables["users"]
    generator = ScriptedTextGenerator([rows_json(4, lambda i: {"id": i, "email": "a@b.c"})])

    rows = generate_table_rows(users, 10, GeneratedDataSet(), BatchGenerator(generator))

    assert len(rows) == 10
    assert generator.calls == 3


def test_child_batches_see_parent_keys(blog_schema, rng):
    analysis = analyze_schema(blog_schema)
    dataset = GeneratedDataSet()
    dataset.extend("users", [{"id": 101}, {"id": 102}])
    generator = ScriptedTextGenerator(
        [rows_json(2, lambda i: {"id": i, "title": "t", "user_id": 101})]
    )

    generate_table_rows(analysis.tables["posts"], 2, dataset, BatchGenerator(generator), rng=rng)

    assert '"user_id"' in generator.prompts[0]
    assert "101" in generator.prompts[0] and "102" in generator.prompts[0]
