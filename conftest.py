"""
Shared fixtures for the mock data generator tests.
"""
import json
import random

import pytest

from mockgen.schema_analysis.models import PRIMARY_KEY, FOREIGN_KEY


def rows_json(count, make_row):
    """JSON array of ``count`` rows built by ``make_row(i)``."""
    return json.dumps([make_row(i) for i in range(count)])


@pytest.fixture
def blog_schema():
    """users <- posts, listed child-first to exercise ordering."""
    return [
        {
            "name": "posts",
            "columns": [
                {"name": "id", "type": "integer", "nullable": False, "constraint": PRIMARY_KEY},
                {"name": "title", "type": "text", "nullable": False},
                {
                    "name": "user_id",
                    "type": "integer",
                    "nullable": False,
                    "constraint": FOREIGN_KEY,
                    "foreign_table": "users",
                    "foreign_column": "id",
                },
            ],
        },
        {
            "name": "users",
            "columns": [
                {"name": "id", "type": "integer", "nullable": False, "constraint": PRIMARY_KEY},
                {"name": "email", "type": "varchar(255)", "nullable": False},
                {"name": "created_at", "type": "timestamp", "nullable": True},
            ],
        },
    ]


@pytest.fixture
def rng():
    return random.Random(1234)
