"""
Test Doubles
============

In-memory stand-ins for the pipeline's collaborators: a database that
serves a fixed schema and records the statements it is asked to run, and
a text generator that replays scripted responses.
"""

from typing import Any, Callable, Optional, Union


class FakeDatabase:
    """
    Schema source and statement executor backed by plain lists.

    Args:
        schema: Rows returned by ``get_schema`` (same shape as the SQL adapter).
        fail_when: Predicate on a statement; matching statements raise.
        schema_error: Raised from ``get_schema`` when set.
    """

    def __init__(
        self,
        schema: Optional[list[dict[str, Any]]] = None,
        fail_when: Optional[Callable[[str], bool]] = None,
        schema_error: Optional[Exception] = None,
    ):
        self.schema = schema or []
        self.fail_when = fail_when
        self.schema_error = schema_error
        self.statements: list[str] = []
        self.closed = False

    def __enter__(self) -> "FakeDatabase":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def get_schema(self) -> list[dict[str, Any]]:
        if self.schema_error is not None:
            raise self.schema_error
        return list(self.schema)

    def execute(self, statement: str) -> list[dict[str, Any]]:
        self.statements.append(statement)
        if self.fail_when is not None and self.fail_when(statement):
            raise RuntimeError(f"statement rejected: {statement[:40]}")
        return []

    def close(self) -> None:
        self.closed = True


Response = Union[str, Exception]


class ScriptedTextGenerator:
    """
    Text generator that answers from a script.

    ``responses`` is either a list consumed in order (the last entry repeats
    once the list runs out) or a callable ``prompt -> str``. Exceptions in
    the script are raised instead of returned.
    """

    def __init__(self, responses: Union[list[Response], Callable[[str], Response]]):
        self.responses = responses
        self.prompts: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.prompts)

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)

        if callable(self.responses):
            response = self.responses(prompt)
        else:
            index = min(len(self.prompts), len(self.responses)) - 1
            response = self.responses[index]

        if isinstance(response, Exception):
            raise response
        return response
