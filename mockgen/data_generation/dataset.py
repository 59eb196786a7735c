from typing import Any, Iterator


Row = dict[str, Any]


class GeneratedDataSet:
    """
    Rows generated so far, keyed by table name.

    One instance lives for one pipeline run. The orchestrator appends rows
    for the table it is producing; the foreign-key sampler only reads
    tables that were completed earlier in dependency order.
    """

    def __init__(self) -> None:
        self._rows: dict[str, list[Row]] = {}

    def __contains__(self, table: str) -> bool:
        return table in self._rows

    def __iter__(self) -> Iterator[str]:
        return iter(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def rows_for(self, table: str) -> list[Row]:
        return self._rows.get(table, [])

    def extend(self, table: str, rows: list[Row]) -> None:
        self._rows.setdefault(table, []).extend(rows)

    def total_records(self) -> int:
        return sum(len(rows) for rows in self._rows.values())

    def as_dict(self) -> dict[str, list[Row]]:
        return {table: list(rows) for table, rows in self._rows.items()}

    def preview(self, limit: int) -> dict[str, list[Row]]:
        return {table: rows[:limit] for table, rows in self._rows.items()}
