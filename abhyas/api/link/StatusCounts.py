"""Aggregate counts over the links table."""

from typing import NamedTuple


class StatusCounts(NamedTuple):
    total: int
    completed: int
    skipped: int

    @property
    def incomplete(self) -> int:
        return self.total - self.completed - self.skipped
