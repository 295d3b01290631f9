"""Lifecycle status of a link."""

from enum import Enum


class LinkStatus(str, Enum):
    INCOMPLETE = "incomplete"
    SOLVED = "solved"
    SKIPPED = "skipped"

    @classmethod
    def from_flags(cls, is_solved: int, is_skipped: int) -> "LinkStatus":
        """Map the stored flag pair to a status.

        A row with both flags set can only come from an older database; it
        reads as solved and is repaired by its next transition.
        """
        if is_solved:
            return cls.SOLVED
        if is_skipped:
            return cls.SKIPPED
        return cls.INCOMPLETE

    @property
    def flags(self) -> tuple[int, int]:
        """The ``(is_solved, is_skipped)`` pair stored for this status."""
        return (int(self is LinkStatus.SOLVED), int(self is LinkStatus.SKIPPED))
