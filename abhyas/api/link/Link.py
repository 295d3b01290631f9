"""Link record."""

from dataclasses import dataclass
from typing import Any

from .LinkStatus import LinkStatus


@dataclass(frozen=True)
class Link:
    url: str
    solved_count: int = 0
    status: LinkStatus = LinkStatus.INCOMPLETE

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "solved_count": self.solved_count, "status": self.status.value}
