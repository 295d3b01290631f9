"""Read a bulk-import file."""

from pathlib import Path


def read_links_file(path: Path) -> list[str]:
    """Read one link per line, stripping whitespace and dropping blank lines.

    Order and repeated lines are preserved; deduplication is the store's job.

    Raises:
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with path.open(encoding="utf-8") as fh:
        return [stripped for line in fh if (stripped := line.strip())]
