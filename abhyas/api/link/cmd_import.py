"""Bulk import API command.

CLI: abhyas link import PATH
CLI: abhyas --file PATH
"""

from collections.abc import Iterator
from pathlib import Path

from ...logging_config import get_logger
from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkImportOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore
from .read_links_file import read_links_file

logger = get_logger("link.import")


def cmd_import(path: Path) -> StageResult:
    """Add every link listed in a file, one per line.

    Links that are already tracked, or repeated within the file, are skipped
    and counted; they never abort the import.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, f"Reading {path}...")
        try:
            urls = read_links_file(path)
        except (OSError, UnicodeDecodeError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to read {path}: {e}"
            result_obj.output = LinkImportOutput(
                errors=[str(e)], path=str(path), read_count=0, inserted_count=0, skipped_count=0
            ).model_dump(mode="python")
            return

        yield (0.3, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, f"Importing {len(urls)} link(s)...")
            with LinkStore(config.database) as store:
                inserted = store.bulk_import(urls)
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to import links from {path}: {e}"
            result_obj.output = LinkImportOutput(
                errors=[str(e)], path=str(path), read_count=len(urls), inserted_count=0, skipped_count=0
            ).model_dump(mode="python")
            return

        skipped = len(urls) - inserted
        logger.info("Imported %d link(s) from %s, skipped %d", inserted, path, skipped)

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = f"Added {inserted} link(s) from {path}, skipped {skipped} duplicate(s)"
        result_obj.output = LinkImportOutput(
            path=str(path),
            read_count=len(urls),
            inserted_count=inserted,
            skipped_count=skipped,
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Importing links from {path}...",
        progress_callback=do_work,
    )
