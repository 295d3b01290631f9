"""Link delete API command.

CLI: abhyas link delete URL
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkDeleteOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_delete(url: str) -> StageResult:
    """Stop tracking a link. Deleting an unknown link succeeds with a warning."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Deleting link...")
            with LinkStore(config.database) as store:
                deleted = store.delete_link(url)
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to delete link: {e}"
            result_obj.output = LinkDeleteOutput(errors=[str(e)], url=url, deleted=False).model_dump(mode="python")
            return

        yield (1.0, "Complete")
        warnings = [] if deleted else [f"Link not found: {url}"]
        result_obj.success = True
        result_obj.result = f"Deleted link: {url}" if deleted else f"Nothing to delete for {url}"
        result_obj.output = LinkDeleteOutput(warnings=warnings, url=url, deleted=deleted).model_dump(mode="python")

    return StageResult(
        announce=f"Deleting link {url}...",
        progress_callback=do_work,
    )
