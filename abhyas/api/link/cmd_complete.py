"""Link complete API command.

CLI: abhyas link complete URL
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkCompleteOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_complete(url: str) -> StageResult:
    """Mark a link as solved, adding one to its solved count."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Marking link as complete...")
            with LinkStore(config.database) as store:
                link = store.mark_complete(url)
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to mark link as complete: {e}"
            result_obj.output = LinkCompleteOutput(errors=[str(e)], url=url, solved_count=-1).model_dump(
                mode="python"
            )
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = "Successfully marked the link as completed"
        result_obj.output = LinkCompleteOutput(url=url, solved_count=link.solved_count).model_dump(mode="python")

    return StageResult(
        announce=f"Completing {url}...",
        progress_callback=do_work,
    )
