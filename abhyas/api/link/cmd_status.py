"""Link status API command.

CLI: abhyas link status
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkStatusOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_status() -> StageResult:
    """Count total, completed and skipped links."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Counting links...")
            with LinkStore(config.database) as store:
                counts = store.status()
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to read link status: {e}"
            result_obj.output = LinkStatusOutput(
                errors=[str(e)], total=0, completed=0, skipped=0, incomplete=0
            ).model_dump(mode="python")
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = (
            f"{counts.total} link(s): {counts.completed} completed, {counts.skipped} skipped, "
            f"{counts.incomplete} incomplete"
        )
        result_obj.output = LinkStatusOutput(
            total=counts.total,
            completed=counts.completed,
            skipped=counts.skipped,
            incomplete=counts.incomplete,
        ).model_dump(mode="python")

    return StageResult(
        announce="Fetching link status...",
        progress_callback=do_work,
    )
