"""Bulk reset API command.

CLI: abhyas link reset skipped|completed
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkResetOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore

_TARGETS = ("skipped", "completed")


def cmd_reset(target: str) -> StageResult:
    """Move every skipped or every completed link back to incomplete.

    Args:
        target: "skipped" or "completed"
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if target not in _TARGETS:
            yield (1.0, "Failed")
            message = f"Unknown reset target {target!r} (expected one of: {', '.join(_TARGETS)})"
            result_obj.success = False
            result_obj.result = message
            result_obj.output = LinkResetOutput(errors=[message], target=target, reset_count=-1).model_dump(
                mode="python"
            )
            return

        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, f"Resetting {target} links...")
            with LinkStore(config.database) as store:
                count = store.reset_skipped() if target == "skipped" else store.reset_completed()
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to reset {target} links: {e}"
            result_obj.output = LinkResetOutput(errors=[str(e)], target=target, reset_count=-1).model_dump(
                mode="python"
            )
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = f"Changed {count} {target.capitalize()} Links To Incomplete Links"
        result_obj.output = LinkResetOutput(target=target, reset_count=count).model_dump(mode="python")

    return StageResult(
        announce=f"Resetting {target} links...",
        progress_callback=do_work,
    )
