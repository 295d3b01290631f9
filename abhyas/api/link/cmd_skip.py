"""Link skip API command.

CLI: abhyas link skip URL
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkSkipOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_skip(url: str) -> StageResult:
    """Mark a link as skipped."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Skipping link...")
            with LinkStore(config.database) as store:
                store.skip_link(url)
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to skip link: {e}"
            result_obj.output = LinkSkipOutput(errors=[str(e)], url=url, skipped=False).model_dump(mode="python")
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = "Successfully skipped the link"
        result_obj.output = LinkSkipOutput(url=url, skipped=True).model_dump(mode="python")

    return StageResult(
        announce=f"Skipping {url}...",
        progress_callback=do_work,
    )
