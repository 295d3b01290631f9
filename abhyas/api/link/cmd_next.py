"""Next incomplete link API command.

CLI: abhyas link next
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkNextOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_next() -> StageResult:
    """Fetch the next link that is neither solved nor skipped."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Finding next incomplete link...")
            with LinkStore(config.database) as store:
                link = store.next_incomplete()
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to fetch next link: {e}"
            result_obj.output = LinkNextOutput(errors=[str(e)], link=None).model_dump(mode="python")
            return

        yield (1.0, "Complete")
        # No incomplete link left is a normal outcome, not a failure
        result_obj.success = True
        if link is None:
            result_obj.result = "No unsolved links, add new links or reset the link status"
            result_obj.output = LinkNextOutput(link=None).model_dump(mode="python")
        else:
            result_obj.result = f"Next link: {link.url}"
            result_obj.output = LinkNextOutput(link=link.to_dict()).model_dump(mode="python")

    return StageResult(
        announce="Fetching next incomplete link...",
        progress_callback=do_work,
    )
