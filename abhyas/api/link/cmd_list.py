"""Link list API command.

CLI: abhyas link list [--status all|solved|skipped|incomplete]
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkListOutput
from .errors import LinkStoreError
from .LinkStatus import LinkStatus
from .LinkStore import LinkStore

_STATUS_CHOICES = ["all"] + [status.value for status in LinkStatus]


def cmd_list(status: str = "all") -> StageResult:
    """List tracked links, optionally filtered by status.

    Args:
        status: "all" or one of the LinkStatus values

    Returns:
        StageResult whose output holds the matching links in storage order
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if status not in _STATUS_CHOICES:
            yield (1.0, "Failed")
            message = f"Unknown status {status!r} (expected one of: {', '.join(_STATUS_CHOICES)})"
            result_obj.success = False
            result_obj.result = message
            result_obj.output = LinkListOutput(errors=[message], status=status, count=0, links=[]).model_dump(
                mode="python"
            )
            return

        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Reading links...")
            with LinkStore(config.database) as store:
                links = store.list_all() if status == "all" else store.list_by_status(LinkStatus(status))
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to list links: {e}"
            result_obj.output = LinkListOutput(errors=[str(e)], status=status, count=0, links=[]).model_dump(
                mode="python"
            )
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = f"Found {len(links)} link(s)" if links else f"No {status} links"
        result_obj.output = LinkListOutput(
            status=status,
            count=len(links),
            links=[link.to_dict() for link in links],
        ).model_dump(mode="python")

    return StageResult(
        announce=f"Listing {status} links...",
        progress_callback=do_work,
    )
