"""Link show API command.

CLI: abhyas link show URL
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkShowOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_show(url: str) -> StageResult:
    """Show a link with its solved count and status."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Looking up link...")
            with LinkStore(config.database) as store:
                link = store.get_link(url)
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = str(e)
            result_obj.output = LinkShowOutput(errors=[str(e)], url=url, link=None).model_dump(mode="python")
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = f"{link.url}: solved {link.solved_count} time(s), {link.status.value}"
        result_obj.output = LinkShowOutput(url=url, link=link.to_dict()).model_dump(mode="python")

    return StageResult(
        announce=f"Looking up {url}...",
        progress_callback=do_work,
    )
