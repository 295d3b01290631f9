"""Link add API command.

CLI: abhyas link add URL
"""

from collections.abc import Iterator

from ..config.AbhyasConfig import AbhyasConfig
from ..StageResult import StageResult
from . import LinkAddOutput
from .errors import LinkStoreError
from .LinkStore import LinkStore


def cmd_add(url: str) -> StageResult:
    """Start tracking a new link."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = AbhyasConfig.load()
            yield (0.5, "Adding link...")
            with LinkStore(config.database) as store:
                store.add_link(url)
        except (ValueError, LinkStoreError) as e:
            yield (1.0, "Failed")
            result_obj.success = False
            result_obj.result = f"Failed to add link: {e}"
            result_obj.output = LinkAddOutput(errors=[str(e)], url=url, added=False).model_dump(mode="python")
            return

        yield (1.0, "Complete")
        result_obj.success = True
        result_obj.result = f"Successfully added the link: {url}"
        result_obj.output = LinkAddOutput(url=url, added=True).model_dump(mode="python")

    return StageResult(
        announce=f"Adding link {url}...",
        progress_callback=do_work,
    )
