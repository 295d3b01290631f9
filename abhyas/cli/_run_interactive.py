"""Run the interactive session against the configured store."""

from ..api.config.AbhyasConfig import AbhyasConfig
from ..api.link.errors import LinkStoreError, StorageUnavailableError
from ..api.link.LinkStore import LinkStore
from ..logging_config import get_logger
from .display.CLIDisplay import CLIDisplay
from .interactive.errors import UserCancelledError, UserInterruptedError
from .interactive.InteractiveSession import InteractiveSession
from .interactive.RichPrompter import RichPrompter

logger = get_logger("cli")


def _run_interactive(config: AbhyasConfig, display: CLIDisplay) -> int:
    """Open the store, run the menu loop and return the process exit code."""
    try:
        with LinkStore(config.database) as store:
            InteractiveSession(store, display, RichPrompter(display.console)).run()
    except StorageUnavailableError as e:
        logger.error("Storage unavailable: %s", e)
        display.error("DB connection failed", details=str(e))
        return 1
    except UserCancelledError:
        display.error("User cancelled the operation")
        return 1
    except UserInterruptedError:
        display.error("User forcefully quit the operation")
        return 130
    except LinkStoreError as e:
        logger.exception("Session ended by a storage failure")
        display.error("DB query failed", details=str(e))
        return 1

    display.success("You've successfully quit the application :)")
    return 0
