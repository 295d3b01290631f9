"""Interactive menu loop driving the link store."""

from collections.abc import Sequence
from typing import Protocol, TypeVar, assert_never

from ...api.link.errors import DuplicateLinkError, InvalidLinkError, LinkNotFoundError
from ...api.link.Link import Link
from ...api.link.LinkStatus import LinkStatus
from ...api.link.LinkStore import LinkStore
from ...logging_config import get_logger
from ..display.CLIDisplay import CLIDisplay
from .actions import DELETE_LINK_ACTIONS, RESOLVED_LINK_ACTIONS, LinkAction, MainMenuAction, OtherAction
from .errors import ExitRequested

logger = get_logger("cli.interactive")

T = TypeVar("T")


class Prompter(Protocol):
    def choose(self, title: str, options: Sequence[T]) -> T: ...

    def ask_text(self, message: str) -> str: ...

    def confirm(self, message: str) -> bool: ...


class InteractiveSession:
    """Main menu state machine.

    Every menu choice performs at most one store operation and returns to the
    main menu. Duplicate, missing and blank links are reported and the loop
    continues; cancellation and interruption propagate to the caller.
    """

    def __init__(self, store: LinkStore, display: CLIDisplay, prompter: Prompter):
        self.store = store
        self.display = display
        self.prompter = prompter

    def run(self) -> None:
        """Loop over the main menu until the user picks Exit."""
        while True:
            try:
                self.main_menu()
            except ExitRequested:
                logger.info("User exited the session")
                return
            except DuplicateLinkError:
                self.display.message("Error: Link already exists, input other link", style="red")
            except (LinkNotFoundError, InvalidLinkError) as e:
                self.display.message(f"Error: {e}", style="red")

    def main_menu(self) -> None:
        action = self.prompter.choose("Select your option", list(MainMenuAction))
        match action:
            case MainMenuAction.CHECK_STATUS:
                self.check_status()
            case MainMenuAction.GET_LINK:
                self.get_link()
            case MainMenuAction.ADD_LINK:
                self.add_link()
            case MainMenuAction.DELETE_LINK:
                self.delete_link()
            case MainMenuAction.SEARCH_LINK:
                self.search_link()
            case MainMenuAction.OTHER:
                self.other_menu()
            case MainMenuAction.EXIT:
                raise ExitRequested()
            case _:
                assert_never(action)

    def check_status(self) -> None:
        self.display.status_table(self.store.status())

    def get_link(self) -> None:
        link = self.store.next_incomplete()
        if link is None:
            self.display.message("No unsolved links, add new links or reset the link status", style="red")
            return
        self.display.links_table([link])
        self.link_menu(link, RESOLVED_LINK_ACTIONS)

    def add_link(self) -> None:
        url = ""
        while not url:
            url = self.prompter.ask_text("Enter the link").strip()
            if not url:
                self.display.message("A link is required", style="red")
        self.store.add_link(url)
        self.display.message(f"Successfully added the link: {url}")

    def search_link(self) -> None:
        link = self._select_link()
        if link is not None:
            self.display.links_table([link])
            self.link_menu(link, RESOLVED_LINK_ACTIONS)

    def delete_link(self) -> None:
        link = self._select_link()
        if link is not None:
            self.display.links_table([link])
            self.link_menu(link, DELETE_LINK_ACTIONS)

    def _select_link(self) -> Link | None:
        """Ask for keywords and let the user pick one matching link."""
        keyword = self.prompter.ask_text("Type keywords to search (leave blank to list all)").strip().lower()
        matches = [url for url in self.store.list_urls() if keyword in url.lower()]
        if not matches:
            self.display.message("No matching links found", style="red")
            return None
        url = self.prompter.choose("Select link", matches)
        return self.store.get_link(url)

    def link_menu(self, link: Link, options: Sequence[LinkAction]) -> None:
        action = self.prompter.choose("Select your option", options)
        match action:
            case LinkAction.MARK_COMPLETE:
                self.store.mark_complete(link.url)
                self.display.message("Successfully marked the link as completed")
            case LinkAction.SKIP:
                self.store.skip_link(link.url)
                self.display.message("Successfully skipped the link")
            case LinkAction.DELETE:
                if self.prompter.confirm(f"Delete {link.url}?"):
                    self.store.delete_link(link.url)
                    self.display.message(f"Successfully deleted the link: {link.url}")
            case LinkAction.MAIN_MENU:
                return
            case LinkAction.EXIT:
                raise ExitRequested()
            case _:
                assert_never(action)

    def other_menu(self) -> None:
        action = self.prompter.choose("Select your option", list(OtherAction))
        match action:
            case OtherAction.SHOW_ALL:
                self._show_links(self.store.list_all(), "No Links present in the database :(")
            case OtherAction.SHOW_COMPLETED:
                self._show_links(self.store.list_by_status(LinkStatus.SOLVED), "No Completed Links :(")
            case OtherAction.SHOW_SKIPPED:
                self._show_links(self.store.list_by_status(LinkStatus.SKIPPED), "No Skipped Links :)")
            case OtherAction.RESET_SKIPPED:
                count = self.store.reset_skipped()
                self.display.message(f"Changed {count} Skipped Links To Incomplete Links")
            case OtherAction.RESET_COMPLETED:
                count = self.store.reset_completed()
                self.display.message(f"Changed {count} Completed Links To Incomplete Links")
            case OtherAction.MAIN_MENU:
                return
            case OtherAction.EXIT:
                raise ExitRequested()
            case _:
                assert_never(action)

    def _show_links(self, links: list[Link], empty_message: str) -> None:
        if links:
            self.display.links_table(links)
        else:
            self.display.message(empty_message, style="red")
