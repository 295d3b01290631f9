"""Closed sets of menu actions.

Members are returned directly by the prompter; the value is only the label
shown to the user.
"""

from enum import Enum


class MainMenuAction(Enum):
    CHECK_STATUS = "Check Status"
    GET_LINK = "Get Link"
    ADD_LINK = "Add Link"
    DELETE_LINK = "Delete Link"
    SEARCH_LINK = "Search Link"
    OTHER = "Other"
    EXIT = "Exit"


class LinkAction(Enum):
    MARK_COMPLETE = "Mark As Complete"
    SKIP = "Skip And Go To Main Menu"
    DELETE = "Delete Link"
    MAIN_MENU = "Main Menu"
    EXIT = "Exit"


class OtherAction(Enum):
    SHOW_ALL = "Show All Links"
    SHOW_COMPLETED = "Show Completed Links"
    SHOW_SKIPPED = "Show Skipped Links"
    RESET_SKIPPED = "Change All Skipped Links to Incomplete"
    RESET_COMPLETED = "Change All Completed Links to Incomplete"
    MAIN_MENU = "Main Menu"
    EXIT = "Exit"


# Options offered once a link has been resolved by Get Link or Search Link
RESOLVED_LINK_ACTIONS = [
    LinkAction.MARK_COMPLETE,
    LinkAction.SKIP,
    LinkAction.DELETE,
    LinkAction.MAIN_MENU,
    LinkAction.EXIT,
]

# Options offered once a link has been resolved by Delete Link
DELETE_LINK_ACTIONS = [LinkAction.DELETE, LinkAction.MAIN_MENU, LinkAction.EXIT]
