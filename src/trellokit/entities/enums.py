"""Enumerations of the service's string-valued options."""

from __future__ import annotations

from enum import Enum, Flag, auto


class BoardPermissionLevel(Enum):
    """General visibility of a board."""

    PRIVATE = "private"
    ORGANIZATION = "org"
    PUBLIC = "public"
    ENTERPRISE = "enterprise"


class BoardVotingPermission(Enum):
    """Whether voting is enabled and who may vote."""

    DISABLED = "disabled"
    MEMBERS = "members"
    OBSERVERS = "observers"
    ORGANIZATION = "org"
    PUBLIC = "public"


class BoardCommentPermission(Enum):
    """Whether commenting is enabled and who may comment."""

    DISABLED = "disabled"
    MEMBERS = "members"
    OBSERVERS = "observers"
    ORGANIZATION = "org"
    PUBLIC = "public"


class BoardInvitationPermission(Enum):
    """Who may invite others to a board."""

    ADMINS = "admins"
    MEMBERS = "members"


class CardAgingStyle(Enum):
    """Card aging style of the Card Aging power-up."""

    REGULAR = "regular"
    PIRATE = "pirate"


class LabelColor(Enum):
    GREEN = "green"
    YELLOW = "yellow"
    ORANGE = "orange"
    RED = "red"
    PURPLE = "purple"
    BLUE = "blue"
    SKY = "sky"
    LIME = "lime"
    PINK = "pink"
    BLACK = "black"


class SearchModelType(Flag):
    """Model types a search returns; combine with `|`."""

    ACTIONS = auto()
    BOARDS = auto()
    CARDS = auto()
    MEMBERS = auto()
    ORGANIZATIONS = auto()
    ALL = ACTIONS | BOARDS | CARDS | MEMBERS | ORGANIZATIONS

    def to_param(self) -> str:
        """Comma-separated `modelTypes` parameter value."""
        names = [
            member.name.lower()
            for member in (
                SearchModelType.ACTIONS,
                SearchModelType.BOARDS,
                SearchModelType.CARDS,
                SearchModelType.MEMBERS,
                SearchModelType.ORGANIZATIONS,
            )
            if member in self
        ]
        return ",".join(names)
