"""Entities - typed mirrors of the service's objects."""

from trellokit.entities.action import Action
from trellokit.entities.attachment import Attachment
from trellokit.entities.base import TrelloEntity
from trellokit.entities.board import Board
from trellokit.entities.board_preferences import BoardBackground, BoardPreferences
from trellokit.entities.card import Card
from trellokit.entities.label import Label
from trellokit.entities.member import Member
from trellokit.entities.organization import Organization
from trellokit.entities.power_up import PowerUp
from trellokit.entities.search import Search
from trellokit.entities.sticker import Sticker
from trellokit.entities.trello_list import List

__all__ = [
    "Action",
    "Attachment",
    "Board",
    "BoardBackground",
    "BoardPreferences",
    "Card",
    "Label",
    "List",
    "Member",
    "Organization",
    "PowerUp",
    "Search",
    "Sticker",
    "TrelloEntity",
]
