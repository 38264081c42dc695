"""Collections - typed wrappers around the service's list endpoints."""

from trellokit.collections.attachments import AttachmentCollection
from trellokit.collections.base import ReadOnlyCollection
from trellokit.collections.boards import BoardCollection, ReadOnlyBoardCollection
from trellokit.collections.cards import CardCollection, ReadOnlyCardCollection
from trellokit.collections.labels import LabelCollection
from trellokit.collections.lists import ListCollection, ReadOnlyListCollection
from trellokit.collections.members import ActionCollection, MemberCollection, PowerUpCollection
from trellokit.collections.stickers import (
    CardStickerCollection,
    MemberStickerCollection,
    ReadOnlyStickerCollection,
)

__all__ = [
    "ActionCollection",
    "AttachmentCollection",
    "BoardCollection",
    "CardCollection",
    "CardStickerCollection",
    "LabelCollection",
    "ListCollection",
    "MemberCollection",
    "MemberStickerCollection",
    "PowerUpCollection",
    "ReadOnlyBoardCollection",
    "ReadOnlyCardCollection",
    "ReadOnlyCollection",
    "ReadOnlyListCollection",
    "ReadOnlyStickerCollection",
]
