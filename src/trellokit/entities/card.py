"""Card entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.attachments import AttachmentCollection
from trellokit.collections.members import ActionCollection, MemberCollection
from trellokit.collections.stickers import CardStickerCollection
from trellokit.core.synchronization import Field, ReferenceField
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE, NULLABLE_HAS_VALUE, POSITION
from trellokit.entities.base import TrelloEntity
from trellokit.entities.board import Board
from trellokit.entities.json_models import JsonCard
from trellokit.entities.label import Label
from trellokit.entities.trello_list import List
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


class Card(TrelloEntity):
    """A card.

    Setting `list` moves the card to another list on the same board. Setting
    `due_date` to None clears the due date.

    Attributes:
        stickers: Stickers on the card (`CardStickerCollection`).
        attachments: Files and links (`AttachmentCollection`).
        actions: Activity history.
        members: Members assigned to the card.
    """

    _json_type = JsonCard
    _read_request = EntityRequestType.CARD_READ_REFRESH
    _write_request = EntityRequestType.CARD_WRITE_UPDATE
    _delete_request = EntityRequestType.CARD_WRITE_DELETE

    name = Field(rules=[NOT_NULL_OR_WHITESPACE])
    description = Field("desc", rules=[NOT_NULL])
    due_date = Field("due")
    is_complete = Field("due_complete", rules=[NULLABLE_HAS_VALUE])
    is_closed = Field("closed", rules=[NULLABLE_HAS_VALUE])
    position = Field("pos", rules=[NOT_NULL, POSITION])
    url = Field(readonly=True)
    short_url = Field(readonly=True)
    last_activity = Field("date_last_activity", readonly=True)
    label_ids = Field("id_labels", readonly=True)
    board = ReferenceField(Board, "id_board", readonly=True)
    list = ReferenceField(List, "id_list", rules=[NOT_NULL])

    def __init__(self, id: str, auth: TrelloAuthorization | None = None, **url_params: Any):
        super().__init__(id, auth, **url_params)
        self.stickers = CardStickerCollection(lambda: self.id, auth)
        self.attachments = AttachmentCollection(lambda: self.id, auth)
        self.actions = ActionCollection(
            lambda: self.id, auth, read_request=EntityRequestType.CARD_READ_ACTIONS
        )
        self.members = MemberCollection(
            lambda: self.id, auth, read_request=EntityRequestType.CARD_READ_MEMBERS
        )

    @property
    def labels(self) -> list[Label]:
        """Labels applied to the card."""
        return [Label.from_id(label_id, self.auth) for label_id in self.label_ids or []]

    def delete(self) -> None:
        """Permanently delete the card. Archiving it (`is_closed = True`) is reversible."""
        self._delete()

    def __str__(self) -> str:
        return self.name or self.id
