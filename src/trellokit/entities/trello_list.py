"""List entity (a column of cards on a board)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.cards import CardCollection
from trellokit.collections.members import ActionCollection
from trellokit.core.synchronization import Field, ReferenceField
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE, NULLABLE_HAS_VALUE, POSITION
from trellokit.entities.base import TrelloEntity
from trellokit.entities.board import Board
from trellokit.entities.json_models import JsonList
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


class List(TrelloEntity):
    """A list of cards.

    Setting `board` moves the list to another board.
    """

    _json_type = JsonList
    _read_request = EntityRequestType.LIST_READ_REFRESH
    _write_request = EntityRequestType.LIST_WRITE_UPDATE

    name = Field(rules=[NOT_NULL_OR_WHITESPACE])
    is_closed = Field("closed", rules=[NULLABLE_HAS_VALUE])
    is_subscribed = Field("subscribed", rules=[NULLABLE_HAS_VALUE])
    position = Field("pos", rules=[NOT_NULL, POSITION])
    board = ReferenceField(Board, "id_board", rules=[NOT_NULL])

    def __init__(self, id: str, auth: TrelloAuthorization | None = None, **url_params: Any):
        super().__init__(id, auth, **url_params)
        self.cards = CardCollection(lambda: self.id, auth)
        self.actions = ActionCollection(
            lambda: self.id, auth, read_request=EntityRequestType.LIST_READ_ACTIONS
        )

    def __str__(self) -> str:
        return self.name or self.id
