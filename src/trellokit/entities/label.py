"""Label entity."""

from __future__ import annotations

from trellokit.core.synchronization import EnumField, Field, ReferenceField
from trellokit.core.validation import NOT_NULL
from trellokit.entities.base import TrelloEntity
from trellokit.entities.board import Board
from trellokit.entities.enums import LabelColor
from trellokit.entities.json_models import JsonLabel
from trellokit.rest.endpoints import EntityRequestType


class Label(TrelloEntity):
    """A label defined on a board. A None colour means the label is colourless."""

    _json_type = JsonLabel
    _read_request = EntityRequestType.LABEL_READ_REFRESH
    _write_request = EntityRequestType.LABEL_WRITE_UPDATE
    _delete_request = EntityRequestType.LABEL_WRITE_DELETE

    name = Field(rules=[NOT_NULL])
    color = EnumField(LabelColor)
    board = ReferenceField(Board, "id_board", readonly=True)
    uses = Field(readonly=True)

    def delete(self) -> None:
        """Delete the label from the board and every card carrying it."""
        self._delete()
