"""Board entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.cards import ReadOnlyCardCollection
from trellokit.collections.labels import LabelCollection
from trellokit.collections.lists import ListCollection
from trellokit.collections.members import ActionCollection, MemberCollection, PowerUpCollection
from trellokit.core.synchronization import Field, ReferenceField
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE, NULLABLE_HAS_VALUE
from trellokit.entities.base import TrelloEntity
from trellokit.entities.board_preferences import BoardPreferences
from trellokit.entities.json_models import JsonBoard
from trellokit.entities.organization import Organization
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


class Board(TrelloEntity):
    """A board.

    Attributes:
        preferences: The board's `BoardPreferences`.
        lists: Open lists (`ListCollection`, supports `add`).
        cards: Every card on the board.
        labels: Label definitions (`LabelCollection`, supports `add`).
        members: Board members.
        actions: Activity history.
        power_ups: Enabled power-ups.
    """

    _json_type = JsonBoard
    _read_request = EntityRequestType.BOARD_READ_REFRESH
    _write_request = EntityRequestType.BOARD_WRITE_UPDATE
    _delete_request = EntityRequestType.BOARD_WRITE_DELETE

    name = Field(rules=[NOT_NULL_OR_WHITESPACE])
    description = Field("desc", rules=[NOT_NULL])
    is_closed = Field("closed", rules=[NULLABLE_HAS_VALUE])
    is_subscribed = Field("subscribed", rules=[NULLABLE_HAS_VALUE])
    is_pinned = Field("pinned", readonly=True)
    url = Field(readonly=True)
    short_url = Field(readonly=True)
    last_activity = Field("date_last_activity", readonly=True)
    organization = ReferenceField(Organization, "id_organization")

    def __init__(self, id: str, auth: TrelloAuthorization | None = None, **url_params: Any):
        super().__init__(id, auth, **url_params)
        self.preferences = BoardPreferences(self)
        self.lists = ListCollection(lambda: self.id, auth)
        self.cards = ReadOnlyCardCollection(lambda: self.id, auth)
        self.labels = LabelCollection(lambda: self.id, auth)
        self.members = MemberCollection(lambda: self.id, auth)
        self.actions = ActionCollection(lambda: self.id, auth)
        self.power_ups = PowerUpCollection(lambda: self.id, auth)

    def delete(self) -> None:
        """Permanently delete the board. Closing it (`is_closed = True`) is reversible."""
        self._delete()

    def __str__(self) -> str:
        return self.name or self.id
