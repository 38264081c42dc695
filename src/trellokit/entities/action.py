"""Action entity (one activity record)."""

from __future__ import annotations

from typing import Any

from trellokit.core.synchronization import Field, ReferenceField
from trellokit.entities.base import TrelloEntity
from trellokit.entities.board import Board
from trellokit.entities.card import Card
from trellokit.entities.json_models import JsonAction
from trellokit.entities.member import Member
from trellokit.entities.trello_list import List
from trellokit.rest.endpoints import EntityRequestType


class Action(TrelloEntity):
    """Something a member did, such as creating a card or commenting.

    `data` is the raw payload; `board`, `card` and `list` resolve the objects
    it mentions (None when the action does not involve one).
    """

    _json_type = JsonAction
    _read_request = EntityRequestType.ACTION_READ_REFRESH

    type = Field(readonly=True)
    date = Field(readonly=True)
    data = Field(readonly=True)
    creator = ReferenceField(Member, "id_member_creator", readonly=True)

    @property
    def board(self) -> Board | None:
        return self._referenced(Board, "board")

    @property
    def card(self) -> Card | None:
        return self._referenced(Card, "card")

    @property
    def list(self) -> List | None:
        return self._referenced(List, "list")

    def _referenced(self, entity_type: Any, key: str) -> Any:
        entry = (self.data or {}).get(key)
        if not isinstance(entry, dict) or not entry.get("id"):
            return None
        return entity_type.from_id(entry["id"], self.auth)
