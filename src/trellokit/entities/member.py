"""Member entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.boards import BoardCollection
from trellokit.collections.members import ActionCollection
from trellokit.collections.stickers import MemberStickerCollection
from trellokit.core.synchronization import Field
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE
from trellokit.entities.base import TrelloEntity
from trellokit.entities.json_models import JsonMember
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


class Member(TrelloEntity):
    """A Trello user."""

    _json_type = JsonMember
    _read_request = EntityRequestType.MEMBER_READ_REFRESH
    _write_request = EntityRequestType.MEMBER_WRITE_UPDATE

    username = Field(rules=[NOT_NULL_OR_WHITESPACE])
    full_name = Field(rules=[NOT_NULL_OR_WHITESPACE])
    initials = Field(rules=[NOT_NULL_OR_WHITESPACE])
    bio = Field(rules=[NOT_NULL])
    avatar_url = Field(readonly=True)
    url = Field(readonly=True)
    is_confirmed = Field("confirmed", readonly=True)

    def __init__(self, id: str, auth: TrelloAuthorization | None = None, **url_params: Any):
        super().__init__(id, auth, **url_params)
        self.boards = BoardCollection(lambda: self.id, auth)
        self.stickers = MemberStickerCollection(lambda: self.id, auth)
        self.actions = ActionCollection(
            lambda: self.id, auth, read_request=EntityRequestType.MEMBER_READ_ACTIONS
        )

    @classmethod
    def me(cls, auth: TrelloAuthorization | None = None) -> Member:
        """Get the member the user token belongs to.

        Reads `members/me` once to learn the member's real id.

        Raises:
            TrelloInteractionError: If the token is missing or invalid.
        """
        endpoint = EndpointFactory.build(EntityRequestType.MEMBER_READ_REFRESH, {"id": "me"})
        json = JsonRepository.execute(auth, endpoint, response_type=JsonMember)
        return cls.from_json(json, auth)

    def __str__(self) -> str:
        return self.full_name or self.username or self.id
