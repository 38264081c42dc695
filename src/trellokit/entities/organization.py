"""Organization (team) entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.boards import ReadOnlyBoardCollection
from trellokit.collections.members import MemberCollection
from trellokit.core.synchronization import Field
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE, URI
from trellokit.entities.base import TrelloEntity
from trellokit.entities.json_models import JsonOrganization
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


class Organization(TrelloEntity):
    """A team owning boards and members."""

    _json_type = JsonOrganization
    _read_request = EntityRequestType.ORGANIZATION_READ_REFRESH
    _write_request = EntityRequestType.ORGANIZATION_WRITE_UPDATE

    name = Field(rules=[NOT_NULL_OR_WHITESPACE])
    display_name = Field(rules=[NOT_NULL_OR_WHITESPACE])
    description = Field("desc", rules=[NOT_NULL])
    website = Field(rules=[URI])
    url = Field(readonly=True)

    def __init__(self, id: str, auth: TrelloAuthorization | None = None, **url_params: Any):
        super().__init__(id, auth, **url_params)
        self.boards = ReadOnlyBoardCollection(
            lambda: self.id, auth, read_request=EntityRequestType.ORGANIZATION_READ_BOARDS
        )
        self.members = MemberCollection(
            lambda: self.id, auth, read_request=EntityRequestType.ORGANIZATION_READ_MEMBERS
        )
