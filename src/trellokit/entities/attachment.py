"""Attachment entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.core.synchronization import Field, ReferenceField
from trellokit.entities.base import TrelloEntity
from trellokit.entities.json_models import JsonAttachment
from trellokit.entities.member import Member
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization


class Attachment(TrelloEntity):
    """A file or link attached to a card. `size` is in bytes."""

    _json_type = JsonAttachment
    _read_request = EntityRequestType.ATTACHMENT_READ_REFRESH
    _delete_request = EntityRequestType.ATTACHMENT_WRITE_DELETE

    name = Field(readonly=True)
    url = Field(readonly=True)
    size = Field(readonly=True)
    mime_type = Field(readonly=True)
    date = Field(readonly=True)
    is_upload = Field(readonly=True)
    member = ReferenceField(Member, "id_member", readonly=True)

    def __init__(
        self,
        id: str,
        auth: TrelloAuthorization | None = None,
        card_id: str | None = None,
        **url_params: Any,
    ):
        if card_id:
            url_params["card_id"] = card_id
        super().__init__(id, auth, **url_params)
        self.card_id = card_id

    def delete(self) -> None:
        """Remove the attachment from its card."""
        self._delete()
