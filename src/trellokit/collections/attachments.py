"""Attachment collection on a card."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.base import ReadOnlyCollection
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE, URI, validate_value
from trellokit.entities.json_models import JsonAttachment
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository
from trellokit.rest.request import RestFile

if TYPE_CHECKING:
    from trellokit.entities.attachment import Attachment


class AttachmentCollection(ReadOnlyCollection["Attachment"]):
    """The attachments on a card."""

    _default_read_request = EntityRequestType.CARD_READ_ATTACHMENTS

    def _entity_type(self) -> Any:
        from trellokit.entities.attachment import Attachment

        return Attachment

    def _item_url_params(self) -> dict[str, Any]:
        return {"card_id": self.owner_id}

    def add_url(self, url: str, name: str | None = None) -> Attachment:
        """Attach a link.

        Raises:
            TrelloValidationError: If `url` is not an absolute http(s) URL.
        """
        validate_value(url, NOT_NULL, URI)
        parameters: dict[str, Any] = {"url": url}
        if name is not None:
            parameters["name"] = name
        return self._add(parameters)

    def add_file(self, data: bytes, name: str) -> Attachment:
        """Upload a file.

        Raises:
            TrelloValidationError: If `data` is None or `name` is blank.
        """
        validate_value(data, NOT_NULL)
        validate_value(name, NOT_NULL_OR_WHITESPACE)
        parameters = {
            "name": name,
            RestFile.PARAMETER_KEY: RestFile(content=data, file_name=name),
        }
        return self._add(parameters)

    def remove(self, attachment: Attachment) -> None:
        """Delete an attachment from the card.

        Raises:
            TrelloValidationError: If `attachment` is None.
        """
        validate_value(attachment, NOT_NULL)
        attachment.delete()
        self.expire()

    def _add(self, parameters: dict[str, Any]) -> Attachment:
        from trellokit.entities.attachment import Attachment

        endpoint = EndpointFactory.build(
            EntityRequestType.CARD_WRITE_ADD_ATTACHMENT, {"id": self.owner_id}
        )
        new_data = JsonRepository.execute(
            self.auth, endpoint, parameters, response_type=JsonAttachment
        )
        self.expire()
        return Attachment.from_json(new_data, self.auth, card_id=self.owner_id)
