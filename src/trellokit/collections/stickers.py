"""Sticker collections on cards and members."""

from __future__ import annotations

from typing import TYPE_CHECKING

from trellokit.collections.base import ReadOnlyCollection
from trellokit.core.cache import get_cache
from trellokit.core.validation import NOT_NULL, NOT_NULL_OR_WHITESPACE, NumericRule, validate_value
from trellokit.entities.json_models import JsonSticker
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository
from trellokit.rest.request import RestFile

if TYPE_CHECKING:
    from trellokit.entities.sticker import Sticker


class ReadOnlyStickerCollection(ReadOnlyCollection["Sticker"]):
    """A read-only collection of stickers on a card."""

    _default_read_request = EntityRequestType.CARD_READ_STICKERS

    def update(self) -> None:
        from trellokit.entities.sticker import Sticker

        new_data = self._read(JsonSticker)
        self._items = [
            Sticker.from_json(json, self.auth, **self._item_url_params()) for json in new_data
        ]

    def _item_url_params(self) -> dict[str, str]:
        return {"card_id": self.owner_id}


class CardStickerCollection(ReadOnlyStickerCollection):
    """The stickers on a card."""

    ROTATION_RULE = NumericRule(min=0, max=359)

    def add(
        self,
        name: str,
        left: float,
        top: float,
        z_index: int = 0,
        rotation: int = 0,
    ) -> Sticker:
        """Add a sticker to the card.

        Args:
            name: The sticker image name (e.g. "check", "taco-cool").
            left: The position of the left edge.
            top: The position of the top edge.
            z_index: The z-index. Default is 0.
            rotation: The rotation in degrees. Default is 0.

        Returns:
            The sticker generated by the service.

        Raises:
            TrelloValidationError: If `name` is None, empty, or whitespace, or
                `rotation` is less than 0 or greater than 359.
        """
        from trellokit.entities.sticker import Sticker

        validate_value(name, NOT_NULL_OR_WHITESPACE)
        validate_value(rotation, self.ROTATION_RULE)

        parameters = {
            "image": name,
            "top": top,
            "left": left,
            "zIndex": z_index,
            "rotate": rotation,
        }
        endpoint = EndpointFactory.build(
            EntityRequestType.CARD_WRITE_ADD_STICKER, {"id": self.owner_id}
        )
        new_data = JsonRepository.execute(
            self.auth, endpoint, parameters, response_type=JsonSticker
        )
        self.expire()
        return Sticker.from_json(new_data, self.auth, card_id=self.owner_id)

    def remove(self, sticker: Sticker) -> None:
        """Remove a sticker from the card.

        Raises:
            TrelloValidationError: If `sticker` is None.
        """
        validate_value(sticker, NOT_NULL)

        endpoint = EndpointFactory.build(
            EntityRequestType.CARD_WRITE_REMOVE_STICKER,
            {"id": self.owner_id, "sticker_id": sticker.id},
        )
        JsonRepository.execute(self.auth, endpoint)
        sticker._context.is_deleted = True
        get_cache().remove(sticker)
        self.expire()


class MemberStickerCollection(ReadOnlyStickerCollection):
    """A member's custom sticker set."""

    _default_read_request = EntityRequestType.MEMBER_READ_STICKERS

    def _item_url_params(self) -> dict[str, str]:
        return {}

    def add(self, data: bytes, name: str) -> Sticker:
        """Upload a custom sticker.

        Args:
            data: The image bytes.
            name: A file name for the upload.

        Returns:
            The sticker generated by the service.

        Raises:
            TrelloValidationError: If `data` is None or `name` is blank.
        """
        from trellokit.entities.sticker import Sticker

        validate_value(data, NOT_NULL)
        validate_value(name, NOT_NULL_OR_WHITESPACE)

        parameters = {RestFile.PARAMETER_KEY: RestFile(content=data, file_name=name)}
        endpoint = EndpointFactory.build(
            EntityRequestType.MEMBER_WRITE_ADD_STICKER, {"id": self.owner_id}
        )
        new_data = JsonRepository.execute(
            self.auth, endpoint, parameters, response_type=JsonSticker
        )
        self.expire()
        return Sticker.from_json(new_data, self.auth)
