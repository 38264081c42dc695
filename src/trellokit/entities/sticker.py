"""Sticker entity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.core.cache import get_cache
from trellokit.core.synchronization import Field
from trellokit.core.validation import NULLABLE_HAS_VALUE, NumericRule
from trellokit.entities.base import TrelloEntity
from trellokit.entities.json_models import JsonSticker
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.core.auth import TrelloAuthorization

NUMBER = NumericRule()


class Sticker(TrelloEntity):
    """A sticker placed on a card, or one of a member's custom stickers.

    Stickers placed on a card (created with a `card_id`) can be moved, rotated
    and deleted. Custom stickers only carry their image.
    """

    _json_type = JsonSticker
    _read_request = EntityRequestType.STICKER_READ_REFRESH
    _write_request = EntityRequestType.STICKER_WRITE_UPDATE

    name = Field("image", readonly=True)
    left = Field(rules=[NULLABLE_HAS_VALUE, NUMBER])
    top = Field(rules=[NULLABLE_HAS_VALUE, NUMBER])
    z_index = Field(rules=[NULLABLE_HAS_VALUE, NumericRule(min=0)])
    rotation = Field("rotate", rules=[NULLABLE_HAS_VALUE, NumericRule(min=0, max=359)])

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
        if not card_id:
            # Custom stickers are only readable through the member's listing.
            self._context.read_request = None
            self._context.write_request = None

    @property
    def image_url(self) -> str | None:
        self._context.synchronize()
        data = self._context.data
        return data.image_url or data.url

    def delete(self) -> None:
        """Remove the sticker from its card.

        Raises:
            NotImplementedError: If the sticker is not placed on a card.
        """
        if not self.card_id:
            raise NotImplementedError("Only stickers placed on a card can be deleted")
        if self._context.is_deleted:
            return
        endpoint = EndpointFactory.build(
            EntityRequestType.CARD_WRITE_REMOVE_STICKER,
            {"id": self.card_id, "sticker_id": self.id},
        )
        JsonRepository.execute(self.auth, endpoint)
        self._context.is_deleted = True
        get_cache().remove(self)
