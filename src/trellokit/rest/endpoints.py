"""Endpoint catalogue - every REST call the library makes.

`EndpointFactory.build` turns a request type plus URL parameters into a
concrete method and resource path.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Endpoint:
    """A concrete HTTP method and resource path (relative to the API base URL)."""

    method: str
    resource: str


class EntityRequestType(Enum):
    """Request types as (method, resource template)."""

    # Actions
    ACTION_READ_REFRESH = ("GET", "actions/{id}")

    # Attachments
    ATTACHMENT_READ_REFRESH = ("GET", "cards/{card_id}/attachments/{id}")
    ATTACHMENT_WRITE_DELETE = ("DELETE", "cards/{card_id}/attachments/{id}")

    # Boards
    BOARD_READ_REFRESH = ("GET", "boards/{id}")
    BOARD_READ_ACTIONS = ("GET", "boards/{id}/actions")
    BOARD_READ_CARDS = ("GET", "boards/{id}/cards")
    BOARD_READ_LABELS = ("GET", "boards/{id}/labels")
    BOARD_READ_LISTS = ("GET", "boards/{id}/lists")
    BOARD_READ_MEMBERS = ("GET", "boards/{id}/members")
    BOARD_READ_POWER_UPS = ("GET", "boards/{id}/plugins")
    BOARD_WRITE_ADD_LABEL = ("POST", "boards/{id}/labels")
    BOARD_WRITE_ADD_LIST = ("POST", "boards/{id}/lists")
    BOARD_WRITE_UPDATE = ("PUT", "boards/{id}")
    BOARD_WRITE_DELETE = ("DELETE", "boards/{id}")

    # Cards
    CARD_READ_REFRESH = ("GET", "cards/{id}")
    CARD_READ_ACTIONS = ("GET", "cards/{id}/actions")
    CARD_READ_ATTACHMENTS = ("GET", "cards/{id}/attachments")
    CARD_READ_MEMBERS = ("GET", "cards/{id}/members")
    CARD_READ_STICKERS = ("GET", "cards/{id}/stickers")
    CARD_WRITE_ADD_ATTACHMENT = ("POST", "cards/{id}/attachments")
    CARD_WRITE_ADD_STICKER = ("POST", "cards/{id}/stickers")
    CARD_WRITE_REMOVE_STICKER = ("DELETE", "cards/{id}/stickers/{sticker_id}")
    CARD_WRITE_UPDATE = ("PUT", "cards/{id}")
    CARD_WRITE_DELETE = ("DELETE", "cards/{id}")

    # Labels
    LABEL_READ_REFRESH = ("GET", "labels/{id}")
    LABEL_WRITE_UPDATE = ("PUT", "labels/{id}")
    LABEL_WRITE_DELETE = ("DELETE", "labels/{id}")

    # Lists
    LIST_READ_REFRESH = ("GET", "lists/{id}")
    LIST_READ_ACTIONS = ("GET", "lists/{id}/actions")
    LIST_READ_CARDS = ("GET", "lists/{id}/cards")
    LIST_WRITE_ADD_CARD = ("POST", "cards")
    LIST_WRITE_UPDATE = ("PUT", "lists/{id}")

    # Members
    MEMBER_READ_REFRESH = ("GET", "members/{id}")
    MEMBER_READ_ACTIONS = ("GET", "members/{id}/actions")
    MEMBER_READ_BOARDS = ("GET", "members/{id}/boards")
    MEMBER_READ_STICKERS = ("GET", "members/{id}/customStickers")
    MEMBER_WRITE_ADD_BOARD = ("POST", "boards")
    MEMBER_WRITE_ADD_STICKER = ("POST", "members/{id}/customStickers")
    MEMBER_WRITE_UPDATE = ("PUT", "members/{id}")

    # Organizations
    ORGANIZATION_READ_REFRESH = ("GET", "organizations/{id}")
    ORGANIZATION_READ_BOARDS = ("GET", "organizations/{id}/boards")
    ORGANIZATION_READ_MEMBERS = ("GET", "organizations/{id}/members")
    ORGANIZATION_WRITE_UPDATE = ("PUT", "organizations/{id}")

    # Power-ups
    POWER_UP_READ_REFRESH = ("GET", "plugins/{id}")

    # Stickers
    STICKER_READ_REFRESH = ("GET", "cards/{card_id}/stickers/{id}")
    STICKER_WRITE_UPDATE = ("PUT", "cards/{card_id}/stickers/{id}")

    # Service
    SERVICE_READ_SEARCH = ("GET", "search")

    @property
    def method(self) -> str:
        return self.value[0]

    @property
    def template(self) -> str:
        return self.value[1]

    @property
    def placeholders(self) -> list[str]:
        return [name for _, name, _, _ in string.Formatter().parse(self.template) if name]


class EndpointFactory:
    """Builds concrete endpoints from request types."""

    @staticmethod
    def build(
        request_type: EntityRequestType, url_params: dict[str, Any] | None = None
    ) -> Endpoint:
        """Fill the request type's resource template.

        Args:
            request_type: Which call to make.
            url_params: Values for the `{placeholders}` in the template.

        Returns:
            Endpoint with the method and the filled resource path.

        Raises:
            ValueError: If a placeholder has no value.
        """
        url_params = url_params or {}
        missing = [
            name for name in request_type.placeholders if url_params.get(name) in (None, "")
        ]
        if missing:
            raise ValueError(
                f"{request_type.name} requires URL parameter(s): {', '.join(missing)}"
            )
        resource = request_type.template.format(
            **{key: str(value) for key, value in url_params.items()}
        )
        return Endpoint(method=request_type.method, resource=resource)
