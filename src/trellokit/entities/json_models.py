"""JSON payload models (Pydantic v2).

Field names are snake_case; the service's camelCase names are generated as
aliases. Unknown keys are kept (`extra="allow"`) so nothing the service sends
is lost when data is merged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TrelloJsonModel(BaseModel):
    """Base for all payload models."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, alias_generator=to_camel)

    id: str | None = None


class JsonBoardPreferences(TrelloJsonModel):
    permission_level: str | None = None
    voting: str | None = None
    comments: str | None = None
    invitations: str | None = None
    self_join: bool | None = None
    card_covers: bool | None = None
    calendar_feed_enabled: bool | None = None
    card_aging: str | None = None
    background: str | None = None
    background_color: str | None = None
    background_image: str | None = None


class JsonBoard(TrelloJsonModel):
    name: str | None = None
    desc: str | None = None
    closed: bool | None = None
    subscribed: bool | None = None
    pinned: bool | None = None
    url: str | None = None
    short_url: str | None = None
    id_organization: str | None = None
    prefs: JsonBoardPreferences | None = None
    date_last_activity: datetime | None = None


class JsonList(TrelloJsonModel):
    name: str | None = None
    closed: bool | None = None
    pos: float | None = None
    subscribed: bool | None = None
    id_board: str | None = None


class JsonCard(TrelloJsonModel):
    name: str | None = None
    desc: str | None = None
    closed: bool | None = None
    pos: float | None = None
    due: datetime | None = None
    due_complete: bool | None = None
    url: str | None = None
    short_url: str | None = None
    id_board: str | None = None
    id_list: str | None = None
    id_labels: list[str] = Field(default_factory=list)
    id_members: list[str] = Field(default_factory=list)
    date_last_activity: datetime | None = None


class JsonLabel(TrelloJsonModel):
    name: str | None = None
    color: str | None = None
    id_board: str | None = None
    uses: int | None = None


class JsonMember(TrelloJsonModel):
    username: str | None = None
    full_name: str | None = None
    initials: str | None = None
    avatar_url: str | None = None
    bio: str | None = None
    url: str | None = None
    confirmed: bool | None = None


class JsonOrganization(TrelloJsonModel):
    name: str | None = None
    display_name: str | None = None
    desc: str | None = None
    website: str | None = None
    url: str | None = None


class JsonAction(TrelloJsonModel):
    type: str | None = None
    date: datetime | None = None
    data: dict[str, Any] = Field(default_factory=dict)
    id_member_creator: str | None = None
    member_creator: JsonMember | None = None


class JsonSticker(TrelloJsonModel):
    image: str | None = None
    image_url: str | None = None
    url: str | None = None
    left: float | None = None
    top: float | None = None
    z_index: int | None = None
    rotate: int | None = None


class JsonAttachment(TrelloJsonModel):
    name: str | None = None
    url: str | None = None
    size: int | None = Field(default=None, alias="bytes")
    mime_type: str | None = None
    date: datetime | None = None
    id_member: str | None = None
    is_upload: bool | None = None


class JsonPowerUp(TrelloJsonModel):
    name: str | None = None
    is_public: bool | None = Field(default=None, alias="public")


class JsonSearch(TrelloJsonModel):
    actions: list[JsonAction] = Field(default_factory=list)
    boards: list[JsonBoard] = Field(default_factory=list)
    cards: list[JsonCard] = Field(default_factory=list)
    members: list[JsonMember] = Field(default_factory=list)
    organizations: list[JsonOrganization] = Field(default_factory=list)
