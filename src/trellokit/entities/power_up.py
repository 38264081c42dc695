"""Power-up entity."""

from __future__ import annotations

from trellokit.core.synchronization import Field
from trellokit.entities.base import TrelloEntity
from trellokit.entities.json_models import JsonPowerUp
from trellokit.rest.endpoints import EntityRequestType


class PowerUp(TrelloEntity):
    """A power-up (plugin) that can be enabled on boards."""

    _json_type = JsonPowerUp
    _read_request = EntityRequestType.POWER_UP_READ_REFRESH

    name = Field(readonly=True)
    is_public = Field(readonly=True)

    def __str__(self) -> str:
        return self.name or self.id
