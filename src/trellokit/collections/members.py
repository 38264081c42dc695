"""Read-only member, action and power-up collections."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.base import ReadOnlyCollection
from trellokit.rest.endpoints import EntityRequestType

if TYPE_CHECKING:
    from trellokit.entities.action import Action
    from trellokit.entities.member import Member
    from trellokit.entities.power_up import PowerUp


class MemberCollection(ReadOnlyCollection["Member"]):
    """Members of a board, card or organization."""

    _default_read_request = EntityRequestType.BOARD_READ_MEMBERS

    def _entity_type(self) -> Any:
        from trellokit.entities.member import Member

        return Member


class ActionCollection(ReadOnlyCollection["Action"]):
    """The activity history of a board, card, list or member (newest first)."""

    _default_read_request = EntityRequestType.BOARD_READ_ACTIONS

    def _entity_type(self) -> Any:
        from trellokit.entities.action import Action

        return Action


class PowerUpCollection(ReadOnlyCollection["PowerUp"]):
    """Power-ups enabled on a board."""

    _default_read_request = EntityRequestType.BOARD_READ_POWER_UPS

    def _entity_type(self) -> Any:
        from trellokit.entities.power_up import PowerUp

        return PowerUp
