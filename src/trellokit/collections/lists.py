"""List collection on a board."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellokit.collections.base import ReadOnlyCollection
from trellokit.core.validation import NOT_NULL_OR_WHITESPACE, POSITION, validate_value
from trellokit.entities.json_models import JsonList
from trellokit.rest.endpoints import EndpointFactory, EntityRequestType
from trellokit.rest.repository import JsonRepository

if TYPE_CHECKING:
    from trellokit.entities.trello_list import List


class ReadOnlyListCollection(ReadOnlyCollection["List"]):
    _default_read_request = EntityRequestType.BOARD_READ_LISTS

    def _entity_type(self) -> Any:
        from trellokit.entities.trello_list import List

        return List


class ListCollection(ReadOnlyListCollection):
    """The open lists on a board."""

    def add(self, name: str, position: float | str | None = None) -> List:
        """Create a list on the board.

        Args:
            name: The list name.
            position: "top", "bottom" or a positive number. Default is the
                service's choice (bottom).

        Raises:
            TrelloValidationError: If `name` is blank or `position` is invalid.
        """
        from trellokit.entities.trello_list import List

        validate_value(name, NOT_NULL_OR_WHITESPACE)
        validate_value(position, POSITION)

        parameters: dict[str, Any] = {"name": name}
        if position is not None:
            parameters["pos"] = position

        endpoint = EndpointFactory.build(EntityRequestType.BOARD_WRITE_ADD_LIST, {"id": self.owner_id})
        new_data = JsonRepository.execute(self.auth, endpoint, parameters, response_type=JsonList)
        self.expire()
        return List.from_json(new_data, self.auth)
